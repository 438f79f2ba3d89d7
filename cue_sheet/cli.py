"""Command-line front end for parsing, validating and re-emitting CUE sheets."""

import argparse
import json
import sys
from typing import TextIO

import structlog
from dotenv import load_dotenv

from . import __version__
from .config import CueSheetConfig
from .cue_time import CueTime
from .exceptions import CueParsingError
from .logging_config import configure_logging
from .models import CueSheet, Diagnostic, ParseResult
from .parser import CueParser
from .serializer import create_minimal_cue_sheet, format_cue_sheet, serialize_timeline

logger = structlog.get_logger()

RULE = "━" * 28


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cue-sheet", description="Parse and re-emit CUE sheet files")
    parser.add_argument("file", help="CUE file to read")
    parser.add_argument("-v", "--version", action="version", version=f"cue-sheet {__version__}")
    parser.add_argument("-j", "--json", action="store_true", help="Output as JSON")
    parser.add_argument("-c", "--cue", action="store_true", help="Output as CUE sheet format")
    parser.add_argument("--minimal", action="store_true", help="Output minimal CUE sheet (with --cue)")
    parser.add_argument("--timeline", action="store_true", help="Output a HH:MM:SS track timeline")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only show errors")
    parser.add_argument("--validate", action="store_true", help="Only validate, don't output parsed content")
    parser.add_argument("--stats", action="store_true", help="Show parsing statistics")
    return parser


def _time_with_seconds(time: CueTime) -> str:
    return f"{time} ({time.to_seconds():.2f}s)"


def print_summary(cue_sheet: CueSheet, out: TextIO) -> None:
    """Print a human-readable overview of disc and track fields."""
    disc = cue_sheet.disc
    print("📀 CUE Sheet Information", file=out)
    print(RULE, file=out)

    for label, value in (
        ("Title", disc.title),
        ("Artist", disc.performer),
        ("Songwriter", disc.songwriter),
        ("Composer", disc.composer),
        ("Arranger", disc.arranger),
        ("Catalog", disc.catalog),
        ("CD-TEXT", disc.cdtextfile),
        ("Genre", disc.genre),
        ("UPC/EAN", disc.upc_ean),
        ("Message", disc.message),
    ):
        if value:
            print(f"{label + ':':<11}{value}", file=out)

    print(f"\n🎵 Tracks ({cue_sheet.get_track_count()})", file=out)
    print(RULE, file=out)

    for track in cue_sheet.tracks:
        print(f"\n[{track.number:02d}] {track.title or 'Untitled'}", file=out)
        print(f"     Mode: {track.mode.value}", file=out)

        if track.performer and track.performer != disc.performer:
            print(f"     Artist: {track.performer}", file=out)
        for label, value in (
            ("Songwriter", track.songwriter),
            ("Composer", track.composer),
            ("Arranger", track.arranger),
            ("ISRC", track.isrc),
            ("Message", track.message),
        ):
            if value:
                print(f"     {label}: {value}", file=out)

        if track.file:
            file_format = f" ({track.file.format.value})" if track.file.format else ""
            print(f"     File: {track.file.filename}{file_format}", file=out)
        if track.flags:
            print(f"     Flags: {', '.join(flag.value for flag in track.flags)}", file=out)
        if track.pregap:
            print(f"     Pregap: {_time_with_seconds(track.pregap)}", file=out)
        if track.indexes:
            print("     Indexes:", file=out)
            for index in track.indexes:
                print(f"       {index.number:02d}: {_time_with_seconds(index.time)}", file=out)
        if track.postgap:
            print(f"     Postgap: {_time_with_seconds(track.postgap)}", file=out)


def print_stats(result: ParseResult, out: TextIO) -> None:
    """Print track/index/file counts and the approximate duration."""
    print("\n📊 Parsing Statistics", file=out)
    print(RULE, file=out)

    cue_sheet = result.cue_sheet
    if cue_sheet:
        print("✅ Successfully parsed", file=out)
        print(f"   Tracks: {cue_sheet.get_track_count()}", file=out)
        print(f"   Indexes: {sum(len(track.indexes) for track in cue_sheet.tracks)}", file=out)
        print(f"   Files referenced: {len(cue_sheet.get_referenced_files())}", file=out)

        if cue_sheet.tracks and cue_sheet.tracks[-1].indexes:
            last_time = max(index.time for index in cue_sheet.tracks[-1].indexes)
            print(f"   Approximate duration: {_time_with_seconds(last_time)}", file=out)
    else:
        print("❌ Parsing failed", file=out)

    if result.warnings:
        print(f"⚠️  Warnings: {len(result.warnings)}", file=out)
    if result.errors:
        print(f"🚨 Errors: {len(result.errors)}", file=out)


def print_diagnostics(errors: list[Diagnostic], warnings: list[Diagnostic], quiet: bool, out: TextIO) -> None:
    if warnings and not quiet:
        print("\n⚠️  Warnings:", file=out)
        for warning in warnings:
            print(f"   {warning}", file=out)

    if errors:
        print("\n🚨 Errors:", file=out)
        for error in errors:
            print(f"   {error}", file=out)
            if not quiet and error.raw_line.strip():
                print(f"      → {error.raw_line.strip()}", file=out)


def render(cue_sheet: CueSheet, args: argparse.Namespace, config: CueSheetConfig) -> str | None:
    """Render the requested output mode, or None for the summary view."""
    if args.json:
        return json.dumps(cue_sheet.to_dict(), indent=2, ensure_ascii=False)
    if args.timeline:
        return serialize_timeline(cue_sheet)
    if args.cue:
        if args.minimal:
            return create_minimal_cue_sheet(cue_sheet)
        return format_cue_sheet(cue_sheet, indent=config.output.indent, track_spacing=config.output.track_spacing)
    return None


def main(argv: list[str] | None = None, out: TextIO | None = None, err: TextIO | None = None) -> int:
    """Run the CLI.

    Returns:
        Process exit code: 1 when the file cannot be read or has parse errors,
        2 for invalid configuration
    """
    out = out or sys.stdout
    err = err or sys.stderr
    args = build_parser().parse_args(argv)

    load_dotenv()
    try:
        config = CueSheetConfig.from_env()
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}", file=err)
        return 2

    config_errors = config.validate()
    if config_errors:
        for message in config_errors:
            print(f"❌ Invalid configuration: {message}", file=err)
        return 2

    configure_logging(config.logging.level, config.logging.format)

    parser = CueParser(max_file_size=config.parser.max_file_size_bytes)
    try:
        result = parser.parse_file(args.file, encoding=config.parser.encoding)
    except CueParsingError as e:
        logger.error("Failed to read CUE file", path=args.file, error=str(e))
        print(f"❌ Error: {e}", file=err)
        return 1

    if result.errors or result.warnings:
        print_diagnostics(result.errors, result.warnings, args.quiet, err)

    if result.errors:
        if args.validate:
            print("\n❌ Validation failed", file=out)
        return 1

    if args.validate:
        print("\n✅ Validation successful", file=out)
        if args.stats:
            print_stats(result, out)
        return 0

    if result.cue_sheet and not args.quiet:
        rendered = render(result.cue_sheet, args, config)
        if rendered is None:
            print_summary(result.cue_sheet, out)
        else:
            print(rendered, end="" if rendered.endswith("\n") else "\n", file=out)

    if args.stats:
        print_stats(result, out)

    return 0
