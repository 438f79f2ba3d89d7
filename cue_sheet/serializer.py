"""CUE sheet serializer - converts CueSheet objects back to CUE text.

Track lines are indented with two tabs and track fields with three. Some DJ
software (rekordbox) only accepts sheets laid out this way.

Consecutive tracks that share a file emit the FILE line once, on the first of
those tracks.
"""

from .cue_time import HMSTime
from .models import CueSheet, DiscInfo, FileInfo, Track

TAB = "\t"
TRACK_DEPTH = 2
FIELD_DEPTH = 3


def escape_string(value: str) -> str:
    """Escape double quotes by doubling them."""
    return value.replace('"', '""')


def quote(value: str) -> str:
    return f'"{escape_string(value)}"'


def _file_line(file: FileInfo, always_quote: bool = False) -> str:
    filename = file.filename
    if always_quote or any(char in filename for char in ' \t"'):
        filename = quote(filename)
    if file.format:
        return f"FILE {filename} {file.format.value}"
    return f"FILE {filename}"


def _remark_line(remark: str) -> str:
    return f"REM {remark}" if remark else "REM"


def _disc_lines(disc: DiscInfo) -> list[str]:
    """Global section in its fixed field order."""
    lines = [_remark_line(remark) for remark in disc.remarks]

    if disc.catalog is not None:
        lines.append(f"CATALOG {disc.catalog}")

    for command, value in (
        ("CDTEXTFILE", disc.cdtextfile),
        ("TITLE", disc.title),
        ("PERFORMER", disc.performer),
        ("SONGWRITER", disc.songwriter),
        ("COMPOSER", disc.composer),
        ("ARRANGER", disc.arranger),
        ("MESSAGE", disc.message),
        ("DISC_ID", disc.disc_id),
        ("GENRE", disc.genre),
        ("UPC_EAN", disc.upc_ean),
    ):
        if value is not None:
            lines.append(f"{command} {quote(value)}")

    return lines


def _track_lines(track: Track, last_file: str | None, indent: str) -> tuple[list[str], str | None]:
    """Lines for one track plus the filename most recently emitted.

    Returns:
        Tuple of (lines, last emitted filename) to carry into the next track
    """
    track_indent = indent * TRACK_DEPTH
    field_indent = indent * FIELD_DEPTH

    lines = [f"{track_indent}TRACK {track.number:02d} {track.mode.value}"]
    fields = []

    for command, value in (
        ("TITLE", track.title),
        ("PERFORMER", track.performer),
        ("SONGWRITER", track.songwriter),
        ("COMPOSER", track.composer),
        ("ARRANGER", track.arranger),
        ("MESSAGE", track.message),
    ):
        if value is not None:
            fields.append(f"{command} {quote(value)}")

    if track.isrc is not None:
        fields.append(f"ISRC {track.isrc}")

    if track.file and track.file.filename != last_file:
        fields.append(_file_line(track.file))
        last_file = track.file.filename

    if track.flags:
        fields.append("FLAGS " + " ".join(flag.value for flag in track.flags))

    if track.pregap is not None:
        fields.append(f"PREGAP {track.pregap}")

    fields.extend(f"INDEX {index.number:02d} {index.time}" for index in track.sorted_indexes())

    if track.postgap is not None:
        fields.append(f"POSTGAP {track.postgap}")

    fields.extend(_remark_line(remark) for remark in track.remarks)

    lines.extend(field_indent + line for line in fields)
    return lines, last_file


def _join(lines: list[str]) -> str:
    return "\n".join(lines) + "\n"


def serialize_cue_sheet(cue_sheet: CueSheet) -> str:
    """Serialize a CueSheet back to CUE text.

    Args:
        cue_sheet: The parsed CueSheet object

    Returns:
        CUE sheet text terminated by a newline
    """
    lines = _disc_lines(cue_sheet.disc)

    last_file = None
    for track in cue_sheet.tracks:
        track_lines, last_file = _track_lines(track, last_file, TAB)
        lines.extend(track_lines)

    return _join(lines)


def format_cue_sheet(cue_sheet: CueSheet, indent: str = TAB, track_spacing: bool = True) -> str:
    """Serialize a CueSheet with a custom indentation unit and optional spacing.

    Args:
        cue_sheet: The CueSheet to format
        indent: Indentation unit, repeated twice for TRACK lines and three times for track fields
        track_spacing: Insert a blank line after the global block and between tracks

    Returns:
        Formatted CUE sheet text
    """
    lines = _disc_lines(cue_sheet.disc)

    last_file = None
    for position, track in enumerate(cue_sheet.tracks):
        if track_spacing and (position > 0 or lines):
            lines.append("")
        track_lines, last_file = _track_lines(track, last_file, indent)
        lines.extend(track_lines)

    return _join(lines)


def create_minimal_cue_sheet(cue_sheet: CueSheet) -> str:
    """Create a CUE sheet with only the essentials for sharing.

    Keeps the disc title/performer and, per track, the TRACK line, title,
    FILE and INDEX 01. Everything else is dropped.
    """
    lines = []

    if cue_sheet.disc.title is not None:
        lines.append(f"TITLE {quote(cue_sheet.disc.title)}")
    if cue_sheet.disc.performer is not None:
        lines.append(f"PERFORMER {quote(cue_sheet.disc.performer)}")

    field_indent = TAB * FIELD_DEPTH
    for track in cue_sheet.tracks:
        lines.append(f"{TAB * TRACK_DEPTH}TRACK {track.number:02d} {track.mode.value}")

        if track.title is not None:
            lines.append(f"{field_indent}TITLE {quote(track.title)}")

        if track.file:
            lines.append(field_indent + _file_line(track.file, always_quote=True))

        start = track.get_start_time()
        if start is not None:
            lines.append(f"{field_indent}INDEX 01 {start}")

    return _join(lines)


def serialize_timeline(cue_sheet: CueSheet) -> str:
    """Render a flat ``HH:MM:SS Performer - Title`` listing, one line per track.

    Each track is placed at its INDEX 01, or at its lowest-numbered index when
    INDEX 01 is missing. Tracks without indexes are left out.
    """
    lines = []

    for track in cue_sheet.tracks:
        start = track.get_start_time()
        if start is None:
            if not track.indexes:
                continue
            start = track.sorted_indexes()[0].time

        timestamp = HMSTime.from_seconds(start.to_seconds())
        title = track.title if track.title is not None else f"Track {track.number:02d}"
        performer = track.performer or cue_sheet.disc.performer

        if performer:
            lines.append(f"{timestamp} {performer} - {title}")
        else:
            lines.append(f"{timestamp} {title}")

    return _join(lines) if lines else ""
