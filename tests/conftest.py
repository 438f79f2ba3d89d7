"""Pytest configuration and fixtures."""

import os
from pathlib import Path

import pytest

from cue_sheet.parser import CueParser

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding sample CUE files."""
    return FIXTURES_DIR


@pytest.fixture
def sample_cue_path() -> Path:
    """Album-style CUE file with a global FILE and four tracks."""
    return FIXTURES_DIR / "sample.cue"


@pytest.fixture
def rekordbox_cue_path() -> Path:
    """rekordbox-style mix CUE with per-track FILE lines and CRLF endings."""
    return FIXTURES_DIR / "rekordbox.cue"


@pytest.fixture
def parser() -> CueParser:
    return CueParser()


@pytest.fixture(autouse=True)
def clean_cue_sheet_env(monkeypatch):
    """Keep CUE_SHEET_* variables from the host out of tests."""
    for name in list(os.environ):
        if name.startswith("CUE_SHEET_"):
            monkeypatch.delenv(name)
