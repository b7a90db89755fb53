"""Shared fixtures for spec parser tests."""

from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def widgets_spec() -> Path:
    return DATA_DIR / "widgets.spec"


@pytest.fixture
def write_spec(tmp_path):
    """Write spec text to a temporary file and return its path."""

    def _write(text: str, name: str = "test.spec") -> Path:
        path = tmp_path / name
        path.write_text(text)
        return path

    return _write
