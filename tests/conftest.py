"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_scales.layouts import LayoutLoader

LAYOUTS_LIBRARY_PATH = Path(__file__).parent.parent / "src" / "chuk_mcp_scales" / "layouts" / "library"


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_midi_path(temp_dir: Path) -> Path:
    """Path for a temporary MIDI drill file."""
    return temp_dir / "drill.mid"


@pytest.fixture
def library_path() -> Path:
    """Path to the shipped layout library."""
    return LAYOUTS_LIBRARY_PATH


@pytest.fixture
def layout_loader(temp_dir: Path, library_path: Path) -> LayoutLoader:
    """Loader over the shipped library with an empty project directory."""
    return LayoutLoader(library_path=library_path, project_path=temp_dir / "layouts")
