import os
import sys
from pathlib import Path

import pytest

# Renderer tests only draw on off-screen surfaces
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")


def pytest_configure() -> None:
    """Ensure `src/` is on sys.path so tests can import `fire_spread.*`.

    This repo uses the common `src/` layout but is not necessarily installed as a package
    in the active environment.
    """

    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def sample_grid_size():
    """Provide a standard grid size for tests."""
    return (10, 10)


@pytest.fixture
def model(sample_grid_size):
    """A deterministic model: no regrowth, no lightning, fixed seed."""
    from fire_spread.model import FireModel

    width, height = sample_grid_size
    return FireModel(width=width, height=height, seed=1)
