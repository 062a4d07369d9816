# Ensure the repository root is on sys.path so `posprint` can be imported in tests.

import sys
from pathlib import Path

import pytest


def _ensure_repo_root_on_syspath() -> None:
    here = Path(__file__).resolve()
    repo_str = str(here.parent.parent)
    if repo_str not in sys.path:
        sys.path.insert(0, repo_str)


_ensure_repo_root_on_syspath()

from posprint.protocol import BufferBuilder, Pixel  # noqa: E402

BLACK = Pixel(0, 0, 0, 255)
WHITE = Pixel(255, 255, 255, 255)


@pytest.fixture
def bare_builder() -> BufferBuilder:
    """Builder without preamble or trailer, so buffers hold only what a test writes."""
    return BufferBuilder(use_defaults=False)


@pytest.fixture
def black() -> Pixel:
    return BLACK


@pytest.fixture
def white() -> Pixel:
    return WHITE
