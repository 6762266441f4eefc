"""Shared fixtures for storyboard builder tests."""

import pytest

from storyboard_builder.models import Storyboard
from storyboard_builder.store import JsonFileStore, MemoryStore


SAMPLE_SCRIPT = (
    'Script Segment: "Welcome home."\n'
    "Camera pans left.\n"
    "---\n"
    "The hero arrives.\n"
)


@pytest.fixture
def sample_script():
    """The two-scene script used across workflow and CLI tests."""
    return SAMPLE_SCRIPT


@pytest.fixture
def sample_storyboard():
    """Pre-built storyboard with one voiced and one silent scene."""
    storyboard = Storyboard(id="1700000000000", title="Pilot", last_edited="2024-01-01T00:00:00.000Z")
    storyboard.add_scene(vo_script="Welcome home.", notes="Camera pans left.")
    storyboard.add_scene(vo_script="", notes="The hero arrives.")
    return storyboard


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def file_store(tmp_path):
    """JsonFileStore in a fresh temp directory (file not yet created)."""
    return JsonFileStore(str(tmp_path / "storage" / "storyboards.json"))
