"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from tuxkbd.device import KeyboardController
from tuxkbd.models import KEYBOARD_SCHEMA

# Contents as the kernel module exposes them: colors are bare hex digits,
# and every attribute ends with a newline.
DEVICE_FILES = {
    "brightness": "255\n",
    "color_left": "ff0000\n",
    "color_center": "00ff00\n",
    "color_right": "0000ff\n",
    "color_extra": "ffffff\n",
    "mode": "0\n",
    "state": "1\n",
}


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def device_root(temp_dir):
    """Create a fake tuxedo_keyboard attribute directory."""
    root = temp_dir / "tuxedo_keyboard"
    root.mkdir()
    for name, content in DEVICE_FILES.items():
        (root / name).write_text(content)
    return root


@pytest.fixture
def controller(device_root):
    """Create a KeyboardController pointed at the fake attribute directory."""
    return KeyboardController(root=device_root, schema=KEYBOARD_SCHEMA)


@pytest.fixture
def snapshot():
    """A complete record as read_config() returns it for DEVICE_FILES."""
    return {
        "brightness": "255\n",
        "color_left": "0xff0000\n",
        "color_center": "0x00ff00\n",
        "color_right": "0x0000ff\n",
        "color_extra": "0xffffff\n",
        "mode": "0\n",
        "state": "1\n",
    }
