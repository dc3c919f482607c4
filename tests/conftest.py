"""Pytest fixtures for tests."""

import json
from pathlib import Path

import pytest

from keyboard_layout.models import LED, Key, Layout


@pytest.fixture
def config_settings():
    """The reference keyboard_layout configuration namespace."""
    return {
        "layout": {
            "leds": [
                {"id": "l1", "x": 0, "y": 0},
                {"id": "l2", "x": 2, "y": 1.5},
                {"id": "l3", "x": 3, "y": 3},
            ],
            "keys": [
                {"id": "k1", "x": 0, "y": 0, "opts": {"led": "l1"}},
                {"id": "k2", "x": 2, "y": 1.5, "opts": {"width": 1.5, "height": 2, "led": "l2"}},
                {"id": "k3", "x": 5, "y": 0},
            ],
        }
    }


@pytest.fixture
def config_keys():
    """Keys matching the reference configuration."""
    return [
        Key(id="k1", x=0, y=0, width=1, height=1, led="l1"),
        Key(id="k2", x=2, y=1.5, width=1.5, height=2, led="l2"),
        Key(id="k3", x=5, y=0, width=1, height=1, led=None),
    ]


@pytest.fixture
def config_leds():
    """LEDs matching the reference configuration."""
    return [
        LED(id="l1", x=0, y=0),
        LED(id="l2", x=2, y=1.5),
        LED(id="l3", x=3, y=3),
    ]


@pytest.fixture
def config_layout(config_keys, config_leds):
    """Layout matching the reference configuration."""
    return Layout.new(config_keys, config_leds)


@pytest.fixture
def config_file(tmp_path: Path, config_settings) -> Path:
    """Write the reference configuration to a JSON file."""
    path = tmp_path / "layout.json"
    path.write_text(json.dumps(config_settings), encoding="utf-8")
    return path
