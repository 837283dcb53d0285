from __future__ import annotations

import json
from pathlib import Path

from bezmorph._config import (
    DEFAULT_CONFIG,
    DisplaySettings,
    ensure_user_config,
    get_display_settings,
    settings_from_mapping,
)


def test_default_config_written(isolated_config: Path):
    ensure_user_config()
    assert isolated_config.exists()
    assert json.loads(isolated_config.read_text()) == DEFAULT_CONFIG
    assert get_display_settings() == DisplaySettings()


def test_existing_config_is_kept(isolated_config: Path):
    isolated_config.parent.mkdir(parents=True)
    isolated_config.write_text(json.dumps({"canvas_size": 640, "handle_in_color": "#0f0"}))
    ensure_user_config()
    settings = get_display_settings()
    assert settings.canvas_size == 640.0
    assert settings.handle_in_color == "#0f0"
    assert settings.handle_out_color == DisplaySettings().handle_out_color


def test_malformed_config_falls_back(isolated_config: Path):
    isolated_config.parent.mkdir(parents=True)
    isolated_config.write_text("{not json")
    assert get_display_settings() == DisplaySettings()


def test_invalid_values_fall_back_per_key():
    settings = settings_from_mapping(
        {
            "canvas_size": -5,
            "point_size": "big",
            "animation_speed": 4,
            "animation_start": 1.5,
            "stroke_color": "black",
        }
    )
    defaults = DisplaySettings()
    assert settings.canvas_size == defaults.canvas_size
    assert settings.point_size == defaults.point_size
    assert settings.animation_speed == 4.0
    assert settings.animation_start == defaults.animation_start
    assert settings.stroke_color == defaults.stroke_color


def test_animation_start_accepts_zero():
    assert settings_from_mapping({"animation_start": 0}).animation_start == 0.0
