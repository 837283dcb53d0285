from __future__ import annotations

import json
import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

CONFIG_DIR = Path.home() / ".bezmorph"
CONFIG_FILE = CONFIG_DIR / "bezmorph.cfg"
DEFAULT_CONFIG = {
    "_comment": "Display settings for the bezmorph CLI and SVG output. Colors are CSS hex strings.",
    "canvas_size": 1000,
    "animation_speed": 2.0,
    "animation_start": 0.3,
    "point_size": 2.0,
    "stroke_color": "#000",
    "handle_in_color": "#ccc",
    "handle_out_color": "#b6b",
    "info_spacing": 20,
}
_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class DisplaySettings:
    """Resolved presentation settings from bezmorph.cfg."""

    canvas_size: float = 1000.0
    animation_speed: float = 2.0
    animation_start: float = 0.3
    point_size: float = 2.0
    stroke_color: str = "#000"
    handle_in_color: str = "#ccc"
    handle_out_color: str = "#b6b"
    info_spacing: float = 20.0


def ensure_user_config() -> None:
    """Ensure ~/.bezmorph/bezmorph.cfg exists with sane defaults."""

    try:
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    except OSError:
        return

    if CONFIG_FILE.exists():
        return

    try:
        CONFIG_FILE.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n")
    except OSError:
        return


def _load_user_config() -> Dict[str, Any]:
    ensure_user_config()
    try:
        data = json.loads(CONFIG_FILE.read_text())
    except (OSError, json.JSONDecodeError):
        return DEFAULT_CONFIG.copy()
    if not isinstance(data, dict):
        return DEFAULT_CONFIG.copy()
    return data


def _positive_number(value: Any) -> float | None:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if number != number or number <= 0:
        return None
    return number


def _color(value: Any) -> str | None:
    if isinstance(value, str) and _HEX_COLOR.match(value.strip()):
        return value.strip()
    return None


def settings_from_mapping(raw: Dict[str, Any]) -> DisplaySettings:
    """Build settings from a raw mapping, keeping defaults for invalid entries."""

    defaults = DisplaySettings()
    resolved: Dict[str, Any] = {}
    for item in fields(DisplaySettings):
        default = getattr(defaults, item.name)
        if item.name not in raw:
            continue
        if isinstance(default, str):
            value = _color(raw[item.name])
        elif item.name == "animation_start":
            value = _positive_number(raw[item.name])
            if value is None and raw[item.name] in (0, 0.0):
                value = 0.0
            if value is not None and value >= 1.0:
                value = None
        else:
            value = _positive_number(raw[item.name])
        if value is not None:
            resolved[item.name] = value
    return DisplaySettings(**resolved)


def get_display_settings() -> DisplaySettings:
    """Return the configured display settings."""

    return settings_from_mapping(_load_user_config())
