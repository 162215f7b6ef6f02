"""YAML timeline layout files for batch/CLI usage."""

from __future__ import annotations

import warnings
from dataclasses import dataclass, replace
from pathlib import Path

import yaml

from timelinecreator.model.track_config import TrackConfiguration

KNOWN_TOP_KEYS = {"timeline", "start_timecode", "video", "audio", "preset"}
KNOWN_TRACK_KEYS = {"count", "names"}


@dataclass
class LayoutConfig:
    """All fields are None by default; unset means 'use the default'."""

    preset: str | None = None
    timeline_name: str | None = None
    start_timecode: str | None = None

    video_track_count: int | None = None
    video_track_names: list[str] | None = None
    audio_track_count: int | None = None
    audio_track_names: list[str] | None = None


def _warn_unknown_keys(keys: set[str], known: set[str], section: str) -> None:
    unknown = keys - known
    for key in sorted(unknown, key=str):
        warnings.warn(f"Unknown key '{key}' in {section} section of layout config", stacklevel=3)


def _as_count(value, section: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"'{section}.count' must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"'{section}.count' must be an integer, got {value!r}")


def _parse_tracks(raw, section: str) -> tuple[int | None, list[str] | None]:
    """Return (count, names) for a 'video' or 'audio' section."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        # Shorthand: video: 4
        return raw, None
    if isinstance(raw, list):
        # Shorthand: video: [A, B, C]
        names = ["" if n is None else str(n) for n in raw]
        return len(names), names
    if isinstance(raw, dict):
        _warn_unknown_keys(set(raw.keys()), KNOWN_TRACK_KEYS, section)
        count = _as_count(raw["count"], section) if "count" in raw else None
        names = None
        if "names" in raw:
            if not isinstance(raw["names"], list):
                raise ValueError(f"'{section}.names' must be a list of strings")
            names = ["" if n is None else str(n) for n in raw["names"]]
            if count is None:
                count = len(names)
        return count, names
    raise ValueError(f"'{section}' must be a count, a list of names or a mapping")


def load_layout_config(path: str | Path) -> LayoutConfig:
    """Load a YAML layout file and return a LayoutConfig."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Layout file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise ValueError(f"Invalid layout file {path}: {e}")
    if raw is None:
        # Empty YAML file
        return LayoutConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"Layout config must be a YAML mapping, got {type(raw).__name__}")

    _warn_unknown_keys(set(raw.keys()), KNOWN_TOP_KEYS, "top-level")

    cfg = LayoutConfig()

    if "preset" in raw:
        cfg.preset = str(raw["preset"])
    if "timeline" in raw:
        cfg.timeline_name = str(raw["timeline"])
    if "start_timecode" in raw:
        value = raw["start_timecode"]
        if not isinstance(value, str):
            # Unquoted 10:00:00:00 is a YAML 1.1 sexagesimal integer
            raise ValueError("'start_timecode' must be a quoted string, e.g. \"01:00:00:00\"")
        cfg.start_timecode = value

    if "video" in raw:
        cfg.video_track_count, cfg.video_track_names = _parse_tracks(raw["video"], "video")
    if "audio" in raw:
        cfg.audio_track_count, cfg.audio_track_names = _parse_tracks(raw["audio"], "audio")

    return cfg


def apply_layout(config: LayoutConfig, base: TrackConfiguration | None = None) -> TrackConfiguration:
    """Overlay non-None LayoutConfig fields onto a copy of *base*."""
    base = base or TrackConfiguration()

    field_map = {
        "timeline_name": "timeline_name",
        "start_timecode": "start_timecode",
        "video_track_count": "video_track_count",
        "video_track_names": "video_track_names",
        "audio_track_count": "audio_track_count",
        "audio_track_names": "audio_track_names",
    }

    changes = {}
    for config_field, track_field in field_map.items():
        value = getattr(config, config_field)
        if value is not None:
            changes[track_field] = value

    return replace(base, **changes)
