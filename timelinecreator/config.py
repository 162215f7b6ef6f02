"""Settings dataclass with JSON persistence."""

import json
from dataclasses import asdict, dataclass
from pathlib import Path

from timelinecreator.model.track_config import (
    DEFAULT_AUDIO_TRACKS,
    DEFAULT_TIMELINE_NAME,
    DEFAULT_VIDEO_TRACKS,
    clamp_track_count,
)
from timelinecreator.presets import default_presets_path

DEFAULT_CONFIG_DIR = Path.home() / ".timelinecreator"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "settings.json"


def _same_type(value, default) -> bool:
    # bool is an int subclass but never a track count
    if isinstance(value, bool) and not isinstance(default, bool):
        return False
    return isinstance(value, type(default))


@dataclass
class Settings:
    # Presets file; empty = per-user default location
    presets_path: str = ""

    # Values used when neither the command line nor a preset supplies one
    default_timeline_name: str = DEFAULT_TIMELINE_NAME
    default_video_tracks: int = DEFAULT_VIDEO_TRACKS
    default_audio_tracks: int = DEFAULT_AUDIO_TRACKS

    log_level: str = "WARNING"

    def save(self, path: Path | None = None) -> None:
        path = path or DEFAULT_CONFIG_PATH
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(asdict(self), indent=2))

    @classmethod
    def load(cls, path: Path | None = None) -> "Settings":
        path = path or DEFAULT_CONFIG_PATH
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text())
        except (json.JSONDecodeError, UnicodeDecodeError, OSError):
            return cls()
        if not isinstance(data, dict):
            return cls()

        # Unknown keys and wrongly typed values keep the field default
        defaults = cls()
        values = {
            k: v for k, v in data.items()
            if k in cls.__dataclass_fields__ and _same_type(v, getattr(defaults, k))
        }
        return cls(**values)

    @property
    def resolved_presets_path(self) -> Path:
        if self.presets_path:
            return Path(self.presets_path).expanduser()
        return default_presets_path()

    @property
    def resolved_video_tracks(self) -> int:
        try:
            return clamp_track_count(self.default_video_tracks)
        except (TypeError, ValueError):
            return DEFAULT_VIDEO_TRACKS

    @property
    def resolved_audio_tracks(self) -> int:
        try:
            return clamp_track_count(self.default_audio_tracks)
        except (TypeError, ValueError):
            return DEFAULT_AUDIO_TRACKS
