"""Named track-layout presets persisted as a YAML file."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path

import yaml

from timelinecreator.model.track_config import TrackConfiguration

logger = logging.getLogger(__name__)

PRESETS_FILENAME = ".davinci_resolve_timeline_presets.yaml"
APPDATA_PRESETS_FILENAME = "DaVinci Resolve Timeline Presets.yaml"


def default_presets_path() -> Path:
    """Per-user presets file: %APPDATA% on Windows, $HOME elsewhere."""
    appdata = os.environ.get("APPDATA")
    if appdata:
        return Path(appdata) / APPDATA_PRESETS_FILENAME
    home = os.environ.get("HOME")
    if home:
        return Path(home) / PRESETS_FILENAME
    return Path(PRESETS_FILENAME)


class PresetStore:
    """Loads and saves a {name: TrackConfiguration} mapping.

    The store holds no presets itself. Every mutating helper returns a new
    mapping and leaves its input untouched; persist the result with save().
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> dict[str, TrackConfiguration]:
        """Read all presets. A missing, empty or corrupt file gives {}."""
        if not self.path.exists():
            logger.debug("No presets file at %s", self.path)
            return {}
        try:
            raw = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning("Ignoring unreadable presets file %s: %s", self.path, e)
            return {}

        if raw is None:
            return {}
        if not isinstance(raw, dict):
            logger.warning(
                "Ignoring presets file %s: expected a mapping, got %s",
                self.path, type(raw).__name__,
            )
            return {}

        presets: dict[str, TrackConfiguration] = {}
        for name, data in raw.items():
            if not isinstance(data, dict):
                logger.warning("Skipping malformed preset %r in %s", name, self.path)
                continue
            presets[str(name)] = TrackConfiguration.from_dict(data)
        logger.debug("Loaded %d preset(s) from %s", len(presets), self.path)
        return presets

    def save(self, presets: dict[str, TrackConfiguration]) -> bool:
        """Rewrite the whole presets file. Returns False if it could not be written."""
        data = {name: config.to_dict() for name, config in presets.items()}
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            text = yaml.safe_dump(
                data, sort_keys=True, allow_unicode=True, default_flow_style=False
            )
            # Write beside the target so the final replace stays on one filesystem
            fd, tmp_name = tempfile.mkstemp(
                prefix=".presets-", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            # mkstemp files are 0600; keep the permissions of the file being replaced
            if self.path.exists():
                shutil.copymode(self.path, tmp_name)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except (OSError, yaml.YAMLError) as e:
            logger.error("Could not save presets to %s: %s", self.path, e)
            return False
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass
        logger.debug("Saved %d preset(s) to %s", len(presets), self.path)
        return True

    @staticmethod
    def list_names(presets: dict[str, TrackConfiguration]) -> list[str]:
        return sorted(presets)

    @staticmethod
    def get(presets: dict[str, TrackConfiguration], name: str) -> TrackConfiguration | None:
        return presets.get(name)

    @staticmethod
    def exists(presets: dict[str, TrackConfiguration], name: str) -> bool:
        return name in presets

    @staticmethod
    def put(
        presets: dict[str, TrackConfiguration], name: str, config: TrackConfiguration
    ) -> dict[str, TrackConfiguration]:
        """Add or overwrite *name*. Confirming an overwrite is the caller's job."""
        updated = dict(presets)
        updated[name] = config
        return updated

    @staticmethod
    def remove(
        presets: dict[str, TrackConfiguration], name: str
    ) -> tuple[dict[str, TrackConfiguration], bool]:
        """Delete *name* if present. Returns (new mapping, existed)."""
        if name not in presets:
            return presets, False
        updated = dict(presets)
        del updated[name]
        return updated, True
