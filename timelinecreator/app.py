"""Command runners behind the CLI. Each returns a process exit code."""

from __future__ import annotations

import logging
import sys
from dataclasses import replace

from timelinecreator.config import Settings
from timelinecreator.model.track_config import (
    MAX_TRACKS,
    TrackConfiguration,
    build_track_configuration,
    suggested_track_name,
)
from timelinecreator.presets import PresetStore
from timelinecreator.yaml_config import LayoutConfig, apply_layout

NO_PRESETS_TEXT = "No presets available"


def setup_logging(level: str = "WARNING", verbose: bool = False) -> None:
    if verbose:
        level = "DEBUG"
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="%(levelname)s: %(message)s",
    )


def default_configuration(settings: Settings) -> TrackConfiguration:
    """Starting layout when no preset is chosen: the settings defaults plus
    the usual pre-filled track names."""
    return TrackConfiguration(
        timeline_name=settings.default_timeline_name,
        video_track_count=settings.resolved_video_tracks,
        audio_track_count=settings.resolved_audio_tracks,
        video_track_names=[suggested_track_name("video", i) for i in range(1, MAX_TRACKS + 1)],
        audio_track_names=[suggested_track_name("audio", i) for i in range(1, MAX_TRACKS + 1)],
    )


def resolve_configuration(
    base: TrackConfiguration,
    layout: LayoutConfig | None = None,
    timeline_name: str | None = None,
    video_tracks: int | None = None,
    audio_tracks: int | None = None,
    video_names: list[str] | None = None,
    audio_names: list[str] | None = None,
    start_timecode: str | None = None,
) -> tuple[TrackConfiguration, bool]:
    """Layer overrides onto *base* and assemble the final configuration.

    Precedence: command-line values > YAML layout > base (preset or
    settings defaults). Returns the configuration and whether the start
    timecode was valid.
    """
    config = apply_layout(layout, base) if layout else base

    # A list of names without an explicit count sets the count too
    if video_names is not None and video_tracks is None:
        video_tracks = len(video_names)
    if audio_names is not None and audio_tracks is None:
        audio_tracks = len(audio_names)

    overrides = {
        "timeline_name": timeline_name,
        "video_track_count": video_tracks,
        "audio_track_count": audio_tracks,
        "video_track_names": video_names,
        "audio_track_names": audio_names,
        "start_timecode": start_timecode,
    }
    config = replace(config, **{k: v for k, v in overrides.items() if v is not None})

    return build_track_configuration(
        timeline_name=config.timeline_name,
        video_track_count=config.video_track_count,
        audio_track_count=config.audio_track_count,
        video_track_names=config.video_track_names,
        audio_track_names=config.audio_track_names,
        start_timecode=config.start_timecode,
    )


def describe_configuration(config: TrackConfiguration) -> str:
    lines = [
        f"Timeline:       {config.timeline_name}",
        f"Start timecode: {config.start_timecode}",
        f"Video tracks:   {config.video_track_count}",
    ]
    lines += [f"  V{i}: {name}" for i, name in enumerate(config.video_track_names, 1)]
    lines.append(f"Audio tracks:   {config.audio_track_count}")
    lines += [f"  A{i}: {name}" for i, name in enumerate(config.audio_track_names, 1)]
    return "\n".join(lines)


def run_create(
    config: TrackConfiguration,
    timecode_valid: bool = True,
    host=None,
    dry_run: bool = False,
) -> int:
    """Create the timeline in the host (DaVinci Resolve unless *host* is given)."""
    from timelinecreator.builder import TimelineCreationError, create_timeline
    from timelinecreator.host.base import HostUnavailableError

    if not timecode_valid:
        print(
            f"Warning: invalid start timecode format. Using {config.start_timecode}",
            file=sys.stderr,
        )

    if dry_run:
        print(describe_configuration(config))
        return 0

    try:
        if host is None:
            from timelinecreator.host.resolve import connect

            host = connect()
        result = create_timeline(host, config)
    except (HostUnavailableError, TimelineCreationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(result.status_text)
    return 0


def run_presets_list(store: PresetStore) -> int:
    names = store.list_names(store.load())
    if not names:
        print(NO_PRESETS_TEXT)
        return 0
    for name in names:
        print(name)
    return 0


def run_presets_show(store: PresetStore, name: str) -> int:
    config = store.get(store.load(), name)
    if config is None:
        print(f"Error: preset '{name}' not found", file=sys.stderr)
        return 1
    print(describe_configuration(config))
    return 0


def run_presets_save(
    store: PresetStore, name: str, config: TrackConfiguration, force: bool = False
) -> int:
    name = name.strip()
    if not name:
        print("Error: preset name cannot be empty", file=sys.stderr)
        return 1

    presets = store.load()
    if store.exists(presets, name) and not force:
        print(
            f"Error: preset '{name}' already exists. Use --force to overwrite",
            file=sys.stderr,
        )
        return 1

    if not store.save(store.put(presets, name, config)):
        print(f"Error: could not write presets file {store.path}", file=sys.stderr)
        return 1

    print(f"Preset '{name}' saved successfully")
    return 0


def run_presets_delete(store: PresetStore, name: str) -> int:
    presets, existed = store.remove(store.load(), name)
    if not existed:
        print(f"Error: preset '{name}' not found", file=sys.stderr)
        return 1

    if not store.save(presets):
        print(f"Error: could not write presets file {store.path}", file=sys.stderr)
        return 1

    print(f"Preset '{name}' deleted successfully")
    return 0
