"""Create a timeline in the host from a TrackConfiguration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from timelinecreator.host.base import TRACK_KINDS, TimelineHost
from timelinecreator.model.track_config import TrackConfiguration
from timelinecreator.timecode import normalize_timecode

logger = logging.getLogger(__name__)


class TimelineCreationError(RuntimeError):
    """The timeline could not be created at all."""


@dataclass
class TimelineResult:
    timeline_name: str
    video_track_count: int
    audio_track_count: int
    start_timecode: str
    warnings: list[str] = field(default_factory=list)

    @property
    def status_text(self) -> str:
        text = (
            f"Timeline created successfully! Video: {self.video_track_count}, "
            f"Audio: {self.audio_track_count}"
        )
        if self.warnings:
            text += " | " + " | ".join(self.warnings)
        return text


def create_timeline(host: TimelineHost, config: TrackConfiguration) -> TimelineResult:
    """Create, configure and name the tracks of a new timeline.

    Runs the fixed host sequence: create the timeline, make it current, set
    its start timecode, add tracks up to the requested counts, then rename
    them. Problems after the timeline exists are collected as warnings.

    Raises:
        TimelineCreationError: If the name is empty, already taken, or the
            host refuses to create the timeline.
    """
    name = config.timeline_name.strip()
    if not name:
        raise TimelineCreationError("Timeline name cannot be empty")
    if host.timeline_exists(name):
        raise TimelineCreationError(f"Timeline '{name}' already exists")

    timeline = host.create_empty_timeline(name)
    if timeline is None:
        raise TimelineCreationError("Failed to create timeline")
    logger.info("Created timeline %r", timeline.get_name())

    host.set_current_timeline(timeline)

    warnings: list[str] = []
    timecode, was_valid = normalize_timecode(config.start_timecode)
    if not was_valid:
        warnings.append(f"Invalid start timecode format. Using {timecode}")
    if not timeline.set_start_timecode(str(timecode)):
        warning = f"Unable to set start timecode to {timecode}"
        logger.warning(warning)
        warnings.append(warning)

    for kind in TRACK_KINDS:
        wanted = config.track_count(kind)
        current = timeline.get_track_count(kind)
        for _ in range(current, wanted):
            timeline.add_track(kind)

        names = config.track_names(kind)
        for index in range(1, min(wanted, len(names)) + 1):
            track_name = names[index - 1]
            if track_name:
                timeline.set_track_name(kind, index, track_name)

    result = TimelineResult(
        timeline_name=name,
        video_track_count=timeline.get_track_count("video"),
        audio_track_count=timeline.get_track_count("audio"),
        start_timecode=str(timecode),
        warnings=warnings,
    )
    logger.info(
        "Timeline %r ready: video=%d audio=%d",
        name, result.video_track_count, result.audio_track_count,
    )
    return result
