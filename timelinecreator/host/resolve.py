"""DaVinci Resolve scripting adapter."""

from __future__ import annotations

import logging

from timelinecreator.host.base import HostUnavailableError, Timeline, TimelineHost

logger = logging.getLogger(__name__)


class ResolveTimeline(Timeline):
    def __init__(self, timeline):
        self._timeline = timeline

    @property
    def native(self):
        return self._timeline

    def get_name(self) -> str:
        return self._timeline.GetName()

    def set_start_timecode(self, timecode: str) -> bool:
        # Older Resolve builds do not expose SetStartTimecode
        setter = getattr(self._timeline, "SetStartTimecode", None)
        if setter is None:
            logger.warning("SetStartTimecode is not available in this Resolve version")
            return False
        return bool(setter(timecode))

    def get_track_count(self, kind: str) -> int:
        return int(self._timeline.GetTrackCount(kind) or 0)

    def add_track(self, kind: str) -> bool:
        return bool(self._timeline.AddTrack(kind))

    def set_track_name(self, kind: str, index: int, name: str) -> bool:
        return bool(self._timeline.SetTrackName(kind, index, name))


class ResolveHost(TimelineHost):
    """Wraps the current Resolve project and its media pool."""

    def __init__(self, project, media_pool):
        self._project = project
        self._media_pool = media_pool

    def timeline_names(self) -> list[str]:
        names = []
        for i in range(1, (self._project.GetTimelineCount() or 0) + 1):
            timeline = self._project.GetTimelineByIndex(i)
            if timeline:
                names.append(timeline.GetName())
        return names

    def create_empty_timeline(self, name: str) -> ResolveTimeline | None:
        timeline = self._media_pool.CreateEmptyTimeline(name)
        if not timeline:
            return None
        return ResolveTimeline(timeline)

    def set_current_timeline(self, timeline: Timeline) -> bool:
        native = timeline.native if isinstance(timeline, ResolveTimeline) else timeline
        return bool(self._project.SetCurrentTimeline(native))


def _load_scripting_module():
    """Import Resolve's scripting module (only available with Resolve installed)."""
    try:
        import DaVinciResolveScript
    except ImportError:
        raise HostUnavailableError(
            "DaVinciResolveScript module not found. Make sure DaVinci Resolve is "
            "installed and RESOLVE_SCRIPT_API / PYTHONPATH point at its Modules folder"
        )
    return DaVinciResolveScript


def connect(resolve=None) -> ResolveHost:
    """Attach to the running Resolve instance and its current project.

    Raises:
        HostUnavailableError: If Resolve, an open project or the media pool
            is missing.
    """
    if resolve is None:
        resolve = _load_scripting_module().scriptapp("Resolve")
    if not resolve:
        raise HostUnavailableError("DaVinci Resolve is not running")

    project = resolve.GetProjectManager().GetCurrentProject()
    if not project:
        raise HostUnavailableError("No project is open")

    media_pool = project.GetMediaPool()
    if not media_pool:
        raise HostUnavailableError("Media Pool is not available")

    logger.info("Connected to Resolve project %r", project.GetName())
    return ResolveHost(project, media_pool)
