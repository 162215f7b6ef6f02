"""Abstract host application interface that timelines are built against."""

from abc import ABC, abstractmethod

TRACK_KINDS = ("video", "audio")


class HostUnavailableError(RuntimeError):
    """The host application, its project or its media pool cannot be reached."""


class Timeline(ABC):
    """A timeline inside the host application."""

    @abstractmethod
    def get_name(self) -> str:
        ...

    @abstractmethod
    def set_start_timecode(self, timecode: str) -> bool:
        """Set the start timecode (canonical HH:MM:SS:FF). Returns success."""
        ...

    @abstractmethod
    def get_track_count(self, kind: str) -> int:
        ...

    @abstractmethod
    def add_track(self, kind: str) -> bool:
        ...

    @abstractmethod
    def set_track_name(self, kind: str, index: int, name: str) -> bool:
        """Rename track *index* (1-based) of the given kind."""
        ...


class TimelineHost(ABC):
    """The open project of the host application."""

    @abstractmethod
    def timeline_names(self) -> list[str]:
        ...

    def timeline_exists(self, name: str) -> bool:
        return name in self.timeline_names()

    @abstractmethod
    def create_empty_timeline(self, name: str) -> Timeline | None:
        """Create a new empty timeline, or return None if the host refuses."""
        ...

    @abstractmethod
    def set_current_timeline(self, timeline: Timeline) -> bool:
        ...
