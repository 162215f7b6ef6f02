"""TrackConfiguration data model and configuration assembly."""

from __future__ import annotations

from dataclasses import dataclass, field

from timelinecreator.timecode import DEFAULT_TIMECODE, normalize_timecode

MIN_TRACKS = 1
MAX_TRACKS = 20

DEFAULT_TIMELINE_NAME = "New Timeline"
DEFAULT_VIDEO_TRACKS = 3
DEFAULT_AUDIO_TRACKS = 2

# Names pre-filled for a fresh layout; positions not listed fall back to
# default_track_name().
SUGGESTED_NAMES = {
    "video": ["Video", "VFX", "Titles"],
    "audio": ["VO", "SFX"],
}


def default_track_name(kind: str, index: int) -> str:
    """Name used when track *index* (1-based) was left blank."""
    return f"{kind.capitalize()} {index}"


def suggested_track_name(kind: str, index: int) -> str:
    suggestions = SUGGESTED_NAMES.get(kind, [])
    if 1 <= index <= len(suggestions):
        return suggestions[index - 1]
    return default_track_name(kind, index)


def clamp_track_count(count: int) -> int:
    return max(MIN_TRACKS, min(MAX_TRACKS, int(count)))


@dataclass
class TrackConfiguration:
    timeline_name: str = DEFAULT_TIMELINE_NAME
    video_track_count: int = DEFAULT_VIDEO_TRACKS
    audio_track_count: int = DEFAULT_AUDIO_TRACKS
    video_track_names: list[str] = field(default_factory=list)
    audio_track_names: list[str] = field(default_factory=list)
    start_timecode: str = str(DEFAULT_TIMECODE)

    def track_count(self, kind: str) -> int:
        return self.video_track_count if kind == "video" else self.audio_track_count

    def track_names(self, kind: str) -> list[str]:
        return self.video_track_names if kind == "video" else self.audio_track_names

    def to_dict(self) -> dict:
        """Serialize to a plain mapping for the preset file."""
        return {
            "timeline_name": self.timeline_name,
            "video_track_count": self.video_track_count,
            "audio_track_count": self.audio_track_count,
            "video_track_names": list(self.video_track_names),
            "audio_track_names": list(self.audio_track_names),
            "start_timecode": self.start_timecode,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TrackConfiguration":
        """Create from a mapping, tolerating missing or odd-shaped fields.

        Unknown keys are ignored and wrongly typed values fall back to the
        field default. Track names are kept exactly as stored, blanks
        included.
        """
        return cls(
            timeline_name=_as_str(data.get("timeline_name"), DEFAULT_TIMELINE_NAME),
            video_track_count=_as_int(data.get("video_track_count"), DEFAULT_VIDEO_TRACKS),
            audio_track_count=_as_int(data.get("audio_track_count"), DEFAULT_AUDIO_TRACKS),
            video_track_names=_as_name_list(data.get("video_track_names")),
            audio_track_names=_as_name_list(data.get("audio_track_names")),
            start_timecode=_as_str(data.get("start_timecode"), str(DEFAULT_TIMECODE)),
        )


def _as_str(value, default: str) -> str:
    if isinstance(value, str):
        return value
    return default


def _as_int(value, default: int) -> int:
    # bool is an int subclass but never a meaningful track count
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def _as_name_list(value) -> list[str]:
    """Accept a list of names or a {1: name, 2: name} mapping."""
    if isinstance(value, list):
        return [v if isinstance(v, str) else "" if v is None else str(v) for v in value]
    if isinstance(value, dict):
        positioned = {}
        for key, name in value.items():
            index = _as_int(key, 0)
            if index >= 1:
                positioned[index] = name if isinstance(name, str) else ""
        return [positioned[i] for i in sorted(positioned)]
    return []


def build_track_configuration(
    timeline_name: str = DEFAULT_TIMELINE_NAME,
    video_track_count: int = DEFAULT_VIDEO_TRACKS,
    audio_track_count: int = DEFAULT_AUDIO_TRACKS,
    video_track_names: list[str] | None = None,
    audio_track_names: list[str] | None = None,
    start_timecode: str | None = None,
) -> tuple[TrackConfiguration, bool]:
    """Assemble a TrackConfiguration from raw user input.

    Track counts are clamped into [MIN_TRACKS, MAX_TRACKS] and blank or
    missing names become "Video i" / "Audio i". Returns the configuration
    and whether *start_timecode* parsed cleanly.
    """
    video_count = clamp_track_count(video_track_count)
    audio_count = clamp_track_count(audio_track_count)
    timecode, was_valid = normalize_timecode(start_timecode)

    config = TrackConfiguration(
        timeline_name=(timeline_name or "").strip(),
        video_track_count=video_count,
        audio_track_count=audio_count,
        video_track_names=_fill_names("video", video_track_names or [], video_count),
        audio_track_names=_fill_names("audio", audio_track_names or [], audio_count),
        start_timecode=str(timecode),
    )
    return config, was_valid


def _fill_names(kind: str, names: list[str], count: int) -> list[str]:
    filled = []
    for i in range(1, count + 1):
        name = names[i - 1].strip() if i <= len(names) and names[i - 1] else ""
        filled.append(name or default_track_name(kind, i))
    return filled
