"""Shared test fixtures: preset files, sample layouts, an in-memory host."""

import pytest

from timelinecreator.host.base import Timeline, TimelineHost
from timelinecreator.model.track_config import TrackConfiguration
from timelinecreator.presets import PresetStore


class FakeTimeline(Timeline):
    """Timeline that starts with one track of each kind, like a new Resolve timeline."""

    def __init__(self, name: str, accept_timecode: bool = True):
        self.name = name
        self.accept_timecode = accept_timecode
        self.start_timecode = None
        self.tracks = {"video": ["Video 1"], "audio": ["Audio 1"]}

    def get_name(self) -> str:
        return self.name

    def set_start_timecode(self, timecode: str) -> bool:
        if not self.accept_timecode:
            return False
        self.start_timecode = timecode
        return True

    def get_track_count(self, kind: str) -> int:
        return len(self.tracks[kind])

    def add_track(self, kind: str) -> bool:
        self.tracks[kind].append(f"{kind.capitalize()} {len(self.tracks[kind]) + 1}")
        return True

    def set_track_name(self, kind: str, index: int, name: str) -> bool:
        self.tracks[kind][index - 1] = name
        return True


class FakeHost(TimelineHost):
    def __init__(self, existing: list[str] | None = None, refuse_create: bool = False,
                 accept_timecode: bool = True):
        self.timelines = {n: FakeTimeline(n) for n in existing or []}
        self.refuse_create = refuse_create
        self.accept_timecode = accept_timecode
        self.current = None

    def timeline_names(self) -> list[str]:
        return list(self.timelines)

    def create_empty_timeline(self, name: str):
        if self.refuse_create:
            return None
        timeline = FakeTimeline(name, accept_timecode=self.accept_timecode)
        self.timelines[name] = timeline
        return timeline

    def set_current_timeline(self, timeline) -> bool:
        self.current = timeline
        return True


@pytest.fixture
def fake_host():
    return FakeHost()


@pytest.fixture
def presets_file(tmp_path):
    return tmp_path / "presets.yaml"


@pytest.fixture
def store(presets_file):
    return PresetStore(presets_file)


@pytest.fixture
def sample_config():
    return TrackConfiguration(
        timeline_name="Edit v1",
        video_track_count=3,
        audio_track_count=2,
        video_track_names=["Video", "VFX", "Titles"],
        audio_track_names=["VO", "SFX"],
        start_timecode="01:00:00:00",
    )


@pytest.fixture
def mix_config():
    return TrackConfiguration(
        timeline_name="Mix",
        video_track_count=1,
        audio_track_count=4,
        video_track_names=["Picture"],
        audio_track_names=["Dialog", "", "Music", "FX"],
        start_timecode="00:59:50:00",
    )
