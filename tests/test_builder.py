"""Tests for builder.py: the create-timeline sequence against a host."""

import logging
from unittest.mock import MagicMock

import pytest

from conftest import FakeHost
from timelinecreator.builder import TimelineCreationError, TimelineResult, create_timeline
from timelinecreator.model.track_config import TrackConfiguration


class TestCreateTimeline:
    def test_creates_and_names_tracks(self, fake_host, sample_config):
        result = create_timeline(fake_host, sample_config)

        timeline = fake_host.timelines["Edit v1"]
        assert fake_host.current is timeline
        assert timeline.tracks["video"] == ["Video", "VFX", "Titles"]
        assert timeline.tracks["audio"] == ["VO", "SFX"]
        assert timeline.start_timecode == "01:00:00:00"
        assert result.video_track_count == 3
        assert result.audio_track_count == 2
        assert result.warnings == []

    def test_blank_names_left_alone(self, fake_host, mix_config):
        create_timeline(fake_host, mix_config)
        tracks = fake_host.timelines["Mix"].tracks["audio"]
        assert tracks == ["Dialog", "Audio 2", "Music", "FX"]

    def test_existing_tracks_not_duplicated(self, fake_host):
        config = TrackConfiguration(timeline_name="One", video_track_count=1, audio_track_count=1)
        result = create_timeline(fake_host, config)
        assert result.video_track_count == 1
        assert result.audio_track_count == 1

    def test_fewer_names_than_tracks(self, fake_host):
        config = TrackConfiguration(
            timeline_name="T", video_track_count=3, audio_track_count=1,
            video_track_names=["Main"],
        )
        create_timeline(fake_host, config)
        assert fake_host.timelines["T"].tracks["video"] == ["Main", "Video 2", "Video 3"]

    def test_empty_name_rejected(self, fake_host):
        with pytest.raises(TimelineCreationError, match="cannot be empty"):
            create_timeline(fake_host, TrackConfiguration(timeline_name="  "))
        assert fake_host.timelines == {}

    def test_existing_timeline_rejected(self, sample_config):
        host = FakeHost(existing=["Edit v1"])
        with pytest.raises(TimelineCreationError, match="already exists"):
            create_timeline(host, sample_config)

    def test_host_refuses(self, sample_config):
        host = FakeHost(refuse_create=True)
        with pytest.raises(TimelineCreationError, match="Failed to create"):
            create_timeline(host, sample_config)

    def test_invalid_timecode_warns(self, fake_host):
        config = TrackConfiguration(timeline_name="T", start_timecode="whenever")
        result = create_timeline(fake_host, config)
        assert fake_host.timelines["T"].start_timecode == "00:00:00:00"
        assert result.warnings == ["Invalid start timecode format. Using 00:00:00:00"]

    def test_rejected_timecode_warns(self, sample_config):
        host = FakeHost(accept_timecode=False)
        result = create_timeline(host, sample_config)
        assert result.warnings == ["Unable to set start timecode to 01:00:00:00"]
        # The timeline is still built
        assert result.video_track_count == 3

    def test_host_call_order(self):
        host = MagicMock()
        host.timeline_exists.return_value = False
        timeline = host.create_empty_timeline.return_value
        timeline.set_start_timecode.return_value = True
        timeline.get_track_count.return_value = 1
        config = TrackConfiguration(
            timeline_name="Seq", video_track_count=2, audio_track_count=1,
            video_track_names=["A", "B"], audio_track_names=["C"],
        )

        create_timeline(host, config)

        host.create_empty_timeline.assert_called_once_with("Seq")
        host.set_current_timeline.assert_called_once_with(timeline)
        timeline.add_track.assert_called_once_with("video")
        names = [c.args for c in timeline.set_track_name.call_args_list]
        assert names == [("video", 1, "A"), ("video", 2, "B"), ("audio", 1, "C")]

    def test_logs_host_timeline_name(self, fake_host, sample_config, caplog):
        with caplog.at_level(logging.INFO, logger="timelinecreator.builder"):
            create_timeline(fake_host, sample_config)
        assert "Created timeline 'Edit v1'" in caplog.text


class TestTimelineResult:
    def test_status_text(self):
        result = TimelineResult("T", 3, 2, "00:00:00:00")
        assert result.status_text == "Timeline created successfully! Video: 3, Audio: 2"

    def test_status_text_with_warning(self):
        result = TimelineResult("T", 1, 1, "00:00:00:00", warnings=["Unable to set start timecode"])
        assert result.status_text.endswith(" | Unable to set start timecode")
