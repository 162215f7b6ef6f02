"""Tests for host/resolve.py using mocked Resolve scripting objects."""

import sys
from unittest.mock import MagicMock, patch

import pytest

from timelinecreator.host.base import HostUnavailableError
from timelinecreator.host.resolve import ResolveHost, ResolveTimeline, connect


def _native_timeline(name):
    timeline = MagicMock()
    timeline.GetName.return_value = name
    return timeline


@pytest.fixture
def resolve_app():
    resolve = MagicMock()
    project = resolve.GetProjectManager.return_value.GetCurrentProject.return_value
    project.GetName.return_value = "Feature"
    existing = [_native_timeline("Assembly"), _native_timeline("Fine Cut")]
    project.GetTimelineCount.return_value = len(existing)
    project.GetTimelineByIndex.side_effect = lambda i: existing[i - 1]
    return resolve


class TestConnect:
    def test_connects(self, resolve_app):
        host = connect(resolve_app)
        assert isinstance(host, ResolveHost)

    def test_not_running(self):
        module = MagicMock()
        module.scriptapp.return_value = None
        with patch.dict(sys.modules, {"DaVinciResolveScript": module}):
            with pytest.raises(HostUnavailableError, match="not running"):
                connect()

    def test_no_project(self, resolve_app):
        resolve_app.GetProjectManager.return_value.GetCurrentProject.return_value = None
        with pytest.raises(HostUnavailableError, match="No project is open"):
            connect(resolve_app)

    def test_no_media_pool(self, resolve_app):
        project = resolve_app.GetProjectManager.return_value.GetCurrentProject.return_value
        project.GetMediaPool.return_value = None
        with pytest.raises(HostUnavailableError, match="Media Pool"):
            connect(resolve_app)

    def test_scripting_module_missing(self):
        with patch.dict(sys.modules, {"DaVinciResolveScript": None}):
            with pytest.raises(HostUnavailableError, match="DaVinciResolveScript"):
                connect()

    def test_uses_scripting_module(self, resolve_app):
        module = MagicMock()
        module.scriptapp.return_value = resolve_app
        with patch.dict(sys.modules, {"DaVinciResolveScript": module}):
            connect()
        module.scriptapp.assert_called_once_with("Resolve")


class TestResolveHost:
    def test_timeline_exists(self, resolve_app):
        host = connect(resolve_app)
        assert host.timeline_exists("Fine Cut")
        assert not host.timeline_exists("Online")

    def test_create_empty_timeline(self, resolve_app):
        host = connect(resolve_app)
        timeline = host.create_empty_timeline("Online")
        assert isinstance(timeline, ResolveTimeline)
        pool = resolve_app.GetProjectManager.return_value.GetCurrentProject.return_value.GetMediaPool.return_value
        pool.CreateEmptyTimeline.assert_called_once_with("Online")

    def test_create_refused(self, resolve_app):
        project = resolve_app.GetProjectManager.return_value.GetCurrentProject.return_value
        project.GetMediaPool.return_value.CreateEmptyTimeline.return_value = None
        assert connect(resolve_app).create_empty_timeline("Online") is None

    def test_set_current_passes_native(self, resolve_app):
        host = connect(resolve_app)
        native = _native_timeline("Online")
        host.set_current_timeline(ResolveTimeline(native))
        project = resolve_app.GetProjectManager.return_value.GetCurrentProject.return_value
        project.SetCurrentTimeline.assert_called_once_with(native)


class TestResolveTimeline:
    def test_delegates(self):
        native = _native_timeline("T")
        native.GetTrackCount.return_value = 2
        native.SetStartTimecode.return_value = True
        timeline = ResolveTimeline(native)

        assert timeline.get_name() == "T"
        assert timeline.get_track_count("audio") == 2
        assert timeline.set_start_timecode("01:00:00:00")
        timeline.add_track("video")
        timeline.set_track_name("video", 1, "Main")

        native.SetStartTimecode.assert_called_once_with("01:00:00:00")
        native.AddTrack.assert_called_once_with("video")
        native.SetTrackName.assert_called_once_with("video", 1, "Main")

    def test_missing_set_start_timecode(self):
        native = MagicMock(spec=["GetName", "GetTrackCount"])
        assert ResolveTimeline(native).set_start_timecode("01:00:00:00") is False
