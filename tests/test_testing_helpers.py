"""Tests for waypoint.testing — EventRecorder and assert_location."""

import pytest

from waypoint.router import MemoryRouter
from waypoint.testing import Call, EventRecorder, assert_location


class TestEventRecorder:
    def test_records_calls(self) -> None:
        recorder = EventRecorder()
        recorder("/one", {"shallow": False})
        recorder("/two", key=1)

        assert recorder.called is True
        assert recorder.call_count == 2
        assert recorder.calls[0] == Call(args=("/one", {"shallow": False}))
        assert recorder.last == Call(args=("/two",), kwargs={"key": 1})

    def test_assert_called_with_failure(self) -> None:
        recorder = EventRecorder()
        recorder("/one")
        with pytest.raises(AssertionError, match="Expected a call"):
            recorder.assert_called_with("/two")

    def test_assert_not_called(self) -> None:
        recorder = EventRecorder()
        recorder.assert_not_called()
        recorder()
        with pytest.raises(AssertionError):
            recorder.assert_not_called()

    def test_reset(self) -> None:
        recorder = EventRecorder()
        recorder()
        recorder.reset()
        assert recorder.called is False
        assert recorder.last is None


class TestAssertLocation:
    def test_passes(self) -> None:
        router = MemoryRouter()
        router.push("/a?b=1")
        assert_location(router, pathname="/a", as_path="/a?b=1", query={"b": "1"}, locale=None)

    def test_fails_with_message(self) -> None:
        router = MemoryRouter()
        router.push("/a")
        with pytest.raises(AssertionError, match="Expected pathname='/b'"):
            assert_location(router, pathname="/b")
