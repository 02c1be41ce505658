"""Unit tests for TrackerState."""

import pytest

from filereaper.models import TrackerState


class TestTrackerState:
    """Tests for TrackerState."""

    @pytest.mark.parametrize(
        ("state", "expected"),
        [
            (TrackerState.IDLE, True),
            (TrackerState.RUNNING, True),
            (TrackerState.DRAINING, False),
            (TrackerState.STOPPED, False),
        ],
    )
    def test_accepts_registrations(self, state: TrackerState, expected: bool) -> None:
        """Only IDLE and RUNNING accept new registrations."""
        assert state.accepts_registrations is expected

    def test_values(self) -> None:
        """States have lowercase string values."""
        assert TrackerState.DRAINING.value == "draining"
