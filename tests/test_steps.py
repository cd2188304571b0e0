"""
Tests for Step

Tests clamped and looping navigation, start/end, construction-time
validation and the borrowed-sequence contract.
"""
import logging

import pytest

from domain import Step, StepOptions, steps


@pytest.fixture
def abc():
    return ["A", "B", "C"]


class TestStepConstruction:
    """Test defaults and construction-time validation."""

    def test_defaults(self, abc):
        s = steps(abc)
        assert s.index == 0
        assert s.current == "A"
        assert s.loop is False
        assert s.options == StepOptions()

    def test_init_index(self, abc):
        assert steps(abc, init_index=2).current == "C"

    def test_empty_sequence_rejected(self):
        with pytest.raises(ValueError, match="non-empty"):
            steps([])

    @pytest.mark.parametrize("init_index, expected", [(5, 2), (3, 2), (-1, 0), (-10, 0)])
    def test_out_of_range_init_index_is_clamped(self, abc, init_index, expected, caplog):
        with caplog.at_level(logging.WARNING, logger="domain.steps"):
            s = steps(abc, init_index=init_index)
        assert s.index == expected
        assert "clamped" in caplog.text

    def test_sequence_is_not_copied(self, abc):
        s = steps(abc)
        assert s.sequence is abc

    def test_accepts_any_sequence(self):
        s = Step("xyz", StepOptions(loop=True))
        s.prev()
        assert s.current == "z"


class TestBoundedNavigation:
    """loop=False clamps at both ends."""

    def test_next_clamps_at_last(self, abc):
        s = steps(abc)
        s.next()
        assert s.current == "B"
        s.next()
        assert s.current == "C"
        s.next()
        assert s.current == "C"

    def test_prev_clamps_at_first(self, abc):
        s = steps(abc)
        s.prev()
        assert s.current == "A"

    def test_single_item_sequence(self):
        s = steps(["only"])
        s.next()
        s.prev()
        assert s.current == "only"
        assert s.is_first and s.is_last


class TestLoopingNavigation:
    """loop=True wraps at both ends."""

    def test_next_wraps_from_last(self, abc):
        s = steps(abc, init_index=2, loop=True)
        s.next()
        assert s.current == "A"

    def test_prev_wraps_from_first(self, abc):
        s = steps(abc, loop=True)
        s.prev()
        assert s.current == "C"

    def test_full_cycle_returns_to_start(self, abc):
        s = steps(abc, loop=True)
        for _ in range(len(abc)):
            s.next()
        assert s.index == 0


class TestStartEnd:
    """start()/end() ignore loop mode and prior position."""

    @pytest.mark.parametrize("loop", [True, False])
    @pytest.mark.parametrize("init_index", [0, 1, 2])
    def test_start_and_end(self, abc, loop, init_index):
        s = steps(abc, init_index=init_index, loop=loop)
        s.start()
        assert s.current == "A"
        s.end()
        assert s.current == "C"

    def test_start_end_start_returns_to_zero(self, abc):
        s = steps(abc, loop=True)
        for move in (s.next, s.next, s.prev, s.next, s.next):
            move()
        s.start()
        s.end()
        s.start()
        assert s.index == 0

    def test_is_first_is_last(self, abc):
        s = steps(abc)
        assert s.is_first and not s.is_last
        s.end()
        assert s.is_last and not s.is_first


class TestBorrowedSequence:
    """The cursor reads the live sequence."""

    def test_current_reflects_external_mutation(self, abc):
        s = steps(abc, init_index=1)
        abc[1] = "Z"
        assert s.current == "Z"

    def test_navigation_uses_live_length(self, abc):
        s = steps(abc)
        abc.append("D")
        s.end()
        assert s.current == "D"
        assert len(s) == 4

    def test_navigation_does_not_mutate_sequence(self, abc):
        s = steps(abc, loop=True)
        s.next()
        s.prev()
        s.end()
        assert abc == ["A", "B", "C"]

    def test_emptied_sequence_raises_on_navigation(self, abc):
        s = steps(abc, loop=True)
        abc.clear()
        with pytest.raises(ValueError, match="empty"):
            s.next()


class TestStepNotification:
    """Listeners receive index changes."""

    def test_listener_receives_indexes(self, abc):
        s = steps(abc)
        events = []
        s.subscribe(lambda old, new: events.append((old, new)))
        s.next()
        s.end()
        s.next()  # clamped, no change
        s.start()
        assert events == [(0, 1), (1, 2), (2, 0)]
        assert s.version == 3

    def test_repr(self, abc):
        assert repr(steps(abc, loop=True)) == "Step(index=0, length=3, loop=True)"
