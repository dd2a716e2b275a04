"""Tests for TimedFlagRegistry."""

from compositor.core.types import EventKind
from compositor.state import TimedFlagRegistry
from tests.conftest import FakeClock


class TestCheckAndClear:
    """Test at-most-once consumption."""

    def test_raised_flag_reads_true_once(self, flags):
        """A raised flag is consumed by the first check."""
        flags.raise_flag(EventKind.SYNCED_ACCESSIBILITY_FOCUS)

        assert flags.check_and_clear(EventKind.SYNCED_ACCESSIBILITY_FOCUS) is True
        assert flags.check_and_clear(EventKind.SYNCED_ACCESSIBILITY_FOCUS) is False

    def test_never_raised_is_false(self, flags):
        """Checking a flag that was never raised returns False."""
        assert flags.check_and_clear(EventKind.SKIP_SELECTION_CHANGED_AFTER_FOCUSED) is False

    def test_raising_twice_is_still_one_pending(self, flags):
        """Raising an already pending flag does not queue a second one."""
        flags.raise_flag(EventKind.SKIP_FOCUS_PROCESSING_AFTER_IME_CLOSED)
        flags.raise_flag(EventKind.SKIP_FOCUS_PROCESSING_AFTER_IME_CLOSED)

        assert flags.check_and_clear(EventKind.SKIP_FOCUS_PROCESSING_AFTER_IME_CLOSED) is True
        assert flags.check_and_clear(EventKind.SKIP_FOCUS_PROCESSING_AFTER_IME_CLOSED) is False

    def test_flags_are_independent(self, flags):
        """Consuming one kind leaves other kinds pending."""
        flags.raise_flag(EventKind.SKIP_SELECTION_CHANGED_AFTER_FOCUSED)
        flags.raise_flag(EventKind.SYNCED_ACCESSIBILITY_FOCUS)

        assert flags.check_and_clear(EventKind.SYNCED_ACCESSIBILITY_FOCUS) is True
        assert flags.is_pending(EventKind.SKIP_SELECTION_CHANGED_AFTER_FOCUSED) is True


class TestRecency:
    """Test max-age expiry."""

    def test_no_max_age_keeps_flag(self, flags, clock):
        """Without a max age, flags stay valid until consumed."""
        flags.raise_flag(EventKind.SYNCED_ACCESSIBILITY_FOCUS)
        clock.advance(3600)

        assert flags.check_and_clear(EventKind.SYNCED_ACCESSIBILITY_FOCUS) is True

    def test_stale_flag_reads_false_and_is_cleared(self):
        """A flag older than max age reads False and is removed anyway."""
        clock = FakeClock()
        flags = TimedFlagRegistry(max_age=0.5, clock=clock)
        flags.raise_flag(EventKind.SYNCED_ACCESSIBILITY_FOCUS)
        clock.advance(1.0)

        assert flags.is_pending(EventKind.SYNCED_ACCESSIBILITY_FOCUS) is False
        assert flags.check_and_clear(EventKind.SYNCED_ACCESSIBILITY_FOCUS) is False
        assert flags.raised_at(EventKind.SYNCED_ACCESSIBILITY_FOCUS) is None

    def test_fresh_flag_within_max_age(self):
        """A flag inside the max age window reads True."""
        clock = FakeClock()
        flags = TimedFlagRegistry(max_age=0.5, clock=clock)
        flags.raise_flag(EventKind.SYNCED_ACCESSIBILITY_FOCUS)
        clock.advance(0.25)

        assert flags.check_and_clear(EventKind.SYNCED_ACCESSIBILITY_FOCUS) is True

    def test_raise_refreshes_stamp(self, flags, clock):
        """Raising again moves the raised-at time forward."""
        flags.raise_flag(EventKind.SYNCED_ACCESSIBILITY_FOCUS)
        clock.advance(2)
        flags.raise_flag(EventKind.SYNCED_ACCESSIBILITY_FOCUS)

        assert flags.raised_at(EventKind.SYNCED_ACCESSIBILITY_FOCUS) == clock.now


class TestClearAll:
    """Test session teardown."""

    def test_clear_all_drops_pending(self, flags):
        """clear_all removes every pending flag."""
        flags.raise_flag(EventKind.SYNCED_ACCESSIBILITY_FOCUS)
        flags.raise_flag(EventKind.SKIP_SELECTION_CHANGED_AFTER_CURSOR_RESET)

        flags.clear_all()

        assert flags.is_pending(EventKind.SYNCED_ACCESSIBILITY_FOCUS) is False
        assert flags.check_and_clear(EventKind.SKIP_SELECTION_CHANGED_AFTER_CURSOR_RESET) is False
