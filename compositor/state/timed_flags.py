"""One-shot timed flags.

Event processors raise a flag when they trigger a synthetic change (cursor
reset, focus sync, ...) and the template side consumes it to suppress the
duplicate announcement that change would otherwise produce.

Consumption is at-most-once: check_and_clear() removes the flag whatever it
returns. The registry is not synchronized; it relies on events and template
evaluation running on a single dispatch thread. A multi-threaded dispatcher
needs an atomic test-and-clear per flag.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from compositor.core.types import EventKind

logger = logging.getLogger(__name__)


@dataclass
class TimedFlag:
    """A pending flag and the monotonic time it was last raised."""

    kind: EventKind
    raised_at: float


class TimedFlagRegistry:
    """Set of pending event-kind flags.

    Usage:
        flags = TimedFlagRegistry()
        flags.raise_flag(EventKind.SYNCED_ACCESSIBILITY_FOCUS)
        flags.check_and_clear(EventKind.SYNCED_ACCESSIBILITY_FOCUS)  # True
        flags.check_and_clear(EventKind.SYNCED_ACCESSIBILITY_FOCUS)  # False
    """

    def __init__(
        self,
        max_age: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            max_age: Seconds after which a raised flag reads as absent.
                None keeps a flag until it is consumed.
            clock: Monotonic time source
        """
        self._max_age = max_age
        self._clock = clock
        self._flags: dict[int, TimedFlag] = {}

    def raise_flag(self, kind: EventKind) -> None:
        """Mark kind as pending. Raising again only refreshes the stamp."""
        self._flags[kind] = TimedFlag(kind=kind, raised_at=self._clock())
        logger.debug(f"Raised flag {kind!r}")

    def check_and_clear(self, kind: EventKind) -> bool:
        """Return whether kind is pending and clear it unconditionally."""
        flag = self._flags.pop(kind, None)
        if flag is None:
            return False
        return self._is_recent(flag)

    def is_pending(self, kind: EventKind) -> bool:
        """Non-destructive check, for diagnostics."""
        flag = self._flags.get(kind)
        return flag is not None and self._is_recent(flag)

    def raised_at(self, kind: EventKind) -> float | None:
        flag = self._flags.get(kind)
        return flag.raised_at if flag else None

    def clear_all(self) -> None:
        self._flags.clear()

    def _is_recent(self, flag: TimedFlag) -> bool:
        if self._max_age is None:
            return True
        return (self._clock() - flag.raised_at) <= self._max_age
