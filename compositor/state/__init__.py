"""Session state: timed flags, navigation state, verbosity preferences."""

from compositor.state.navigation import NavigationState
from compositor.state.preferences import VerbosityPreferences
from compositor.state.timed_flags import TimedFlag, TimedFlagRegistry

__all__ = [
    "NavigationState",
    "TimedFlag",
    "TimedFlagRegistry",
    "VerbosityPreferences",
]
