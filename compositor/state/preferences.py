"""User verbosity preferences."""

from dataclasses import dataclass

from compositor.config import VerbositySettings
from compositor.core.types import DescriptionOrder


@dataclass
class VerbosityPreferences:
    """Flag bag set by configuration and read by the variable resolver.

    Mutated in place when the user changes a preference; there is one
    instance per session.
    """

    speak_roles: bool = True
    speak_collection_info: bool = True
    description_order: DescriptionOrder = DescriptionOrder.ROLE_NAME_STATE_POSITION
    speak_element_ids: bool = False
    speak_system_window_titles: bool = True
    usage_hint_enabled: bool = True
    # "Say capital" before single upper-case letters
    say_capital: bool = False

    @classmethod
    def from_settings(cls, settings: VerbositySettings) -> "VerbosityPreferences":
        return cls(
            speak_roles=settings.speak_roles,
            speak_collection_info=settings.speak_collection_info,
            description_order=settings.description_order,
            speak_element_ids=settings.speak_element_ids,
            speak_system_window_titles=settings.speak_system_window_titles,
            usage_hint_enabled=settings.usage_hint_enabled,
            say_capital=settings.say_capital,
        )
