"""Shared fixtures: in-memory collaborators for the variable layer."""

import pytest

from compositor.core.types import (
    AccessibilityEvent,
    EventType,
    InputMode,
    PlatformCapabilities,
)
from compositor.state import NavigationState, TimedFlagRegistry, VerbosityPreferences
from compositor.templates import (
    CollectionPhraseComposer,
    ResolverContext,
    TextFunctionLibrary,
    VariableResolver,
)
from compositor.utilities.logger import CompositorLogger
from compositor.utilities.strings import ResourceStrings


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeNode:
    def __init__(self, window_id: int = 1, scrollable: bool = False, in_scrollable: bool = False):
        self.window_id = window_id
        self.scrollable = scrollable
        self.in_scrollable = in_scrollable


class FakeNodes:
    def nearest_scrollable_ancestor(self, node):
        return object() if node.in_scrollable else None

    def is_scrollable(self, node):
        return node.scrollable

    def window_id(self, node):
        return node.window_id


class FakeCollectionProvider:
    def __init__(self, state=None, error: Exception | None = None):
        self.state = state
        self.error = error
        self.calls = []

    def snapshot(self, focused_node, event):
        self.calls.append((focused_node, event))
        if self.error is not None:
            raise self.error
        return self.state


class FakeKeyCombos:
    def __init__(self, codes: dict[str, int] | None = None, texts: dict[int, str] | None = None):
        self.codes = codes or {}
        self.texts = texts or {}

    def code_for(self, action_key):
        return self.codes.get(action_key)

    def text_for(self, code):
        return self.texts.get(code)


class FakeGestures:
    def __init__(self, menu: str = "Swipe up then right", seek_bar: str | None = None):
        self.menu = menu
        self.seek_bar = seek_bar

    def menu_shortcut_text(self):
        return self.menu

    def seek_bar_shortcut_text(self):
        return self.seek_bar


class FakeWindows:
    def __init__(self, titles: dict[int, str] | None = None, split_displays: set[int] | None = None):
        self.titles = titles or {}
        self.split_displays = split_displays or set()

    def title(self, window_id):
        return self.titles.get(window_id)

    def is_split_screen(self, display_id):
        return display_id in self.split_displays


class FakeNormalizer:
    """Expands a couple of symbols the way a locale-aware normalizer would."""

    SYMBOLS = {"@": "at", "#": "pound"}

    def clean_up(self, text):
        return self.SYMBOLS.get(text, text)

    def collapse_repeated_and_clean_up(self, text):
        collapsed = []
        for character in text:
            if not collapsed or collapsed[-1] != character:
                collapsed.append(character)
        return self.clean_up("".join(collapsed))


class FakeInputModes:
    def __init__(self, mode: InputMode = InputMode.TOUCH, keyboard_active: bool = False):
        self.mode = mode
        self.keyboard_active = keyboard_active

    def input_mode(self):
        return self.mode

    def is_keyboard_active(self):
        return self.keyboard_active


class FakeSecureSettings:
    def __init__(self, speak_passwords: bool):
        self.speak_passwords = speak_passwords

    def should_speak_passwords(self):
        return self.speak_passwords


class RecordingParseTree:
    """Records every declaration made with the template engine."""

    def __init__(self):
        self.enums = {}
        self.variables = {}
        self.functions = {}

    def add_enum(self, enum_id, values):
        self.enums[enum_id] = values

    def add_boolean_variable(self, name, var_id):
        self.variables[name] = ("boolean", var_id)

    def add_integer_variable(self, name, var_id):
        self.variables[name] = ("integer", var_id)

    def add_number_variable(self, name, var_id):
        self.variables[name] = ("number", var_id)

    def add_string_variable(self, name, var_id):
        self.variables[name] = ("string", var_id)

    def add_enum_variable(self, name, var_id, enum_id):
        self.variables[name] = ("enum", var_id, enum_id)

    def add_function(self, name, function):
        self.functions[name] = function


def focus_event(source=None, display_id: int = 0) -> AccessibilityEvent:
    return AccessibilityEvent(
        event_type=EventType.VIEW_ACCESSIBILITY_FOCUSED,
        source=source,
        display_id=display_id,
    )


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def flags(clock):
    return TimedFlagRegistry(clock=clock)


@pytest.fixture
def strings():
    return ResourceStrings()


@pytest.fixture
def composer(strings):
    return CollectionPhraseComposer(strings)


@pytest.fixture
def preferences():
    return VerbosityPreferences()


@pytest.fixture
def provider():
    return FakeCollectionProvider()


@pytest.fixture
def navigation(flags, provider):
    return NavigationState(flags, collection_provider=provider, nodes=FakeNodes())


@pytest.fixture
def context(navigation, preferences, composer, strings):
    return ResolverContext(
        navigation=navigation,
        preferences=preferences,
        composer=composer,
        strings=strings,
    )


@pytest.fixture
def resolver(context):
    return VariableResolver(context)


@pytest.fixture
def library(strings, preferences):
    return TextFunctionLibrary(strings, preferences, normalizer=FakeNormalizer())


@pytest.fixture
def watch_platform():
    return PlatformCapabilities(is_watch=True)


@pytest.fixture(autouse=True)
def compositor_logger():
    """Fresh package logging for every test; sessions configure it on construction."""
    instance = CompositorLogger()
    instance.reset()
    yield instance
    instance.reset()
