"""Resolution context.

Everything a variable extractor may read, bundled once per session. The
context holds references, not copies: extractors always see the state as of
the last processed event.
"""

from dataclasses import dataclass

from compositor.core.interfaces import (
    GestureShortcutProvider,
    InputModeProvider,
    KeyComboProvider,
    Strings,
    WindowInfoProvider,
)
from compositor.core.types import InputMode
from compositor.state.navigation import NavigationState
from compositor.state.preferences import VerbosityPreferences
from compositor.templates.collection_phrases import CollectionPhraseComposer


@dataclass
class ResolverContext:
    """Session state and collaborators visible to variable extractors."""

    navigation: NavigationState
    preferences: VerbosityPreferences
    composer: CollectionPhraseComposer
    strings: Strings

    # Optional collaborators; missing ones resolve to empty values
    key_combos: KeyComboProvider | None = None
    gestures: GestureShortcutProvider | None = None
    windows: WindowInfoProvider | None = None
    input_modes: InputModeProvider | None = None

    @property
    def collection(self):
        return self.navigation.collection

    def input_mode(self) -> InputMode:
        if self.input_modes is None:
            return InputMode.UNKNOWN
        return self.input_modes.input_mode()
