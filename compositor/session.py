"""Compositor session.

Owns the per-session state (timed flags, navigation state, verbosity
preferences) and wires it into the resolver, composer and function library.
Built once when the screen reader service starts and closed with it.
"""

import logging
from dataclasses import dataclass

from compositor.config import CompositorSettings
from compositor.core.interfaces import (
    CollectionStateProvider,
    GestureShortcutProvider,
    InputModeProvider,
    KeyComboProvider,
    NodeIntrospection,
    ParseTree,
    ProgressRounding,
    SecureSettings,
    SpeechNormalizer,
    Strings,
    WindowInfoProvider,
)
from compositor.core.types import AccessibilityEvent, EventKind, PlatformCapabilities
from compositor.state import NavigationState, TimedFlagRegistry, VerbosityPreferences
from compositor.templates import (
    CollectionPhraseComposer,
    ResolverContext,
    TextFunctionLibrary,
    VariableResolver,
)
from compositor.utilities.logger import setup_logging
from compositor.utilities.rounding import round_for_progress_percent
from compositor.utilities.strings import ResourceStrings

logger = logging.getLogger(__name__)


@dataclass
class Collaborators:
    """External collaborators supplied by the host. All are optional."""

    collection_provider: CollectionStateProvider | None = None
    nodes: NodeIntrospection | None = None
    strings: Strings | None = None
    key_combos: KeyComboProvider | None = None
    gestures: GestureShortcutProvider | None = None
    windows: WindowInfoProvider | None = None
    normalizer: SpeechNormalizer | None = None
    input_modes: InputModeProvider | None = None
    secure_settings: SecureSettings | None = None
    progress_rounding: ProgressRounding = round_for_progress_percent


class CompositorSession:
    """One service session of the variable layer.

    Usage:
        session = CompositorSession(settings, collaborators)
        session.declare(parse_tree)
        session.on_event(event)
        session.resolver.get_string(VariableId.COLLECTION_TRANSITION)
        session.close()
    """

    def __init__(
        self,
        settings: CompositorSettings | None = None,
        collaborators: Collaborators | None = None,
        platform: PlatformCapabilities | None = None,
    ):
        self.settings = settings or CompositorSettings()
        # Configures the package logger once per process
        setup_logging(self.settings.log_dir, self.settings.log_level)

        collaborators = collaborators or Collaborators()
        strings = collaborators.strings or ResourceStrings()

        self.flags = TimedFlagRegistry(max_age=self.settings.flag_max_age)
        self.preferences = VerbosityPreferences.from_settings(self.settings.verbosity)
        self.navigation = NavigationState(
            self.flags,
            collection_provider=collaborators.collection_provider,
            nodes=collaborators.nodes,
            platform=platform,
            secure_settings=collaborators.secure_settings,
        )
        self.navigation.set_speech_rate(self.settings.speech_rate)
        self.navigation.set_use_single_tap(self.settings.use_single_tap)
        self.navigation.set_use_audio_focus(self.settings.use_audio_focus)
        self.navigation.set_speak_passwords(self.settings.speak_passwords)

        self.composer = CollectionPhraseComposer(strings)
        self.functions = TextFunctionLibrary(
            strings,
            self.preferences,
            normalizer=collaborators.normalizer,
            windows=collaborators.windows,
            progress_rounding=collaborators.progress_rounding,
        )
        self.resolver = VariableResolver(
            ResolverContext(
                navigation=self.navigation,
                preferences=self.preferences,
                composer=self.composer,
                strings=strings,
                key_combos=collaborators.key_combos,
                gestures=collaborators.gestures,
                windows=collaborators.windows,
                input_modes=collaborators.input_modes,
            )
        )
        self._closed = False
        logger.info("Compositor session started")

    @classmethod
    def from_env(cls, collaborators: Collaborators | None = None, **kwargs) -> "CompositorSession":
        return cls(CompositorSettings.from_env(), collaborators, **kwargs)

    def declare(self, parse_tree: ParseTree) -> None:
        """Declare enums, variables and functions with the template engine."""
        self.resolver.declare(parse_tree, self.functions)

    def on_event(self, event: AccessibilityEvent) -> None:
        """Feed one accessibility event. Must finish before templates evaluate."""
        if self._closed:
            logger.debug(f"Ignoring event {event.event_type!r} on closed session")
            return
        self.navigation.update(event)

    def raise_flag(self, kind: EventKind) -> None:
        self.flags.raise_flag(kind)

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Tear down the session. Pending timed flags are dropped."""
        if self._closed:
            return
        self.flags.clear_all()
        self._closed = True
        logger.info("Compositor session closed")
