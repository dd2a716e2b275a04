"""Navigation state tracked from accessibility events.

NavigationState is the only writer of the transient state templates read:
window-id history, scrollable-focus history, the current collection
snapshot, magnification, and a handful of session toggles.
"""

import logging

from compositor.core.interfaces import (
    CollectionStateProvider,
    NodeIntrospection,
    SecureSettings,
)
from compositor.core.types import (
    EMPTY_COLLECTION,
    INVALID_DISPLAY,
    INVALID_WINDOW_ID,
    AccessibilityEvent,
    CollectionState,
    EventKind,
    EventType,
    MagnificationMode,
    MagnificationSnapshot,
    MagnificationStateKind,
    NavigationSnapshot,
    PlatformCapabilities,
)
from compositor.state.timed_flags import TimedFlagRegistry

logger = logging.getLogger(__name__)


class NavigationState:
    """Transient navigation state for one service session.

    Usage:
        state = NavigationState(flags, collection_provider=provider, nodes=nodes)
        state.update(event)          # on every accessibility event
        state.snapshot().last_window_id
    """

    def __init__(
        self,
        flags: TimedFlagRegistry,
        *,
        collection_provider: CollectionStateProvider | None = None,
        nodes: NodeIntrospection | None = None,
        platform: PlatformCapabilities | None = None,
        secure_settings: SecureSettings | None = None,
    ):
        self.flags = flags
        self._collection_provider = collection_provider
        self._nodes = nodes
        self._platform = platform or PlatformCapabilities()
        self._secure_settings = secure_settings

        self.collection: CollectionState = EMPTY_COLLECTION

        self.last_window_id = INVALID_WINDOW_ID
        self.current_window_id = INVALID_WINDOW_ID
        self.current_display_id = INVALID_DISPLAY
        self.is_current_focus_scrollable = False
        self.is_last_focus_scrollable = False

        self.magnification = MagnificationSnapshot()

        self.use_single_tap = False
        self.speech_rate = 1.0
        self.use_audio_focus = False
        self.selection_mode_active = False
        self.last_text_edit_is_password = False
        self.is_interpret_as_entry_key = False
        # Defaults to True so upgrading does not change previous behavior
        self.speak_passwords = True

    @property
    def platform(self) -> PlatformCapabilities:
        return self._platform

    # =========================================================================
    # EVENT HANDLING
    # =========================================================================

    def update(self, event: AccessibilityEvent) -> None:
        """Update state from an accessibility event.

        Only accessibility-focus events change anything here.
        """
        if event.event_type != EventType.VIEW_ACCESSIBILITY_FOCUSED:
            return

        source = event.source
        self._update_collection(source, event)

        if source is None:
            return

        # Read both node values before shifting so a failure leaves state untouched
        try:
            is_scrollable = self._is_in_scrollable(source)
            window_id = self._window_id(source)
        except Exception as e:
            logger.warning(f"Failed to inspect focused node: {e}")
            return

        self.is_last_focus_scrollable = self.is_current_focus_scrollable
        self.is_current_focus_scrollable = is_scrollable

        self.last_window_id = self.current_window_id
        self.current_window_id = window_id
        self.current_display_id = event.display_id

    def _update_collection(self, source, event: AccessibilityEvent) -> None:
        if self._collection_provider is None:
            return
        try:
            self.collection = self._collection_provider.snapshot(source, event)
        except Exception as e:
            logger.warning(f"Failed to compute collection state: {e}")
            self.collection = EMPTY_COLLECTION

    def _is_in_scrollable(self, node) -> bool:
        """Whether node or its nearest ancestor is scrollable."""
        if self._nodes is None:
            return False
        if self._nodes.is_scrollable(node):
            return True
        return self._nodes.nearest_scrollable_ancestor(node) is not None

    def _window_id(self, node) -> int:
        if self._nodes is None:
            return INVALID_WINDOW_ID
        return self._nodes.window_id(node)

    # =========================================================================
    # SETTERS
    # =========================================================================

    def set_use_single_tap(self, value: bool) -> None:
        self.use_single_tap = value

    def set_speech_rate(self, value: float) -> None:
        self.speech_rate = value

    def set_use_audio_focus(self, value: bool) -> None:
        self.use_audio_focus = value

    def set_selection_mode_active(self, value: bool) -> None:
        self.selection_mode_active = value

    def set_last_text_edit_is_password(self, value: bool) -> None:
        self.last_text_edit_is_password = value

    def set_interpret_as_entry_key(self, value: bool) -> None:
        """Used by the hint decision."""
        self.is_interpret_as_entry_key = value

    def set_speak_passwords(self, value: bool) -> None:
        """Service-level speak-passwords preference, headphone state included."""
        self.speak_passwords = value

    def update_magnification_state(
        self,
        mode: MagnificationMode | None,
        scale: float,
        state: MagnificationStateKind,
    ) -> None:
        self.magnification = MagnificationSnapshot(mode=mode, scale=scale, state=state)

    # =========================================================================
    # QUERIES
    # =========================================================================

    def should_speak_passwords(self) -> bool:
        """Whether password characters should be spoken.

        Newer platforms own this as a per-service preference; older ones keep
        it in a system secure setting.
        """
        if self._platform.speak_passwords_service_pref:
            return self.speak_passwords
        if self._secure_settings is None:
            return False
        return self._secure_settings.should_speak_passwords()

    def resetting_node_cursor(self) -> bool:
        """Consume the skip-selection flags.

        Returns True if either was pending. The second flag is only consumed
        when the first was not pending.
        """
        return self.flags.check_and_clear(
            EventKind.SKIP_SELECTION_CHANGED_AFTER_FOCUSED
        ) or self.flags.check_and_clear(EventKind.SKIP_SELECTION_CHANGED_AFTER_CURSOR_RESET)

    def snapshot(self) -> NavigationSnapshot:
        return NavigationSnapshot(
            last_window_id=self.last_window_id,
            current_window_id=self.current_window_id,
            current_display_id=self.current_display_id,
            is_current_focus_scrollable=self.is_current_focus_scrollable,
            is_last_focus_scrollable=self.is_last_focus_scrollable,
            magnification=self.magnification,
            selection_mode_active=self.selection_mode_active,
            last_text_edit_is_password=self.last_text_edit_is_password,
            is_interpret_as_entry_key=self.is_interpret_as_entry_key,
        )
