"""Tests for CompositorSession wiring."""

import logging

from compositor import Collaborators, CompositorSession, CompositorSettings
from compositor.core.types import (
    Alignment,
    CollectionState,
    EventKind,
    Role,
    Transition,
)
from compositor.templates import VariableId
from tests.conftest import (
    FakeCollectionProvider,
    FakeNode,
    FakeNodes,
    RecordingParseTree,
    focus_event,
)


class TestCompositorSession:
    """Test a session end to end."""

    def test_event_to_phrase(self):
        """A focus event feeds the collection phrase templates read."""
        provider = FakeCollectionProvider(CollectionState(
            transition=Transition.ENTER,
            role=Role.LIST,
            name="Fruits",
            level=1,
            row_count=5,
            alignment=Alignment.VERTICAL,
        ))
        session = CompositorSession(
            collaborators=Collaborators(collection_provider=provider, nodes=FakeNodes())
        )

        session.on_event(focus_event(FakeNode(window_id=4)))

        assert session.resolver.get_string(VariableId.COLLECTION_TRANSITION) == (
            "in list Fruits, level 2, 5 items"
        )
        assert session.navigation.current_window_id == 4

    def test_settings_applied(self):
        settings = CompositorSettings(speech_rate=2.0, use_single_tap=True, speak_passwords=False)
        session = CompositorSession(settings)

        assert session.resolver.get_number(VariableId.GLOBAL_SPEECH_RATE) == 2.0
        assert session.resolver.get_boolean(VariableId.GLOBAL_USE_SINGLE_TAP) is True
        assert session.navigation.should_speak_passwords() is False

    def test_verbosity_from_settings(self):
        settings = CompositorSettings.model_validate({"verbosity": {"speak_roles": False}})
        session = CompositorSession(settings)

        assert session.resolver.get_boolean(VariableId.VERBOSITY_SPEAK_ROLES) is False

    def test_raise_flag_reaches_latch(self):
        session = CompositorSession()

        session.raise_flag(EventKind.SYNCED_ACCESSIBILITY_FOCUS)

        latch = VariableId.GLOBAL_SYNCED_ACCESSIBILITY_FOCUS_LATCH
        assert session.resolver.get_boolean(latch) is True
        assert session.resolver.get_boolean(latch) is False

    def test_declare(self):
        session = CompositorSession()
        parse_tree = RecordingParseTree()

        session.declare(parse_tree)

        assert "collection.transition" in parse_tree.variables
        assert parse_tree.functions["join"]("a", "", "b") == "a, b"

    def test_close_drops_flags_and_events(self):
        """A closed session clears pending flags and ignores events."""
        session = CompositorSession(collaborators=Collaborators(nodes=FakeNodes()))
        session.raise_flag(EventKind.SYNCED_ACCESSIBILITY_FOCUS)

        session.close()
        session.on_event(focus_event(FakeNode(window_id=4)))

        assert session.closed is True
        assert session.flags.is_pending(EventKind.SYNCED_ACCESSIBILITY_FOCUS) is False
        assert session.navigation.current_window_id == -1

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("COMPOSITOR_SPEECH_RATE", "0.5")

        session = CompositorSession.from_env()

        assert session.settings.speech_rate == 0.5

    def test_logging_from_settings(self, compositor_logger, tmp_path):
        """The session configures package logging from its settings."""
        log_dir = tmp_path / "logs"
        settings = CompositorSettings(log_level="DEBUG", log_dir=str(log_dir))

        CompositorSession(settings)

        assert compositor_logger.initialized is True
        assert compositor_logger.log_level == logging.DEBUG
        assert logging.getLogger("compositor").level == logging.DEBUG
        assert (log_dir / "compositor.log").exists()
        assert (log_dir / "compositor_errors.log").exists()

    def test_logging_configured_once(self, compositor_logger):
        """Later sessions keep the first session's logging setup."""
        CompositorSession(CompositorSettings(log_level="WARNING"))
        CompositorSession(CompositorSettings(log_level="DEBUG"))

        assert compositor_logger.log_level == logging.WARNING
        assert len(logging.getLogger("compositor").handlers) == 1
