"""
Compositor - variable resolution layer for spoken feedback templates
"""
import os

from pydantic import BaseModel, Field

from compositor.core.types import DescriptionOrder

# Package version - single source of truth
# Format: MAJOR.MINOR.PATCH[-pre-release][+build]
BASE_VERSION = "1.2.0"


def get_version():
    """
    Get version string with build metadata from the environment

    Returns:
        - "X.Y.Z" on main/master branch (stable release)
        - "X.Y.Z-branch+SHA" on other branches when the SHA is known
        - "X.Y.Z-branch" on other branches otherwise
    """
    branch = os.environ.get('GIT_BRANCH')
    sha = os.environ.get('GIT_SHA')

    if not branch or branch == 'unknown' or branch in ['main', 'master']:
        return BASE_VERSION
    if sha and sha != 'unknown':
        return f"{BASE_VERSION}-{branch}+{sha}"
    return f"{BASE_VERSION}-{branch}"


VERSION = get_version()

APP_NAME = "Compositor"


# Default settings
DEFAULT_SPEECH_RATE = 1.0
DEFAULT_LOG_LEVEL = "INFO"
ENV_PREFIX = "COMPOSITOR_"


class VerbositySettings(BaseModel):
    """User verbosity preferences."""

    speak_roles: bool = True
    speak_collection_info: bool = True
    description_order: DescriptionOrder = DescriptionOrder.ROLE_NAME_STATE_POSITION
    speak_element_ids: bool = False
    speak_system_window_titles: bool = True
    usage_hint_enabled: bool = True
    say_capital: bool = False


class CompositorSettings(BaseModel):
    """Settings a compositor session is built from."""

    verbosity: VerbositySettings = Field(default_factory=VerbositySettings)
    speech_rate: float = Field(DEFAULT_SPEECH_RATE, gt=0, le=10)
    use_single_tap: bool = False
    use_audio_focus: bool = False
    # Defaults to True so upgrading does not change previous behavior
    speak_passwords: bool = True
    # Seconds a raised timed flag stays valid; None means until consumed
    flag_max_age: float | None = Field(None, ge=0)
    log_level: str = Field(
        DEFAULT_LOG_LEVEL, pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$"
    )
    log_dir: str | None = None

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "CompositorSettings":
        """Build settings from COMPOSITOR_* environment variables.

        Nested verbosity fields use a VERBOSITY_ infix, e.g.
        COMPOSITOR_VERBOSITY_SAY_CAPITAL=true. Unset variables keep defaults;
        values are validated by pydantic.
        """
        environ = os.environ if environ is None else environ
        values: dict = {}
        verbosity: dict = {}

        for key, raw in environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            name = key[len(ENV_PREFIX):].lower()
            if name.startswith("verbosity_"):
                field_name = name[len("verbosity_"):]
                if field_name in VerbositySettings.model_fields:
                    verbosity[field_name] = raw
            elif name in cls.model_fields and name != "verbosity":
                values[name] = raw

        # Enum fields come in as their integer value
        order = verbosity.get("description_order")
        if order is not None and order.lstrip("-").isdigit():
            verbosity["description_order"] = int(order)
        if verbosity:
            values["verbosity"] = verbosity
        if "log_level" in values:
            values["log_level"] = values["log_level"].upper()
        return cls.model_validate(values)
