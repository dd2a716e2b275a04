"""Global variables: session toggles, password policy, input mode, hints."""

from compositor.core.types import EventKind
from compositor.templates.context import ResolverContext
from compositor.templates.variables.ids import EnumId, VariableId
from compositor.templates.variables.registry import (
    Category,
    VariableType,
    register_variable,
)


@register_variable(
    name="global.syncedAccessibilityFocusLatch",
    var_id=VariableId.GLOBAL_SYNCED_ACCESSIBILITY_FOCUS_LATCH,
    category=Category.GLOBAL,
    var_type=VariableType.BOOLEAN,
    description="True once after accessibility focus was synced to input focus",
)
def extract_synced_focus_latch(ctx: ResolverContext) -> bool:
    # Consumes the flag: a second read in the same cycle is False
    return ctx.navigation.flags.check_and_clear(EventKind.SYNCED_ACCESSIBILITY_FOCUS)


@register_variable(
    name="global.isKeyboardActive",
    var_id=VariableId.GLOBAL_IS_KEYBOARD_ACTIVE,
    category=Category.GLOBAL,
    var_type=VariableType.BOOLEAN,
    description="A hardware keyboard is active",
)
def extract_is_keyboard_active(ctx: ResolverContext) -> bool:
    return ctx.input_modes is not None and ctx.input_modes.is_keyboard_active()


@register_variable(
    name="global.isSelectionModeActive",
    var_id=VariableId.GLOBAL_IS_SELECTION_MODE_ACTIVE,
    category=Category.GLOBAL,
    var_type=VariableType.BOOLEAN,
)
def extract_is_selection_mode_active(ctx: ResolverContext) -> bool:
    return ctx.navigation.selection_mode_active


@register_variable(
    name="global.inputMode",
    var_id=VariableId.GLOBAL_INPUT_MODE,
    category=Category.GLOBAL,
    var_type=VariableType.ENUM,
    enum_id=EnumId.INPUT_MODE,
    description="Current input mode (touch, keyboard, tv_remote, ...)",
)
def extract_input_mode(ctx: ResolverContext) -> int:
    return int(ctx.input_mode())


@register_variable(
    name="global.useSingleTap",
    var_id=VariableId.GLOBAL_USE_SINGLE_TAP,
    category=Category.GLOBAL,
    var_type=VariableType.BOOLEAN,
)
def extract_use_single_tap(ctx: ResolverContext) -> bool:
    return ctx.navigation.use_single_tap


@register_variable(
    name="global.speechRate",
    var_id=VariableId.GLOBAL_SPEECH_RATE,
    category=Category.GLOBAL,
    var_type=VariableType.NUMBER,
    description="Speech rate multiplier (1.0 = normal)",
)
def extract_speech_rate(ctx: ResolverContext) -> float:
    return float(ctx.navigation.speech_rate)


@register_variable(
    name="global.useAudioFocus",
    var_id=VariableId.GLOBAL_USE_AUDIO_FOCUS,
    category=Category.GLOBAL,
    var_type=VariableType.BOOLEAN,
)
def extract_use_audio_focus(ctx: ResolverContext) -> bool:
    return ctx.navigation.use_audio_focus


@register_variable(
    name="global.lastTextEditIsPassword",
    var_id=VariableId.GLOBAL_LAST_TEXT_EDIT_IS_PASSWORD,
    category=Category.GLOBAL,
    var_type=VariableType.BOOLEAN,
)
def extract_last_text_edit_is_password(ctx: ResolverContext) -> bool:
    return ctx.navigation.last_text_edit_is_password


@register_variable(
    name="global.speakPasswordsServicePolicy",
    var_id=VariableId.GLOBAL_SPEAK_PASS_SERVICE_POLICY,
    category=Category.GLOBAL,
    var_type=VariableType.BOOLEAN,
    description="Stored per-service speak-passwords preference",
)
def extract_speak_passwords_service_policy(ctx: ResolverContext) -> bool:
    return ctx.navigation.speak_passwords


@register_variable(
    name="global.speakPasswordFieldContent",
    var_id=VariableId.GLOBAL_SPEAK_PASS_FIELD_CONTENT,
    category=Category.GLOBAL,
    var_type=VariableType.BOOLEAN,
    description="Password field content may be spoken (secure-setting platforms only)",
)
def extract_speak_password_field_content(ctx: ResolverContext) -> bool:
    # Only platforms without the per-service preference expose field content,
    # and only based on the system setting, regardless of headphone state
    navigation = ctx.navigation
    return (
        navigation.should_speak_passwords()
        and not navigation.platform.speak_passwords_service_pref
    )


@register_variable(
    name="global.enableUsageHint",
    var_id=VariableId.GLOBAL_ENABLE_USAGE_HINT,
    category=Category.GLOBAL,
    var_type=VariableType.BOOLEAN,
)
def extract_enable_usage_hint(ctx: ResolverContext) -> bool:
    return ctx.preferences.usage_hint_enabled


@register_variable(
    name="global.seekbarHint",
    var_id=VariableId.GLOBAL_SEEKBAR_HINT,
    category=Category.GLOBAL,
    var_type=VariableType.STRING,
    description="Hint for adjusting seek controls",
)
def extract_seekbar_hint(ctx: ResolverContext) -> str:
    if ctx.gestures is not None:
        shortcut = ctx.gestures.seek_bar_shortcut_text()
        if shortcut is not None:
            return shortcut
    if ctx.navigation.platform.is_watch:
        return ""
    return ctx.strings.get("template_hint_seek_control")


@register_variable(
    name="global.isInterpretAsEntryKey",
    var_id=VariableId.GLOBAL_INTERPRET_AS_ENTRY_KEY,
    category=Category.GLOBAL,
    var_type=VariableType.BOOLEAN,
)
def extract_is_interpret_as_entry_key(ctx: ResolverContext) -> bool:
    return ctx.navigation.is_interpret_as_entry_key
