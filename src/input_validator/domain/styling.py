"""Style policies (dirty flag + visual category) and directive building. Pure functions, no I/O."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from input_validator.config.models import FieldConfig, FieldType, VisualTheme
from input_validator.domain.state import (
    FieldState,
    HelperDirective,
    VisualCategory,
    VisualDirective,
)

KEYBOARD_TYPES: dict[FieldType, str] = {
    FieldType.EMAIL: "email-address",
    FieldType.NUMERIC: "numeric",
    FieldType.INTEGER: "numeric",
    FieldType.FLOAT: "decimal-pad",
    FieldType.DECIMAL: "decimal-pad",
    FieldType.PHONE: "phone-pad",
}

REQUIRED_SUFFIX = " (*)"


@runtime_checkable
class StylePolicy(Protocol):
    """Decides label position (dirty) and color category for a state."""

    def is_dirty(self, state: FieldState, config: FieldConfig) -> bool:
        ...

    def category(self, state: FieldState, config: FieldConfig) -> VisualCategory:
        ...


class BaseStylePolicy:
    """
    Label raised for a value, focus, or an untouched field with a placeholder hint.
    Danger whenever the verdict is false; Success for a verified non-empty value.
    """

    def is_dirty(self, state: FieldState, config: FieldConfig) -> bool:
        if state.value or state.focused:
            return True
        return bool(config.placeholder) and not state.touched

    def category(self, state: FieldState, config: FieldConfig) -> VisualCategory:
        if not state.valid:
            return VisualCategory.DANGER
        if state.value and state.validated:
            return VisualCategory.SUCCESS
        return VisualCategory.NEUTRAL


class FloatingLabelPolicy:
    """
    Wraps another policy for the placeholder/floating-label layout.
    The placeholder is drawn inside the input, so it never raises the label.
    A required field that is still empty and untouched stays Neutral.
    """

    def __init__(self, inner: StylePolicy | None = None) -> None:
        self.inner = inner or BaseStylePolicy()

    def is_dirty(self, state: FieldState, config: FieldConfig) -> bool:
        return bool(state.value) or state.focused

    def category(self, state: FieldState, config: FieldConfig) -> VisualCategory:
        if config.required and not state.value and not state.touched:
            return VisualCategory.NEUTRAL
        return self.inner.category(state, config)


def keyboard_type_for(config: FieldConfig) -> str:
    return KEYBOARD_TYPES.get(config.field_type, "default")


def label_text_for(config: FieldConfig) -> str:
    text = config.label or config.name
    return f"{text}{REQUIRED_SUFFIX}" if config.required else text


def _helper(state: FieldState, config: FieldConfig) -> HelperDirective:
    limit = config.character_restriction
    count = len(state.value)
    return HelperDirective(
        title=config.title,
        error=state.shown_error,
        count=count,
        limit=limit,
        over_limit=limit is not None and count > limit,
    )


def build_directive(
    state: FieldState,
    config: FieldConfig,
    theme: VisualTheme,
    duration_ms: int,
) -> VisualDirective:
    """Map state onto theme colors and label geometry."""
    colors = {
        VisualCategory.NEUTRAL: theme.neutral_color,
        VisualCategory.SUCCESS: theme.success_color,
        VisualCategory.DANGER: theme.danger_color,
    }
    color = colors[state.visual_category]
    return VisualDirective(
        category=state.visual_category,
        border_color=color,
        label_color=color,
        dirty=state.dirty,
        label_position=theme.dirty_label_position if state.dirty else theme.clean_label_position,
        transition_duration_ms=duration_ms,
        error_message=state.shown_error,
        label_text=label_text_for(config),
        keyboard_type=keyboard_type_for(config),
        helper=_helper(state, config),
    )
