"""Field state controller: owns one FieldState, applies host events, emits visual directives."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

import structlog

from input_validator.config.models import NUMERIC_TYPES, FieldConfig, FieldType, VisualTheme
from input_validator.domain import predicates
from input_validator.domain.state import FieldState, VisualDirective
from input_validator.domain.styling import BaseStylePolicy, StylePolicy, build_directive
from input_validator.domain.transitions import (
    Blur,
    ChangeText,
    EndEditing,
    FieldEvent,
    Focus,
    SetError,
    Validate,
    apply_event,
    initial_state,
)
from input_validator.domain.validators import normalize
from input_validator.infrastructure.host import HostWidget

logger = structlog.get_logger(__name__)

Callback = Callable[..., Any]


def parse_number(value: str, field_type: FieldType | None) -> int | float | None:
    """Numeric value of a committed string for numeric field types, or None."""
    if field_type not in NUMERIC_TYPES or not value:
        return None
    if field_type in (FieldType.NUMERIC, FieldType.INTEGER):
        return int(value) if predicates.is_numeric(value) else None
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


class FieldStateController:
    """
    One field's state machine. Single-threaded: events must arrive one at a time,
    in the order the host delivers them.
    """

    def __init__(
        self,
        config: FieldConfig,
        theme: VisualTheme | None = None,
        policy: StylePolicy | None = None,
        host: HostWidget | None = None,
        initial_value: object = None,
        on_change_text: Callback | None = None,
        on_focus: Callback | None = None,
        on_blur: Callback | None = None,
        on_end_editing: Callback | None = None,
    ) -> None:
        self.config = config
        self.theme = theme or VisualTheme()
        self.policy = policy or BaseStylePolicy()
        self._host = host
        self._on_change_text = on_change_text
        self._on_focus = on_focus
        self._on_blur = on_blur
        self._on_end_editing = on_end_editing

        self._state = initial_state(initial_value, config, self.policy)
        self._last_external = self._state.value
        self._duration_ms = 0
        if config.validate_on_mount:
            self._dispatch(Validate())
        # First render snaps into place
        self._duration_ms = 0

    @property
    def state(self) -> FieldState:
        return self._state

    @property
    def directive(self) -> VisualDirective:
        return build_directive(self._state, self.config, self.theme, self._duration_ms)

    def _dispatch(self, event: FieldEvent) -> VisualDirective:
        prev = self._state
        self._state = apply_event(prev, event, self.config, self.policy)
        self._duration_ms = self.theme.transition_duration_ms if prev.dirty != self._state.dirty else 0
        if self._state != prev:
            logger.debug(
                "field_transition",
                field=self.config.name,
                event_type=type(event).__name__,
                valid=self._state.valid,
                dirty=self._state.dirty,
                category=self._state.visual_category.value,
            )
        return self.directive

    # --- Host events ---

    def on_change_text(self, text: object) -> VisualDirective:
        """User edit: validate, then forward the untrimmed text (numbers also as a number)."""
        directive = self._dispatch(ChangeText(text=normalize(text)))
        if self._on_change_text:
            number = parse_number(self._state.value, self.config.field_type)
            if number is not None:
                self._on_change_text(number, text)
            else:
                self._on_change_text(text)
        return directive

    def on_focus(self, event: Any = None, ref_name: str | None = None) -> VisualDirective:
        directive = self._dispatch(Focus())
        if self._on_focus:
            if ref_name is None:
                self._on_focus(event)
            else:
                self._on_focus(event, ref_name)
        return directive

    def on_blur(self, *args: Any) -> VisualDirective:
        directive = self._dispatch(Blur())
        if self._on_blur:
            self._on_blur(args)
        return directive

    def on_end_editing(self, event: Any = None) -> VisualDirective:
        directive = self._dispatch(EndEditing())
        if self._on_end_editing:
            self._on_end_editing(event)
        return directive

    # --- Explicit calls ---

    def validate(self, text: object = None, touch: bool = False) -> VisualDirective:
        """
        Re-run validation on text (default: current value). Not a user edit unless touch is set,
        as on form submit.
        """
        return self._dispatch(Validate(text=None if text is None else normalize(text), touch=touch))

    def value_changed(self, new_value: object) -> VisualDirective:
        """
        Out-of-band value from the host. A new non-empty value is validated like an edit;
        clearing to empty does not force a re-validation.
        """
        value = normalize(new_value)
        previous_external = self._last_external
        self._last_external = value
        if value and value != self._state.value and value != previous_external:
            return self._dispatch(Validate(text=value))
        return self.directive

    def set_error(self, message: str | None) -> VisualDirective:
        """Show an external error message; None clears it."""
        return self._dispatch(SetError(message=message))

    def reconfigure(self, config: FieldConfig) -> VisualDirective:
        """Swap the field config and re-validate the current value under it."""
        self.config = config
        return self._dispatch(Validate())

    # --- Host capability passthroughs ---

    def focus(self) -> None:
        if self._host is not None:
            self._host.focus()

    def blur(self) -> None:
        if self._host is not None:
            self._host.blur()

    def clear(self) -> VisualDirective:
        """Empty the host widget and the field value."""
        if self._host is not None:
            self._host.clear()
        return self.on_change_text("")

    def is_focused(self) -> bool:
        if self._host is not None:
            return self._host.is_focused()
        return self._state.focused
