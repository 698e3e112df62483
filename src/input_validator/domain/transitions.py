"""Field FSM: events and pure transition function."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel

from input_validator.config.models import FieldConfig
from input_validator.domain.state import FieldState
from input_validator.domain.styling import BaseStylePolicy, StylePolicy
from input_validator.domain.validators import normalize, validate_field


class ChangeText(BaseModel):
    """User edited the text."""

    text: str | None = None


class Focus(BaseModel):
    pass


class Blur(BaseModel):
    pass


class EndEditing(BaseModel):
    pass


class Validate(BaseModel):
    """Re-run validation. text=None keeps the current value; touch marks the field as interacted with."""

    text: str | None = None
    touch: bool = False


class SetError(BaseModel):
    """Inject or clear (None) an external error message."""

    message: str | None = None


FieldEvent = Union[ChangeText, Focus, Blur, EndEditing, Validate, SetError]


def initial_state(
    value: object = None,
    config: FieldConfig | None = None,
    policy: StylePolicy | None = None,
) -> FieldState:
    """State at mount: seeded value, no verdict yet, dirty and category derived."""
    state = FieldState(value=normalize(value))
    return _derive(state, config or FieldConfig(), policy or BaseStylePolicy())


def _with_verdict(state: FieldState, text: object, config: FieldConfig, touched: bool) -> FieldState:
    value = normalize(text)
    result = validate_field(value, config)
    return state.model_copy(
        update={
            "value": value,
            "valid": result.valid,
            "validated": True,
            "error_message": result.message or None,
            "failed_rule": result.failed_rule,
            "touched": state.touched or touched,
        }
    )


def _derive(state: FieldState, config: FieldConfig, policy: StylePolicy) -> FieldState:
    """Recompute dirty, then the visual category from the updated state."""
    state = state.model_copy(update={"dirty": policy.is_dirty(state, config)})
    return state.model_copy(update={"visual_category": policy.category(state, config)})


def apply_event(
    state: FieldState,
    event: FieldEvent,
    config: FieldConfig,
    policy: StylePolicy | None = None,
) -> FieldState:
    """
    Pure transition: given current state, an event and the field config,
    return the next state. Testable in isolation without a host widget.
    """
    policy = policy or BaseStylePolicy()

    if isinstance(event, ChangeText):
        state = _with_verdict(state, event.text, config, touched=True)
    elif isinstance(event, Validate):
        text = state.value if event.text is None else event.text
        state = _with_verdict(state, text, config, touched=event.touch)
    elif isinstance(event, Focus):
        state = state.model_copy(update={"focused": True, "touched": True})
    elif isinstance(event, Blur):
        state = state.model_copy(update={"focused": False})
    elif isinstance(event, SetError):
        state = state.model_copy(update={"error_override": event.message or None})
    elif isinstance(event, EndEditing):
        return state
    else:
        return state

    return _derive(state, config, policy)
