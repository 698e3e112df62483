"""Field FSM transitions: change, focus, blur, end editing, validate, set error."""

from __future__ import annotations

from input_validator.config.models import FieldConfig, ValidationRule
from input_validator.domain.state import VisualCategory
from input_validator.domain.styling import FloatingLabelPolicy
from input_validator.domain.transitions import (
    Blur,
    ChangeText,
    EndEditing,
    Focus,
    SetError,
    Validate,
    apply_event,
    initial_state,
)


def test_initial_state_trims_seed_and_has_no_verdict(email_config: FieldConfig) -> None:
    state = initial_state("  a@b.com ", email_config)
    assert state.value == "a@b.com"
    assert state.validated is False
    assert state.dirty is True


def test_change_text_valid_email(email_config: FieldConfig) -> None:
    state = apply_event(initial_state(), ChangeText(text="a@b.com"), email_config)
    assert state.valid is True
    assert state.validated is True
    assert state.touched is True
    assert state.visual_category == VisualCategory.SUCCESS


def test_change_text_invalid_email(email_config: FieldConfig) -> None:
    state = apply_event(initial_state(), ChangeText(text="not-an-email"), email_config)
    assert state.valid is False
    assert state.visual_category == VisualCategory.DANGER
    assert state.failed_rule == "email"


def test_change_text_none_coerces_to_empty(optional_config: FieldConfig) -> None:
    state = apply_event(initial_state("x"), ChangeText(text=None), optional_config)
    assert state.value == ""
    assert state.valid is True
    assert state.dirty is False
    assert state.visual_category == VisualCategory.NEUTRAL


def test_rule_message_becomes_error_message() -> None:
    config = FieldConfig(rules=[ValidationRule(type="alpha", message="letters only"), ValidationRule(type="length")])
    state = apply_event(initial_state(), ChangeText(text="ab12"), config)
    assert state.valid is False
    assert state.error_message == "letters only"
    state = apply_event(state, ChangeText(text="ab"), config)
    assert state.valid is True
    assert state.error_message is None


def test_focus_marks_dirty_without_verdict(email_config: FieldConfig) -> None:
    state = apply_event(initial_state(), Focus(), email_config)
    assert state.focused is True
    assert state.dirty is True
    assert state.valid is True
    assert state.validated is False
    assert state.visual_category == VisualCategory.NEUTRAL


def test_blur_with_empty_value_clears_dirty(email_config: FieldConfig) -> None:
    state = apply_event(initial_state(), Focus(), email_config)
    state = apply_event(state, Blur(), email_config)
    assert state.focused is False
    assert state.dirty is False


def test_blur_with_value_keeps_dirty(optional_config: FieldConfig) -> None:
    state = apply_event(initial_state(), Focus(), optional_config)
    state = apply_event(state, ChangeText(text="hello"), optional_config)
    state = apply_event(state, Blur(), optional_config)
    assert state.dirty is True


def test_end_editing_is_a_no_op(email_config: FieldConfig) -> None:
    state = apply_event(initial_state(), ChangeText(text="a@b.com"), email_config)
    assert apply_event(state, EndEditing(), email_config) is state


def test_validate_does_not_mark_touched(email_config: FieldConfig) -> None:
    state = apply_event(initial_state(), Validate(text="a@b.com"), email_config)
    assert state.touched is False
    assert state.valid is True
    assert state.value == "a@b.com"


def test_validate_defaults_to_current_value(email_config: FieldConfig) -> None:
    state = apply_event(initial_state("bad"), Validate(), email_config)
    assert state.value == "bad"
    assert state.valid is False


def test_validate_is_idempotent(email_config: FieldConfig) -> None:
    once = apply_event(initial_state(), Validate(text="nope"), email_config)
    twice = apply_event(once, Validate(text="nope"), email_config)
    assert (once.valid, once.visual_category, once.error_message) == (
        twice.valid,
        twice.visual_category,
        twice.error_message,
    )


def test_transitions_do_not_mutate_input(email_config: FieldConfig) -> None:
    before = initial_state()
    apply_event(before, ChangeText(text="a@b.com"), email_config)
    assert before.value == ""
    assert before.validated is False


def test_set_error_and_clear(optional_config: FieldConfig) -> None:
    state = apply_event(initial_state(), SetError(message="already taken"), optional_config)
    assert state.shown_error == "already taken"
    state = apply_event(state, SetError(message=None), optional_config)
    assert state.shown_error is None


def test_placeholder_hint_only_until_first_interaction() -> None:
    config = FieldConfig(placeholder="you@example.com")
    state = initial_state("", config)
    assert state.dirty is True
    state = apply_event(state, Focus(), config)
    state = apply_event(state, Blur(), config)
    assert state.dirty is False


def test_required_empty_on_mount_is_danger_with_base_policy(email_config: FieldConfig) -> None:
    state = apply_event(initial_state(), Validate(), email_config)
    assert state.valid is False
    assert state.visual_category == VisualCategory.DANGER


def test_floating_label_keeps_pristine_required_field_neutral(email_config: FieldConfig) -> None:
    policy = FloatingLabelPolicy()
    state = apply_event(initial_state(), Validate(), email_config, policy)
    assert state.valid is False
    assert state.visual_category == VisualCategory.NEUTRAL

    state = apply_event(state, Focus(), email_config, policy)
    state = apply_event(state, Blur(), email_config, policy)
    assert state.visual_category == VisualCategory.DANGER


def test_validate_with_touch_marks_field_touched(email_config: FieldConfig) -> None:
    policy = FloatingLabelPolicy()
    state = apply_event(initial_state(), Validate(touch=True), email_config, policy)
    assert state.touched is True
    assert state.visual_category == VisualCategory.DANGER
