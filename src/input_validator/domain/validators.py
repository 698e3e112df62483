"""Validation engine: type-driven predicate dispatch, required semantics, rule chains. No I/O."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import structlog
from pydantic import BaseModel

from input_validator.config.models import FieldConfig, FieldType, ValidationRule
from input_validator.domain import predicates

logger = structlog.get_logger(__name__)

Predicate = Callable[[str, FieldConfig], bool]

PREDICATES: dict[FieldType, Predicate] = {
    FieldType.EMAIL: lambda v, c: predicates.is_email(v),
    FieldType.PHONE: lambda v, c: predicates.is_mobile_phone(v, c.locale),
    FieldType.CURRENCY: lambda v, c: predicates.is_currency(v, c.currency_symbol),
    FieldType.POSTAL_CODE: lambda v, c: predicates.is_postal_code(v, c.locale),
    FieldType.HEX_COLOR: lambda v, c: predicates.is_hex_color(v),
    FieldType.IDENTITY_CARD: lambda v, c: predicates.is_identity_card(v, c.locale),
    FieldType.CREDIT_CARD: lambda v, c: predicates.is_credit_card(v),
    FieldType.URL: lambda v, c: predicates.is_url(v),
    FieldType.NUMERIC: lambda v, c: predicates.is_numeric(v),
    FieldType.INTEGER: lambda v, c: predicates.is_numeric(v),
    FieldType.FLOAT: lambda v, c: predicates.is_float(v),
    FieldType.DECIMAL: lambda v, c: predicates.is_decimal(v),
    FieldType.ALPHA: lambda v, c: predicates.is_alpha(v),
    FieldType.ALPHANUMERIC: lambda v, c: predicates.is_alphanumeric(v),
    # No length contract is defined yet; the rule is declared and always passes
    FieldType.LENGTH: lambda v, c: True,
}


class ValidationResult(BaseModel):
    """Verdict of a rule chain. A failure is a value, never an exception."""

    valid: bool
    message: str = ""
    failed_rule: str | None = None


def normalize(text: object) -> str:
    """None to empty string, then str() and strip."""
    return "" if text is None else str(text).strip()


def _check(text: str, field_type: FieldType | str | None, config: FieldConfig) -> bool:
    """Run the predicate for field_type on non-empty text. Unknown and default types pass."""
    resolved = FieldType.resolve(field_type)
    predicate = PREDICATES.get(resolved) if resolved is not None else None
    if predicate is None:
        return True
    try:
        return bool(predicate(text, config))
    except Exception as e:
        logger.debug("predicate_error", field_type=resolved.value, error=str(e))
        return False


def is_valid(text: object, field_type: FieldType | str | None, config: FieldConfig) -> bool:
    """
    True when text satisfies field_type under config.
    Empty text is valid unless the field is required; that rule overrides any type check.
    """
    value = normalize(text)
    if not value:
        return not config.required
    return _check(value, field_type, config)


def is_valid_multiple(
    text: object,
    rules: Sequence[ValidationRule],
    config: FieldConfig,
) -> ValidationResult:
    """Evaluate rules in order and stop at the first failure. Empty rules fall back to config.type."""
    if not rules:
        ok = is_valid(text, config.type, config)
        return ValidationResult(valid=ok, failed_rule=None if ok else config.type)
    for rule in rules:
        if not is_valid(text, rule.type, config):
            return ValidationResult(valid=False, message=rule.message or "", failed_rule=rule.type)
    return ValidationResult(valid=True, message="")


def validate_field(text: object, config: FieldConfig) -> ValidationResult:
    """Verdict for a field's full policy; a failure without a rule message gets config.error_message."""
    result = is_valid_multiple(text, config.rules, config)
    if not result.valid and not result.message and config.error_message:
        return result.model_copy(update={"message": config.error_message})
    return result
