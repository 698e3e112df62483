"""Configuration loading and validation."""

from input_validator.config.models import (
    FieldConfig,
    FieldType,
    FormConfig,
    LabelPosition,
    ValidationRule,
    VisualTheme,
)
from input_validator.config.loader import load_config

__all__ = [
    "FieldConfig",
    "FieldType",
    "FormConfig",
    "LabelPosition",
    "ValidationRule",
    "VisualTheme",
    "load_config",
]
