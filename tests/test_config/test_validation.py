"""Config validation: malformed YAML, missing fields, type names, form constraints."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from input_validator.config.loader import load_config
from input_validator.config.models import FieldConfig, FieldType, FormConfig, ValidationRule, VisualTheme


def _write_yaml(content: str) -> str:
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write(content)
        return f.name


def test_load_valid_minimal_config(configs_dir: Path) -> None:
    """Valid minimal YAML loads and validates."""
    config = load_config(configs_dir / "minimal_form.yaml")
    assert config.name == "Minimal"
    assert len(config.fields) == 1
    assert config.fields[0].field_type == FieldType.EMAIL
    assert config.fields[0].required is True


def test_load_default_form_config(configs_dir: Path) -> None:
    config = load_config(configs_dir / "default_form.yaml")
    assert config.floating_label is True
    username = next(f for f in config.fields if f.name == "username")
    assert [r.type for r in username.rules] == ["alphanumeric", "length"]
    assert username.rules[0].message == "Letters and digits only."
    assert username.character_restriction == 20


def test_load_missing_file_raises() -> None:
    with pytest.raises(FileNotFoundError):
        load_config("/nonexistent/form.yaml")


def test_load_malformed_yaml_raises() -> None:
    """Malformed YAML raises."""
    path = _write_yaml("foo: [\n  bar\n")
    try:
        with pytest.raises((yaml.YAMLError, ValueError)):
            load_config(path)
    finally:
        Path(path).unlink(missing_ok=True)


def test_load_non_mapping_top_level_raises() -> None:
    """A YAML list at top level is rejected before model validation."""
    path = _write_yaml("- name: email\n  type: email\n")
    try:
        with pytest.raises(ValueError, match="top level must be a mapping"):
            load_config(path)
    finally:
        Path(path).unlink(missing_ok=True)


def test_load_empty_file_raises() -> None:
    """Empty YAML raises ValueError."""
    path = _write_yaml("")
    try:
        with pytest.raises(ValueError, match="empty|Invalid"):
            load_config(path)
    finally:
        Path(path).unlink(missing_ok=True)


def test_load_missing_fields_raises() -> None:
    """YAML without a fields list raises."""
    path = _write_yaml(yaml.dump({"name": "OnlyName"}))
    try:
        with pytest.raises(ValueError, match="Invalid config"):
            load_config(path)
    finally:
        Path(path).unlink(missing_ok=True)


def test_load_duplicate_field_names_raises() -> None:
    path = _write_yaml(yaml.dump({"fields": [{"name": "a"}, {"name": "a", "type": "email"}]}))
    try:
        with pytest.raises(ValueError, match="Duplicate field name"):
            load_config(path)
    finally:
        Path(path).unlink(missing_ok=True)


def test_unknown_field_type_is_accepted() -> None:
    """Unknown type names load; they resolve to no type and validate permissively."""
    config = FieldConfig(name="x", type="zip-plus-four")
    assert config.type == "zip-plus-four"
    assert config.field_type is None


def test_field_config_defaults() -> None:
    config = FieldConfig()
    assert config.type == "default"
    assert config.field_type == FieldType.DEFAULT
    assert config.rules == []
    assert config.required is False
    assert config.locale == "any"
    assert config.currency_symbol is None
    assert config.validate_on_mount is True


def test_field_type_enum_and_aliases_normalize() -> None:
    assert FieldConfig(type=FieldType.POSTAL_CODE).type == "postal-code"
    assert FieldConfig(type="Email").field_type == FieldType.EMAIL
    assert FieldConfig(type="int").field_type == FieldType.INTEGER
    assert FieldConfig(type=None).field_type == FieldType.DEFAULT
    assert ValidationRule(type=FieldType.ALPHA).field_type == FieldType.ALPHA


def test_blank_locale_falls_back_to_any() -> None:
    assert FieldConfig(locale="").locale == "any"
    assert FieldConfig(locale=None).locale == "any"


def test_invalid_character_restriction_raises() -> None:
    with pytest.raises(ValidationError):
        FieldConfig(character_restriction=0)


def test_field_config_is_immutable() -> None:
    config = FieldConfig(name="a")
    with pytest.raises(ValidationError):
        config.required = True


def test_theme_defaults() -> None:
    theme = VisualTheme()
    assert theme.transition_duration_ms == 200
    assert theme.dirty_label_position.top != theme.clean_label_position.top


def test_form_requires_at_least_one_field() -> None:
    with pytest.raises(ValidationError):
        FormConfig(fields=[])
