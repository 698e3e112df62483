"""Pydantic models for field and form configuration. Central contract for IDE and validation."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# --- Field types ---


class FieldType(str, Enum):
    """Declared content type of a field; selects the predicate the engine applies."""

    DEFAULT = "default"
    EMAIL = "email"
    PHONE = "phone"
    CURRENCY = "currency"
    POSTAL_CODE = "postal-code"
    HEX_COLOR = "hex-color"
    IDENTITY_CARD = "identity-card"
    CREDIT_CARD = "credit-card"
    URL = "url"
    NUMERIC = "numeric"
    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    ALPHA = "alpha"
    ALPHANUMERIC = "alphanumeric"
    LENGTH = "length"

    @classmethod
    def resolve(cls, name: FieldType | str | None) -> FieldType | None:
        """Map a type name (or legacy alias) to a FieldType. Unknown names give None."""
        if isinstance(name, cls):
            return name
        if name is None:
            return cls.DEFAULT
        key = str(name).strip().lower()
        if not key:
            return cls.DEFAULT
        key = _TYPE_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return None


_TYPE_ALIASES = {
    "int": "integer",
    "postal_code": "postal-code",
    "hex_color": "hex-color",
    "identity_card": "identity-card",
    "credit_card": "credit-card",
}

# Types whose committed value is also handed to the host as a number
NUMERIC_TYPES = frozenset({FieldType.NUMERIC, FieldType.INTEGER, FieldType.FLOAT, FieldType.DECIMAL})


def _coerce_type_name(v: object) -> str:
    if v is None:
        return FieldType.DEFAULT.value
    if isinstance(v, Enum):
        return str(v.value)
    return str(v).strip().lower() or FieldType.DEFAULT.value


# --- Rules ---


class ValidationRule(BaseModel):
    """One typed check in a rule chain."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(default=FieldType.DEFAULT.value, description="FieldType name; unknown names always pass")
    message: str | None = Field(default=None, description="Shown when this rule fails")

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, v: object) -> str:
        return _coerce_type_name(v)

    @property
    def field_type(self) -> FieldType | None:
        return FieldType.resolve(self.type)


# --- Field configuration ---


class FieldConfig(BaseModel):
    """Configuration for a single field. Immutable unless the host reconfigures it."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="field", description="Unique field identifier within a form")
    label: str = Field(default="", description="Floating label text")
    type: str = Field(default=FieldType.DEFAULT.value, description="Validation type")
    rules: list[ValidationRule] = Field(default_factory=list, description="Ordered rule chain; empty uses type")
    required: bool = False
    locale: str = Field(default="any", description="Locale tag passed through to locale-aware predicates")
    currency_symbol: str | None = Field(default=None, description="Symbol a currency value must carry")
    validate_on_mount: bool = True
    placeholder: str | None = Field(default=None, description="Initial hint; raises the label until first interaction")
    # Helper text collaborator
    error_message: str | None = Field(default=None, description="Message when the type check fails without a rule message")
    title: str | None = Field(default=None, description="Helper text shown while the field is valid")
    character_restriction: int | None = Field(default=None, ge=1, description="Counter limit")

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, v: object) -> str:
        return _coerce_type_name(v)

    @field_validator("locale", mode="before")
    @classmethod
    def _default_locale(cls, v: object) -> str:
        return "any" if v is None or not str(v).strip() else str(v).strip()

    @property
    def field_type(self) -> FieldType | None:
        """Resolved type, or None when the configured name is unknown."""
        return FieldType.resolve(self.type)


# --- Theme ---


class LabelPosition(BaseModel):
    """Target geometry of the floating label."""

    model_config = ConfigDict(frozen=True)

    font_size: float = 14
    top: float = 24


class VisualTheme(BaseModel):
    """Colors and label positions mapped from the derived visual state."""

    model_config = ConfigDict(frozen=True)

    neutral_color: str = "#CCCCCC"
    success_color: str = "#2ECC71"
    danger_color: str = "#E74C3C"
    clean_label_position: LabelPosition = Field(default_factory=LabelPosition)
    dirty_label_position: LabelPosition = Field(default_factory=lambda: LabelPosition(font_size=11, top=0))
    transition_duration_ms: int = Field(default=200, ge=0, description="Label animation length when dirty flips")


# --- Top-level form config ---


class FormConfig(BaseModel):
    """Full form configuration loaded from YAML."""

    name: str = Field(default="Form", description="Form display name")
    fields: list[FieldConfig] = Field(..., min_length=1, description="Fields in display order")
    theme: VisualTheme = Field(default_factory=VisualTheme)
    floating_label: bool = Field(default=False, description="Use the floating-label style policy")

    @model_validator(mode="after")
    def _unique_field_names(self) -> FormConfig:
        seen: set[str] = set()
        for f in self.fields:
            if f.name in seen:
                raise ValueError(f"Duplicate field name: {f.name}")
            seen.add(f.name)
        return self
