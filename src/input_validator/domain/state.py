"""Field state and outbound directive models. FieldState is immutable; transitions return a new value."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from input_validator.config.models import LabelPosition


class VisualCategory(str, Enum):
    """The single styling signal derived from a field's state."""

    NEUTRAL = "neutral"
    SUCCESS = "success"
    DANGER = "danger"


class FieldState(BaseModel):
    """Live state of one field, owned by exactly one controller."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(default="", description="Trimmed last committed input")
    focused: bool = False
    touched: bool = Field(default=False, description="Focused or edited by the user at least once")
    dirty: bool = Field(default=False, description="Label sits in the raised position")
    valid: bool = True
    validated: bool = Field(default=False, description="A verdict has been computed")
    visual_category: VisualCategory = VisualCategory.NEUTRAL
    error_message: str | None = Field(default=None, description="Last failing rule's message")
    error_override: str | None = Field(default=None, description="Externally injected message")
    failed_rule: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.value

    @property
    def shown_error(self) -> str | None:
        """Override first, then the verdict's message; nothing while valid."""
        if self.error_override:
            return self.error_override
        if self.valid:
            return None
        return self.error_message or None


class HelperDirective(BaseModel):
    """Content for the helper text and character counter below the field."""

    title: str | None = None
    error: str | None = None
    count: int = 0
    limit: int | None = None
    over_limit: bool = False


class VisualDirective(BaseModel):
    """What the host and the label animation apply after a transition."""

    category: VisualCategory
    border_color: str
    label_color: str
    dirty: bool
    label_position: LabelPosition
    transition_duration_ms: int = Field(default=200, ge=0, description="0 means snap")
    error_message: str | None = None
    label_text: str = ""
    keyboard_type: str = "default"
    helper: HelperDirective = Field(default_factory=HelperDirective)
