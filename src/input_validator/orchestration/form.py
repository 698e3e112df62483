"""Form runtime: one controller per field; routes events by field name."""

from __future__ import annotations

from collections.abc import Callable

from input_validator.config.models import FormConfig
from input_validator.domain.state import VisualDirective
from input_validator.domain.styling import BaseStylePolicy, FloatingLabelPolicy, StylePolicy
from input_validator.infrastructure.host import HostWidget
from input_validator.orchestration.controller import FieldStateController


class FormController:
    """Holds form config; creates one FieldStateController per field. Fields never share state."""

    def __init__(
        self,
        config: FormConfig,
        host_factory: Callable[[str], HostWidget] | None = None,
        initial_values: dict[str, object] | None = None,
    ) -> None:
        self.config = config
        initial_values = initial_values or {}
        self._fields: dict[str, FieldStateController] = {}
        for f in config.fields:
            self._fields[f.name] = FieldStateController(
                f,
                theme=config.theme,
                policy=self._policy(),
                host=host_factory(f.name) if host_factory else None,
                initial_value=initial_values.get(f.name),
            )

    def _policy(self) -> StylePolicy:
        base = BaseStylePolicy()
        return FloatingLabelPolicy(base) if self.config.floating_label else base

    @property
    def field_names(self) -> list[str]:
        return list(self._fields)

    def field(self, name: str) -> FieldStateController:
        """Controller for a field. Raises KeyError for unknown names."""
        try:
            return self._fields[name]
        except KeyError:
            raise KeyError(f"Unknown field: {name}") from None

    def change_text(self, name: str, text: object) -> VisualDirective:
        return self.field(name).on_change_text(text)

    def validate_all(self) -> bool:
        """Re-validate every field as on submit; fields count as touched. True if all verdicts pass."""
        for c in self._fields.values():
            c.validate(touch=True)
        return all(c.state.valid for c in self._fields.values())

    def errors(self) -> dict[str, str]:
        """field_name -> message for fields currently invalid (empty message when none is configured)."""
        return {
            name: c.state.shown_error or ""
            for name, c in self._fields.items()
            if not c.state.valid or c.state.error_override
        }

    def values(self) -> dict[str, str]:
        return {name: c.state.value for name, c in self._fields.items()}

    def directives(self) -> dict[str, VisualDirective]:
        return {name: c.directive for name, c in self._fields.items()}
