"""Pytest fixtures: field configs, form config, callback recorder, host widget."""

from __future__ import annotations

from pathlib import Path

import pytest
import structlog

from input_validator.config.models import FieldConfig, FormConfig, ValidationRule
from input_validator.infrastructure.host import InMemoryHostWidget


class CallRecorder:
    """Callable that records positional args of every call."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def __call__(self, *args: object) -> None:
        self.calls.append(args)


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def email_config() -> FieldConfig:
    """Required email field."""
    return FieldConfig(name="email", label="Email", type="email", required=True)


@pytest.fixture
def optional_config() -> FieldConfig:
    """Optional untyped field."""
    return FieldConfig(name="notes", label="Notes")


@pytest.fixture
def form_config() -> FormConfig:
    """Small form for runtime tests."""
    return FormConfig(
        name="TestForm",
        fields=[
            FieldConfig(name="email", label="Email", type="email", required=True),
            FieldConfig(
                name="username",
                label="Username",
                required=True,
                rules=[ValidationRule(type="alpha", message="letters only"), ValidationRule(type="length")],
            ),
            FieldConfig(name="age", label="Age", type="integer"),
        ],
    )


@pytest.fixture
def recorder() -> CallRecorder:
    return CallRecorder()


@pytest.fixture
def host() -> InMemoryHostWidget:
    return InMemoryHostWidget()


@pytest.fixture
def configs_dir() -> Path:
    """Path to configs directory."""
    return Path(__file__).resolve().parent.parent / "configs"
