"""Host widget capability: Protocol + in-memory implementation."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class HostWidget(Protocol):
    """What the controller may ask of the text-entry widget hosting it."""

    def focus(self) -> None:
        ...

    def blur(self) -> None:
        """Drop focus; the host also dismisses any pending input method."""
        ...

    def is_focused(self) -> bool:
        ...

    def clear(self) -> None:
        ...


class InMemoryHostWidget:
    """Implements HostWidget without a screen. Suitable for tests and the CLI."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.focused = False
        self.calls: list[str] = []

    def focus(self) -> None:
        self.calls.append("focus")
        self.focused = True

    def blur(self) -> None:
        self.calls.append("blur")
        self.focused = False

    def is_focused(self) -> bool:
        return self.focused

    def clear(self) -> None:
        self.calls.append("clear")
        self.text = ""
