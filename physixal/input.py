"""Polling interface for keyboard and mouse state."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .events import (
    Event,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
)
from .keycodes import KeyCode, MouseCode

__all__ = ["Input", "InputState"]


class Input(ABC):
    """What the engine may ask about the current keyboard and mouse state."""

    @abstractmethod
    def is_key_pressed(self, key: KeyCode) -> bool:
        """Whether the key is held down (a repeating key counts as held)."""

    @abstractmethod
    def is_mouse_button_pressed(self, button: MouseCode) -> bool:
        """Whether the mouse button is held down."""

    @abstractmethod
    def mouse_position(self) -> tuple[float, float]:
        """The cursor position as (x, y)."""

    def mouse_x(self) -> float:
        x, _ = self.mouse_position()
        return x

    def mouse_y(self) -> float:
        _, y = self.mouse_position()
        return y

    @abstractmethod
    def set_cursor_mode(self, enabled: bool) -> None:
        """Show the cursor when enabled, otherwise hide and capture it."""


class InputState(Input):
    """Input state kept up to date from the event stream."""

    def __init__(self) -> None:
        self._keys: set[KeyCode] = set()
        self._buttons: set[MouseCode] = set()
        self._position: tuple[float, float] = (0.0, 0.0)
        self._cursor_enabled = True

    @property
    def cursor_enabled(self) -> bool:
        return self._cursor_enabled

    def is_key_pressed(self, key: KeyCode) -> bool:
        return key in self._keys

    def is_mouse_button_pressed(self, button: MouseCode) -> bool:
        return button in self._buttons

    def mouse_position(self) -> tuple[float, float]:
        return self._position

    def set_cursor_mode(self, enabled: bool) -> None:
        self._cursor_enabled = bool(enabled)

    def on_event(self, event: Event) -> None:
        """Record key, button and cursor changes; other events are ignored."""
        if isinstance(event, KeyPressedEvent):
            self._keys.add(event.key_code)
        elif isinstance(event, KeyReleasedEvent):
            self._keys.discard(event.key_code)
        elif isinstance(event, MouseButtonPressedEvent):
            self._buttons.add(event.button)
        elif isinstance(event, MouseButtonReleasedEvent):
            self._buttons.discard(event.button)
        elif isinstance(event, MouseMovedEvent):
            self._position = (float(event.x), float(event.y))