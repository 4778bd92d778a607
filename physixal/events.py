"""Blocking engine events and their dispatcher."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Callable, ClassVar, Type, TypeVar

from .keycodes import KeyCode, MouseCode

__all__ = [
    "EventType",
    "EventCategory",
    "Event",
    "WindowResizeEvent",
    "WindowCloseEvent",
    "AppTickEvent",
    "AppUpdateEvent",
    "AppRenderEvent",
    "KeyEvent",
    "KeyPressedEvent",
    "KeyReleasedEvent",
    "KeyTypedEvent",
    "MouseMovedEvent",
    "MouseScrolledEvent",
    "MouseButtonEvent",
    "MouseButtonPressedEvent",
    "MouseButtonReleasedEvent",
    "EventDispatcher",
]


class EventType(IntEnum):
    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    WINDOW_FOCUS = 3
    WINDOW_LOST_FOCUS = 4
    WINDOW_MOVED = 5
    APP_TICK = 6
    APP_UPDATE = 7
    APP_RENDER = 8
    KEY_PRESSED = 9
    KEY_RELEASED = 10
    KEY_TYPED = 11
    MOUSE_BUTTON_PRESSED = 12
    MOUSE_BUTTON_RELEASED = 13
    MOUSE_MOVED = 14
    MOUSE_SCROLLED = 15


class EventCategory(IntFlag):
    NONE = 0
    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass
class Event:
    """Base of all events; concrete subclasses set a type, name and categories."""

    event_type: ClassVar[EventType] = EventType.NONE
    name: ClassVar[str] = ""
    category_flags: ClassVar[EventCategory] = EventCategory.NONE

    handled: bool = field(default=False, kw_only=True)

    def __post_init__(self) -> None:
        if type(self).event_type is EventType.NONE:
            raise TypeError(f"{type(self).__name__} is not a concrete event type")

    def is_in_category(self, category: EventCategory) -> bool:
        return bool(self.category_flags & category)

    def __str__(self) -> str:
        return self.name


@dataclass
class WindowResizeEvent(Event):
    event_type: ClassVar[EventType] = EventType.WINDOW_RESIZE
    name: ClassVar[str] = "WindowResize"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION

    width: int
    height: int

    def __str__(self) -> str:
        return f"WindowResizeEvent: {self.width}, {self.height}"


@dataclass
class WindowCloseEvent(Event):
    event_type: ClassVar[EventType] = EventType.WINDOW_CLOSE
    name: ClassVar[str] = "WindowClose"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppTickEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_TICK
    name: ClassVar[str] = "AppTick"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppUpdateEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_UPDATE
    name: ClassVar[str] = "AppUpdate"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class AppRenderEvent(Event):
    event_type: ClassVar[EventType] = EventType.APP_RENDER
    name: ClassVar[str] = "AppRender"
    category_flags: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class KeyEvent(Event):
    """Base of keyboard events."""

    category_flags: ClassVar[EventCategory] = EventCategory.KEYBOARD | EventCategory.INPUT

    key_code: KeyCode


@dataclass
class KeyPressedEvent(KeyEvent):
    event_type: ClassVar[EventType] = EventType.KEY_PRESSED
    name: ClassVar[str] = "KeyPressed"

    repeat_count: int = 0

    def __str__(self) -> str:
        return f"KeyPressedEvent: {int(self.key_code)} ({self.repeat_count} repeats)"


@dataclass
class KeyReleasedEvent(KeyEvent):
    event_type: ClassVar[EventType] = EventType.KEY_RELEASED
    name: ClassVar[str] = "KeyReleased"

    def __str__(self) -> str:
        return f"KeyReleasedEvent: {int(self.key_code)}"


@dataclass
class KeyTypedEvent(KeyEvent):
    event_type: ClassVar[EventType] = EventType.KEY_TYPED
    name: ClassVar[str] = "KeyTyped"

    def __str__(self) -> str:
        return f"KeyTypedEvent: {int(self.key_code)}"


@dataclass
class MouseMovedEvent(Event):
    event_type: ClassVar[EventType] = EventType.MOUSE_MOVED
    name: ClassVar[str] = "MouseMoved"
    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    x: float
    y: float

    def __str__(self) -> str:
        return f"MouseMovedEvent: {_fmt(self.x)}, {_fmt(self.y)}"


@dataclass
class MouseScrolledEvent(Event):
    event_type: ClassVar[EventType] = EventType.MOUSE_SCROLLED
    name: ClassVar[str] = "MouseScrolled"
    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    x_offset: float
    y_offset: float

    def __str__(self) -> str:
        return f"MouseScrolledEvent: {_fmt(self.x_offset)}, {_fmt(self.y_offset)}"


@dataclass
class MouseButtonEvent(Event):
    """Base of mouse button events."""

    category_flags: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    button: MouseCode


@dataclass
class MouseButtonPressedEvent(MouseButtonEvent):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_PRESSED
    name: ClassVar[str] = "MouseButtonPressed"

    def __str__(self) -> str:
        return f"MouseButtonPressedEvent: {int(self.button)}"


@dataclass
class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_RELEASED
    name: ClassVar[str] = "MouseButtonReleased"

    def __str__(self) -> str:
        return f"MouseButtonReleasedEvent: {int(self.button)}"


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes one event to handlers by event class."""

    def __init__(self, event: Event) -> None:
        self.event = event

    def dispatch(self, event_class: Type[E], func: Callable[[E], bool]) -> bool:
        """Call func if the event is of event_class's type; return whether it was called."""
        if self.event.event_type is EventType.NONE:
            return False
        if self.event.event_type == event_class.event_type:
            self.event.handled |= bool(func(self.event))  # type: ignore[arg-type]
            return True
        return False