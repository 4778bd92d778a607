import pytest

from physixal.events import (
    AppRenderEvent,
    AppTickEvent,
    AppUpdateEvent,
    Event,
    EventCategory,
    EventDispatcher,
    EventType,
    KeyEvent,
    KeyPressedEvent,
    KeyReleasedEvent,
    KeyTypedEvent,
    MouseButtonEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
    MouseScrolledEvent,
    WindowCloseEvent,
    WindowResizeEvent,
)
from physixal.keycodes import KeyCode, MouseCode


def test_category_bits():
    assert EventCategory(1) is EventCategory.APPLICATION
    assert EventCategory(2) is EventCategory.INPUT
    assert EventCategory(4) is EventCategory.KEYBOARD
    assert EventCategory(8) is EventCategory.MOUSE
    assert EventCategory(16) is EventCategory.MOUSE_BUTTON


def test_window_resize_text_and_fields():
    e = WindowResizeEvent(1280, 720)
    assert (e.width, e.height) == (1280, 720)
    assert str(e) == "WindowResizeEvent: 1280, 720"
    assert e.event_type is EventType.WINDOW_RESIZE


@pytest.mark.parametrize(
    "cls, name",
    [
        (WindowCloseEvent, "WindowClose"),
        (AppTickEvent, "AppTick"),
        (AppUpdateEvent, "AppUpdate"),
        (AppRenderEvent, "AppRender"),
    ],
)
def test_plain_events_print_their_name(cls, name):
    e = cls()
    assert str(e) == name
    assert e.name == name
    assert e.is_in_category(EventCategory.APPLICATION)
    assert not e.is_in_category(EventCategory.INPUT)


def test_key_pressed_text():
    e = KeyPressedEvent(KeyCode.A, 3)
    assert str(e) == f"KeyPressedEvent: {int(KeyCode.A)} (3 repeats)"
    assert e.repeat_count == 3


def test_key_released_and_typed_text():
    assert str(KeyReleasedEvent(KeyCode.W)) == f"KeyReleasedEvent: {int(KeyCode.W)}"
    assert str(KeyTypedEvent(KeyCode.S)) == f"KeyTypedEvent: {int(KeyCode.S)}"


def test_key_event_categories():
    e = KeyReleasedEvent(KeyCode.SPACE)
    assert e.is_in_category(EventCategory.KEYBOARD)
    assert e.is_in_category(EventCategory.INPUT)
    assert not e.is_in_category(EventCategory.MOUSE)


def test_mouse_moved_text():
    e = MouseMovedEvent(1.5, 2.0)
    assert str(e) == "MouseMovedEvent: 1.5, 2"
    assert (e.x, e.y) == (1.5, 2.0)


def test_mouse_scrolled_text():
    assert str(MouseScrolledEvent(0.0, -1.0)) == "MouseScrolledEvent: 0, -1"


def test_mouse_button_events():
    pressed = MouseButtonPressedEvent(MouseCode.BUTTON_RIGHT)
    released = MouseButtonReleasedEvent(MouseCode.BUTTON_LEFT)
    assert str(pressed) == "MouseButtonPressedEvent: 1"
    assert str(released) == "MouseButtonReleasedEvent: 0"
    assert pressed.is_in_category(EventCategory.MOUSE)
    assert not pressed.is_in_category(EventCategory.MOUSE_BUTTON)


@pytest.mark.parametrize(
    "factory",
    [lambda: Event(), lambda: KeyEvent(KeyCode.A), lambda: MouseButtonEvent(MouseCode.BUTTON_0)],
)
def test_abstract_events_cannot_be_created(factory):
    with pytest.raises(TypeError):
        factory()


def test_dispatch_matching_type_marks_handled():
    e = KeyPressedEvent(KeyCode.Q, 0)
    seen = []

    def handler(ev):
        seen.append(ev)
        return True

    assert EventDispatcher(e).dispatch(KeyPressedEvent, handler) is True
    assert seen == [e]
    assert e.handled is True


def test_dispatch_other_type_is_skipped():
    e = WindowCloseEvent()
    called = []
    result = EventDispatcher(e).dispatch(WindowResizeEvent, lambda ev: called.append(ev) or True)
    assert result is False
    assert called == []
    assert e.handled is False


def test_dispatch_handled_is_sticky():
    e = WindowCloseEvent()
    dispatcher = EventDispatcher(e)
    dispatcher.dispatch(WindowCloseEvent, lambda ev: True)
    dispatcher.dispatch(WindowCloseEvent, lambda ev: False)
    assert e.handled is True


def test_dispatch_to_abstract_class_never_matches():
    e = KeyTypedEvent(KeyCode.E)
    assert EventDispatcher(e).dispatch(KeyEvent, lambda ev: True) is False
    assert e.handled is False