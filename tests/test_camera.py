import numpy as np
import pytest

from physixal.camera import Camera
from physixal.events import (
    KeyPressedEvent,
    MouseButtonPressedEvent,
    MouseButtonReleasedEvent,
    MouseMovedEvent,
)
from physixal.input import InputState
from physixal.keycodes import KeyCode, MouseCode


def _state(*keys):
    state = InputState()
    for key in keys:
        state.on_event(KeyPressedEvent(key))
    return state


def test_projection_maps_near_and_far_to_zero_and_one():
    camera = Camera()
    camera.init_camera(45.0, 1600.0, 900.0, 0.1, 100.0)
    projection = camera.projection()
    near = projection @ np.array([0.0, 0.0, -0.1, 1.0])
    far = projection @ np.array([0.0, 0.0, -100.0, 1.0])
    assert near[2] / near[3] == pytest.approx(0.0, abs=1e-9)
    assert far[2] / far[3] == pytest.approx(1.0)
    assert projection[3, 2] == -1.0


def test_projection_aspect_ratio():
    camera = Camera()
    camera.update_projection(60.0, 1600.0, 900.0, 0.1, 10.0)
    projection = camera.projection()
    assert projection[1, 1] / projection[0, 0] == pytest.approx(1600.0 / 900.0)
    assert camera.fov == 60.0


def test_zero_height_rejected():
    camera = Camera()
    with pytest.raises(ValueError):
        camera.update_projection(45.0, 100.0, 0.0, 0.1, 10.0)


def test_update_without_input_faces_negative_z():
    camera = Camera()
    camera.on_update(InputState(), 0.016)
    assert camera.front == pytest.approx(np.array([0.0, 0.0, -1.0]), abs=1e-9)
    assert np.linalg.norm(camera.front) == pytest.approx(1.0)


def test_movement_needs_shift():
    camera = Camera()
    start = camera.position.copy()
    camera.on_update(_state(KeyCode.W), 0.1)
    assert np.array_equal(camera.position, start)


def test_forward_moves_by_speed_times_step():
    camera = Camera()
    start = camera.position.copy()
    front_before = camera.front.copy()
    camera.on_update(_state(KeyCode.LEFT_SHIFT, KeyCode.W), 0.1)
    delta = camera.position - start
    assert np.linalg.norm(delta) == pytest.approx(10.0 * 0.1)
    assert np.dot(delta, front_before) > 0


def test_strafe_is_perpendicular_to_front():
    camera = Camera()
    camera.on_update(InputState(), 0.0)
    start = camera.position.copy()
    front_before = camera.front.copy()
    camera.on_update(_state(KeyCode.LEFT_SHIFT, KeyCode.D), 0.1)
    delta = camera.position - start
    assert np.dot(delta, front_before) == pytest.approx(0.0, abs=1e-9)
    assert np.dot(delta, camera.up) == pytest.approx(0.0, abs=1e-9)


def test_pitch_is_clamped():
    camera = Camera()
    state = _state(KeyCode.LEFT_SHIFT, KeyCode.UP)
    for _ in range(400):
        camera.on_update(state, 0.0)
    assert camera.pitch == 89.0


def test_mouse_drag_turns_camera():
    camera = Camera()
    state = _state(KeyCode.LEFT_SHIFT)
    state.on_event(MouseButtonPressedEvent(MouseCode.BUTTON_RIGHT))
    state.on_event(MouseMovedEvent(100.0, 100.0))
    camera.on_update(state, 0.0)
    assert camera.yaw == -90.0
    assert state.cursor_enabled is False

    state.on_event(MouseMovedEvent(110.0, 100.0))
    camera.on_update(state, 0.0)
    assert camera.yaw == pytest.approx(-90.0 + 10.0 * 0.3)


def test_releasing_button_restores_cursor():
    camera = Camera()
    state = _state(KeyCode.LEFT_SHIFT)
    state.on_event(MouseButtonPressedEvent(MouseCode.BUTTON_RIGHT))
    camera.on_update(state, 0.0)
    state.on_event(MouseButtonReleasedEvent(MouseCode.BUTTON_RIGHT))
    camera.on_update(state, 0.0)
    assert state.cursor_enabled is True


def test_view_moves_eye_to_origin_and_is_orthonormal():
    camera = Camera()
    camera.on_update(_state(KeyCode.LEFT_SHIFT, KeyCode.RIGHT, KeyCode.UP), 0.0)
    view = camera.view()
    eye = view @ np.append(camera.position, 1.0)
    assert eye[:3] == pytest.approx(np.zeros(3), abs=1e-9)
    rotation = view[:3, :3]
    assert rotation @ rotation.T == pytest.approx(np.eye(3), abs=1e-9)
    ahead = view @ np.append(camera.position + camera.front, 1.0)
    assert ahead[2] < 0


def test_key_pressed_event_is_not_handled():
    camera = Camera()
    event = KeyPressedEvent(KeyCode.A)
    camera.on_event(event)
    assert event.handled is False
    assert camera.on_key_pressed(event) is False