"""A free-flying perspective camera driven by keyboard and mouse."""

from __future__ import annotations

import math

import numpy as np

from .events import Event, EventDispatcher, KeyPressedEvent
from .input import Input
from .keycodes import KeyCode, MouseCode
from .log import get_core_logger

__all__ = ["Camera"]

_MOVE_SPEED = 10.0
_SENSITIVITY = 0.3
_PITCH_LIMIT = 89.0


def _info(message: str) -> None:
    logger = get_core_logger()
    if logger is not None:
        logger.info(message)


def _normalize(vector: np.ndarray) -> np.ndarray:
    return vector / np.linalg.norm(vector)


def _look_at(eye: np.ndarray, center: np.ndarray, up: np.ndarray) -> np.ndarray:
    """Right-handed view matrix for column vectors."""
    f = _normalize(center - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    return np.array(
        [
            [s[0], s[1], s[2], -np.dot(s, eye)],
            [u[0], u[1], u[2], -np.dot(u, eye)],
            [-f[0], -f[1], -f[2], np.dot(f, eye)],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def _perspective(fov_y: float, aspect: float, z_near: float, z_far: float) -> np.ndarray:
    """Right-handed projection with depth mapped to [0, 1]."""
    tan_half = math.tan(fov_y / 2.0)
    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = z_far / (z_near - z_far)
    result[3, 2] = -1.0
    result[2, 3] = -(z_far * z_near) / (z_far - z_near)
    return result


class Camera:
    """Position, orientation (yaw and pitch in degrees) and projection."""

    def __init__(self) -> None:
        self.position = np.array([0.0, 0.0, 6.0])
        self.front = np.array([0.0, 0.0, 1.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.yaw = -90.0
        self.pitch = 0.0
        self._last_x = 800.0 / 2.0
        self._last_y = 600.0 / 2.0
        self._init_mouse = True

        self.fov = 0.0
        self.width = 0.0
        self.height = 0.0
        self.z_near = 0.0
        self.z_far = 0.0

        self._view = np.eye(4)
        self._projection = np.eye(4)

    def init_camera(self, fov: float, width: float, height: float, z_near: float, z_far: float) -> None:
        self.update_projection(fov, width, height, z_near, z_far)

    def _clamp_pitch(self) -> None:
        self.pitch = max(-_PITCH_LIMIT, min(_PITCH_LIMIT, self.pitch))

    def _apply_mouse(self, input: Input) -> None:
        if self._init_mouse:
            # First frame of a drag: only remember where the cursor is.
            self._last_x = input.mouse_x()
            self._last_y = input.mouse_y()
            self._init_mouse = False
            return
        x, y = input.mouse_x(), input.mouse_y()
        self.yaw += (x - self._last_x) * _SENSITIVITY
        self.pitch += (self._last_y - y) * _SENSITIVITY
        self._last_x, self._last_y = x, y
        self._clamp_pitch()

    def on_update(self, input: Input, ts: float) -> None:
        """Apply camera controls for one frame of length ts seconds."""
        if input.is_key_pressed(KeyCode.LEFT_SHIFT):
            _info("Shift (left) is pressed")
            speed = _MOVE_SPEED * float(ts)

            if input.is_mouse_button_pressed(MouseCode.BUTTON_RIGHT):
                _info("Mouse button (right) is pressed")
                self._apply_mouse(input)
                input.set_cursor_mode(False)
            else:
                self._init_mouse = True
                input.set_cursor_mode(True)

            turns = (
                (KeyCode.RIGHT, "Right", _SENSITIVITY, 0.0),
                (KeyCode.LEFT, "Left", -_SENSITIVITY, 0.0),
                (KeyCode.UP, "Up", 0.0, _SENSITIVITY),
                (KeyCode.DOWN, "Down", 0.0, -_SENSITIVITY),
            )
            for key, label, d_yaw, d_pitch in turns:
                if input.is_key_pressed(key):
                    _info(f"{label} is pressed")
                    self.yaw += d_yaw
                    self.pitch += d_pitch

            right = _normalize(np.cross(self.front, self.up))
            moves = (
                (KeyCode.D, "D", right),
                (KeyCode.A, "A", -right),
                (KeyCode.Q, "Q", self.up),
                (KeyCode.E, "E", -self.up),
                (KeyCode.W, "W", self.front),
                (KeyCode.S, "S", -self.front),
            )
            for key, label, direction in moves:
                if input.is_key_pressed(key):
                    _info(f"{label} is pressed")
                    self.position = self.position + direction * speed

        self._clamp_pitch()

        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        front = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self.front = _normalize(front)

    def update_view_matrix(self) -> np.ndarray:
        self._view = _look_at(self.position, self.position + self.front, self.up)
        return self._view.copy()

    def update_projection(self, fov: float, width: float, height: float, z_near: float, z_far: float) -> None:
        """Set a perspective projection; fov is the vertical field of view in degrees."""
        if height == 0:
            raise ValueError("height must not be zero")
        if z_near == z_far:
            raise ValueError("z_near and z_far must differ")
        self.fov = fov
        self.width = width
        self.height = height
        self.z_near = z_near
        self.z_far = z_far
        self._projection = _perspective(math.radians(fov), width / height, z_near, z_far)

    def view(self) -> np.ndarray:
        """The view matrix, recomputed from the current position and direction."""
        return self.update_view_matrix()

    def projection(self) -> np.ndarray:
        return self._projection.copy()

    def on_event(self, event: Event) -> None:
        EventDispatcher(event).dispatch(KeyPressedEvent, self.on_key_pressed)

    def on_key_pressed(self, event: KeyPressedEvent) -> bool:
        """Key presses are not consumed; the event's handled state is kept as it is."""
        return bool(event.handled)