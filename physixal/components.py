"""Scene components: model asset paths and spatial transform."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .ecs import Component

__all__ = ["ModelComponent", "TransformComponent"]


@dataclass
class ModelComponent(Component):
    """Paths of the assets that make up a renderable model."""

    mesh_path: str = ""
    vertex_shader_path: str = ""
    fragment_shader_path: str = ""
    texture_path: str = ""


def _vector(value, size: int, label: str) -> np.ndarray:
    array = np.asarray(value, dtype=float).reshape(-1)
    if array.shape != (size,):
        raise ValueError(f"{label} must have {size} components, got {array.size}")
    return array


@dataclass(eq=False)
class TransformComponent(Component):
    """Position, rotation quaternion (w, x, y, z) and scale."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.array([1.0, 0.0, 0.0, 0.0]))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))

    def __post_init__(self) -> None:
        self.position = _vector(self.position, 3, "position")
        self.rotation = _vector(self.rotation, 4, "rotation")
        self.scale = _vector(self.scale, 3, "scale")

    def _rotation_matrix(self) -> np.ndarray:
        w, x, y, z = self.rotation
        return np.array(
            [
                [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
                [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
                [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
            ]
        )

    def model_matrix(self) -> np.ndarray:
        """Translate · rotate · scale, for column vectors (translation in the last column)."""
        translate = np.eye(4)
        translate[:3, 3] = self.position
        rotate = np.eye(4)
        rotate[:3, :3] = self._rotation_matrix()
        scale = np.diag([*self.scale, 1.0])
        return translate @ rotate @ scale