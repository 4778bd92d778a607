"""Core of a small 3D engine: events, layers, ECS, camera, input state, logging and profiling."""

__version__ = "0.3.0"

__all__ = [
    "camera",
    "components",
    "core",
    "cpu_id",
    "ecs",
    "events",
    "input",
    "instrumentor",
    "keycodes",
    "layers",
    "log",
    "string_utilities",
    "timestep",
]