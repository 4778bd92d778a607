"""Layers and the ordered stack that holds them."""

from __future__ import annotations

from typing import Iterator, Optional

from .events import Event
from .timestep import Timestep

__all__ = ["Layer", "LayerStack"]


class Layer:
    """A unit of update, event and draw logic; subclasses extend the hooks."""

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.last_timestep: Optional[Timestep] = None
        self.events_seen = 0

    def on_attach(self) -> None:
        """Mark the layer as part of a running application."""
        self.attached = True

    def on_detach(self) -> None:
        """Mark the layer as removed from its stack."""
        self.attached = False

    def on_update(self, ts: Timestep) -> None:
        """Record the frame's delta time."""
        self.last_timestep = ts

    def on_event(self, event: Event) -> None:
        """Count an event that reached this layer."""
        self.events_seen += 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class LayerStack:
    """Ordered layers: regular layers first, overlays always after them."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def _index_of(self, layer: Layer, start: int, stop: int) -> Optional[int]:
        return next(
            (i for i, item in enumerate(self._layers[start:stop], start) if item is layer),
            None,
        )

    def push_layer(self, layer: Layer) -> None:
        """Insert a layer after the existing layers and before all overlays."""
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1

    def push_overlay(self, overlay: Layer) -> None:
        """Append an overlay at the very end of the stack."""
        self._layers.append(overlay)

    def pop_layer(self, layer: Layer) -> None:
        """Detach and remove a regular layer; overlays and unknown layers are ignored."""
        index = self._index_of(layer, 0, self._insert_index)
        if index is None:
            return
        layer.on_detach()
        del self._layers[index]
        self._insert_index -= 1

    def pop_overlay(self, overlay: Layer) -> None:
        """Detach and remove an overlay; regular layers and unknown layers are ignored."""
        index = self._index_of(overlay, self._insert_index, len(self._layers))
        if index is None:
            return
        overlay.on_detach()
        del self._layers[index]

    def close(self) -> None:
        """Detach every layer and empty the stack."""
        for layer in self._layers:
            layer.on_detach()
        self._layers.clear()
        self._insert_index = 0

    def __enter__(self) -> "LayerStack":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)