"""
Model - Draw collaborators owned by each car.

The vehicle core never touches the graphics context directly. Each car owns
one object satisfying the ``Model`` protocol and hands it a finished
model-view-projection matrix once per frame.
"""

import logging
from typing import List, Protocol

import numpy as np

logger = logging.getLogger(__name__)


class Model(Protocol):
    """Anything that can draw itself given a 4x4 MVP transform."""

    def draw(self, transform: np.ndarray) -> None:
        ...


class NullModel:
    """Model that submits no geometry.

    Used when no graphics backend is attached, e.g. headless simulation.
    """

    def draw(self, transform: np.ndarray) -> None:
        logger.debug("NullModel.draw discarded transform")


class RecordingModel:
    """Model that keeps a copy of every transform it is asked to draw."""

    def __init__(self):
        self.transforms: List[np.ndarray] = []

    @property
    def draw_count(self) -> int:
        """Number of draw calls received."""
        return len(self.transforms)

    @property
    def last_transform(self) -> np.ndarray | None:
        """Most recently drawn transform, if any."""
        return self.transforms[-1] if self.transforms else None

    def draw(self, transform: np.ndarray) -> None:
        self.transforms.append(np.array(transform, dtype=float))

    def clear(self) -> None:
        """Forget all recorded transforms."""
        self.transforms.clear()
