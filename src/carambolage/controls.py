"""
Controls - Per-tick driver input samples.

Provides:
- ControlSample: steer and throttle axes for one tick
- Keyboard-style digital to analog axis mapping
- ScriptedInput: a replayable input source for headless runs
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np


@dataclass(frozen=True)
class ControlSample:
    """Driver input for a single tick.

    Both axes are nominally in [-1, 1]. The vehicle core does not clamp
    them; callers that read raw devices should use ``clamped()`` upstream.
    """
    steer: float = 0.0      # -1.0 full left, 1.0 full right
    throttle: float = 0.0   # 1.0 pedal to the metal, -1.0 emergency brake

    def clamped(self) -> "ControlSample":
        """Return a copy with both axes clipped to [-1, 1]."""
        return ControlSample(
            steer=float(np.clip(self.steer, -1.0, 1.0)),
            throttle=float(np.clip(self.throttle, -1.0, 1.0)),
        )

    @classmethod
    def from_keys(
        cls,
        up: bool = False,
        down: bool = False,
        left: bool = False,
        right: bool = False,
    ) -> "ControlSample":
        """Map four digital keys to the two axes.

        Opposing keys held together cancel out.

        Args:
            up: Accelerate key held
            down: Brake/reverse key held
            left: Steer left key held
            right: Steer right key held
        """
        return cls(
            steer=float(right) - float(left),
            throttle=float(up) - float(down),
        )


class ScriptedInput:
    """Replays a fixed sequence of control samples.

    The script is a list of ``(ticks, sample)`` segments. A ``None`` sample
    means no input for those ticks. Once the script runs out, ``poll``
    keeps returning ``None``.

    Usage:
        script = ScriptedInput([(60, ControlSample(throttle=1.0)), (30, None)])
        sample = script.poll()
    """

    def __init__(self, segments: Sequence[Tuple[int, Optional[ControlSample]]]):
        """Initialize from script segments.

        Args:
            segments: Sequence of (tick count, sample or None)
        """
        self._segments: List[Tuple[int, Optional[ControlSample]]] = []
        for ticks, sample in segments:
            if ticks < 0:
                raise ValueError(f"Segment tick count must be >= 0, got {ticks}")
            self._segments.append((int(ticks), sample))
        self._iterator = self._samples()

    @property
    def total_ticks(self) -> int:
        """Number of ticks covered by the script."""
        return sum(ticks for ticks, _ in self._segments)

    def _samples(self) -> Iterator[Optional[ControlSample]]:
        for ticks, sample in self._segments:
            for _ in range(ticks):
                yield sample

    def poll(self) -> Optional[ControlSample]:
        """Return the sample for the next tick, or None."""
        return next(self._iterator, None)

    def reset(self) -> None:
        """Rewind the script to its first tick."""
        self._iterator = self._samples()
