from __future__ import annotations

from itertools import cycle
from typing import Iterable, Optional, Protocol

import numpy as np


class UniformSource(Protocol):
    def uniform(self) -> float:
        """Return one sample from [0, 1)."""
        ...


class GeneratorUniformSource:
    """Uniform samples from a numpy Generator."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def uniform(self) -> float:
        return float(self.rng.random())


class SequenceUniformSource:
    """Replays a fixed list of samples in order, wrapping around at the end."""

    def __init__(self, values: Iterable[float]):
        samples = [float(v) for v in values]
        if not samples:
            raise ValueError("At least one sample is required.")
        if any(not 0.0 <= v < 1.0 for v in samples):
            raise ValueError("Samples must lie in [0, 1).")
        self.values = tuple(samples)
        self._iter = cycle(self.values)

    def uniform(self) -> float:
        return next(self._iter)
