"""Signal smoothing filters."""

from __future__ import annotations

import math
import sys
from abc import ABC, abstractmethod
from collections.abc import Iterable, MutableSequence

import numpy as np

_EPSILON = sys.float_info.epsilon


class Smoother(ABC):
    """A filter that smooths a signal in place."""

    @abstractmethod
    def smooth(self, signal: MutableSequence[float]) -> None:
        """Smooth ``signal`` in place."""


class NoSmoothing(Smoother):
    """Leaves the signal untouched."""

    def smooth(self, signal: MutableSequence[float]) -> None:
        return None


class MovingAverage(Smoother):
    """Centred moving average over a window of ``k`` samples.

    Samples are replaced in order, so each window sees the already
    smoothed values before it.
    """

    def __init__(self, k: int) -> None:
        if k <= 0:
            raise ValueError("moving average window must be positive")
        self.k = k

    def smooth(self, signal: MutableSequence[float]) -> None:
        half = self.k // 2
        length = len(signal)
        for i in range(length):
            left = max(i - half, 0)
            right = min(i + half, length)
            signal[i] = float(np.mean(signal[left:right + 1]))


def nearly_equal(a: Iterable[float], b: Iterable[float]) -> bool:
    """True when paired elements of ``a`` and ``b`` agree to within rounding."""
    return all(
        math.isclose(x, y, rel_tol=8 * _EPSILON, abs_tol=_EPSILON) for x, y in zip(a, b)
    )