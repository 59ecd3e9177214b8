"""Linear-programming estimates of how a reading splits into known mixtures."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Optional

import numpy as np
from scipy.optimize import linprog

from gcanalyzer.refrigerants import GCReading, RefrigerantMixture, RefrigerantName

LOW_THRESHOLD = 0.05

OptimizationResult = tuple[list[tuple[float, RefrigerantMixture]], float]


class OptimizationError(Exception):
    """Raised when an optimisation problem cannot be built or solved."""


class MixtureOptimization:
    """Finds proportions of candidate mixtures that best explain a reading.

    Each mixture gets a proportion bounded by its given minimum and 1. The
    combined amount of every component may not exceed what the reading shows
    (0 when the reading lacks the component).
    """

    def __init__(
        self,
        reading: GCReading,
        mixtures: Iterable[tuple[RefrigerantMixture, float]],
    ) -> None:
        pairs = list(mixtures)
        if not pairs:
            raise OptimizationError("Failed to collect constraints.")
        self.mixtures: list[RefrigerantMixture] = [mix for mix, _ in pairs]
        self.bounds: list[tuple[float, float]] = [(float(low), 1.0) for _, low in pairs]
        self.component_names: list[RefrigerantName] = sorted(
            {name for mix in self.mixtures for name in mix.component_set()}
        )
        # rows: components, columns: mixtures
        self.coefficients = np.array(
            [
                [mix.get_component(name) or 0.0 for mix in self.mixtures]
                for name in self.component_names
            ],
            dtype=float,
        ).reshape(len(self.component_names), len(self.mixtures))
        self.limits = np.array(
            [reading.get_component(name) or 0.0 for name in self.component_names],
            dtype=float,
        )

    def _usage_objective(self) -> np.ndarray:
        return self.coefficients.sum(axis=0)

    def optimize_usage(self) -> OptimizationResult:
        """Maximise the total share of the reading explained by the mixtures."""
        return self._optimize(self._usage_objective())

    def optimize_max_refrigerant(self, name: RefrigerantName) -> OptimizationResult:
        """Maximise usage while also favouring the mixture called ``name``."""
        index = next(
            (i for i, mix in enumerate(self.mixtures) if mix.identifier == name), None
        )
        if index is None:
            raise OptimizationError(
                "Requested max refrigerant is not a part of the optimization problem."
            )
        objective = self._usage_objective()
        objective[index] += 1.0
        return self._optimize(objective)

    def _optimize(self, objective: np.ndarray) -> OptimizationResult:
        has_rows = self.coefficients.shape[0] > 0
        result = linprog(
            -objective,
            A_ub=self.coefficients if has_rows else None,
            b_ub=self.limits if has_rows else None,
            bounds=self.bounds,
            method="highs",
        )
        if not result.success:
            raise OptimizationError(str(result.message))
        values = [float(v) for v in result.x]
        concentrations = list(zip(values, self.mixtures))
        return concentrations, float(objective @ np.array(values))


def _ratio(observed: float, expected: float) -> float:
    if expected == 0:
        return -math.inf if observed < 0 else 1.0
    return min(observed / expected, 1.0)


def _find_weakest_component(observed: GCReading, target: RefrigerantMixture) -> float:
    ratios = [
        _ratio(observed.get_component(name), concentration)
        for name, concentration in target.components()
    ]
    if not ratios:
        raise ValueError(f"mixture {target.identifier} has no components")
    return min(ratios)


def valid_comparison(observed: GCReading, target: RefrigerantMixture) -> bool:
    """True when the reading contains every component of the mixture."""
    return observed.component_set() >= target.component_set()


def find_concentration(observed: GCReading, target: RefrigerantMixture) -> Optional[float]:
    """Largest share of ``target`` the reading can hold, capped at 1.

    Returns None when the reading lacks a component of the mixture.
    """
    if not valid_comparison(observed, target):
        return None
    return _find_weakest_component(observed, target)


def _is_low(name: RefrigerantName, concentration: float, target: RefrigerantMixture) -> bool:
    return concentration <= LOW_THRESHOLD and name not in target.component_set()


def find_max_low(observed: GCReading, target: RefrigerantMixture) -> float:
    """Smallest low-level foreign component in the reading, or 0 if none."""
    lows: Sequence[float] = [
        concentration
        for name, concentration in observed.components()
        if _is_low(name, concentration, target)
    ]
    return min(lows, default=0.0)