"""Closed-form solutions of the damped spring ODE.

Solves ``m * x'' + c * x' + k * x = 0`` for the displacement ``x(t)`` of a
spring relative to its rest position, given the initial relative
displacement ``x(0)`` ("distance") and velocity ``x'(0)``.

The regime is picked once from the discriminant ``cmk = c^2 - 4mk``:

 - ``cmk == 0``  critically damped  ``(c1 + c2 t) e^(rt)``
 - ``cmk > 0``   overdamped         ``c1 e^(r1 t) + c2 e^(r2 t)``
 - ``cmk < 0``   underdamped        ``e^(rt) (c1 cos wt + c2 sin wt)``

Design Goals:
 - Each regime is a small frozen dataclass of precomputed coefficients with
   a ``type`` tag. The three classes share no base; ``SpringSolution`` is
   their union and ``create_solution`` is the only place that chooses.
 - float64 semantics end to end. Coefficients and evaluations run through
   numpy under ``errstate(all="ignore")`` so degenerate inputs (zero
   distance under critical damping) and overflow at large ``t`` yield
   ``nan`` / ``inf`` instead of raising ``ZeroDivisionError`` or
   ``OverflowError``.
 - ``position`` / ``velocity`` accept a float (returning a float) or an
   array of times (returning an array) for vectorised sampling.

Underdamped decay rate:
The underdamped rate is ``-(c / 2 * m)``, i.e. damping halved and then
multiplied by mass, whereas the other two regimes use ``-c / (2m)``. The
two agree only for ``m == 1``. Existing animation tuning depends on the
current curve, so it is kept as is (see
``test_underdamped_decay_rate_diverges_from_textbook_rate``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

import numpy as np

from .description import SpringDescription

__all__ = [
    "SpringType",
    "CriticallyDampedSolution",
    "OverdampedSolution",
    "UnderdampedSolution",
    "SpringSolution",
    "classify",
    "create_solution",
]

_log = logging.getLogger(__name__)

TimeLike = Union[float, np.ndarray]


class SpringType(str, Enum):
    CRITICALLY_DAMPED = "criticallyDamped"
    OVERDAMPED = "overDamped"
    UNDERDAMPED = "underDamped"


def _times(time: TimeLike) -> np.ndarray:
    return np.asarray(time, dtype=np.float64)


def _result(value: np.ndarray) -> TimeLike:
    # 0-d results go back to plain floats
    if np.ndim(value) == 0:
        return float(value)
    return value


@dataclass(frozen=True)
class CriticallyDampedSolution:
    r: float
    c1: float
    c2: float

    type: ClassVar[SpringType] = SpringType.CRITICALLY_DAMPED

    @classmethod
    def from_spring(
        cls, spring: SpringDescription, distance: float, velocity: float
    ) -> "CriticallyDampedSolution":
        with np.errstate(all="ignore"):
            r = -np.float64(spring.damping) / (2.0 * spring.mass)
            c1 = np.float64(distance)
            c2 = np.float64(velocity) / (r * distance)
        return cls(r=float(r), c1=float(c1), c2=float(c2))

    def position(self, time: TimeLike) -> TimeLike:
        t = _times(time)
        with np.errstate(all="ignore"):
            return _result((self.c1 + self.c2 * t) * np.exp(self.r * t))

    def velocity(self, time: TimeLike) -> TimeLike:
        t = _times(time)
        with np.errstate(all="ignore"):
            power = np.exp(self.r * t)
            return _result(self.r * (self.c1 + self.c2 * t) * power + self.c2 * power)


@dataclass(frozen=True)
class OverdampedSolution:
    r1: float
    r2: float
    c1: float
    c2: float

    type: ClassVar[SpringType] = SpringType.OVERDAMPED

    @classmethod
    def from_spring(
        cls, spring: SpringDescription, distance: float, velocity: float
    ) -> "OverdampedSolution":
        with np.errstate(all="ignore"):
            root = np.sqrt(np.float64(spring.discriminant))
            r1 = (-spring.damping - root) / (2.0 * spring.mass)
            r2 = (-spring.damping + root) / (2.0 * spring.mass)
            c2 = (velocity - r1 * distance) / (r2 - r1)
            c1 = distance - c2
        return cls(r1=float(r1), r2=float(r2), c1=float(c1), c2=float(c2))

    def position(self, time: TimeLike) -> TimeLike:
        t = _times(time)
        with np.errstate(all="ignore"):
            return _result(self.c1 * np.exp(self.r1 * t) + self.c2 * np.exp(self.r2 * t))

    def velocity(self, time: TimeLike) -> TimeLike:
        t = _times(time)
        with np.errstate(all="ignore"):
            return _result(
                self.c1 * self.r1 * np.exp(self.r1 * t) + self.c2 * self.r2 * np.exp(self.r2 * t)
            )


@dataclass(frozen=True)
class UnderdampedSolution:
    w: float
    r: float
    c1: float
    c2: float

    type: ClassVar[SpringType] = SpringType.UNDERDAMPED

    @classmethod
    def from_spring(
        cls, spring: SpringDescription, distance: float, velocity: float
    ) -> "UnderdampedSolution":
        with np.errstate(all="ignore"):
            w = np.sqrt(-np.float64(spring.discriminant)) / (2.0 * spring.mass)
            r = -(np.float64(spring.damping) / 2.0 * spring.mass)
            c1 = np.float64(distance)
            c2 = (velocity - r * distance) / w
        return cls(w=float(w), r=float(r), c1=float(c1), c2=float(c2))

    def position(self, time: TimeLike) -> TimeLike:
        t = _times(time)
        with np.errstate(all="ignore"):
            return _result(
                np.exp(self.r * t) * (self.c1 * np.cos(self.w * t) + self.c2 * np.sin(self.w * t))
            )

    def velocity(self, time: TimeLike) -> TimeLike:
        t = _times(time)
        with np.errstate(all="ignore"):
            power = np.exp(self.r * t)
            cosine = np.cos(self.w * t)
            sine = np.sin(self.w * t)
            return _result(
                power * (self.c2 * self.w * cosine - self.c1 * self.w * sine)
                + self.r * power * (self.c2 * sine + self.c1 * cosine)
            )


SpringSolution = Union[CriticallyDampedSolution, OverdampedSolution, UnderdampedSolution]

_VARIANTS = {
    SpringType.CRITICALLY_DAMPED: CriticallyDampedSolution,
    SpringType.OVERDAMPED: OverdampedSolution,
    SpringType.UNDERDAMPED: UnderdampedSolution,
}


def classify(spring: SpringDescription) -> SpringType:
    """Return the damping regime for ``spring`` from the sign of its discriminant."""
    cmk = spring.discriminant
    if cmk == 0.0:
        return SpringType.CRITICALLY_DAMPED
    if cmk > 0.0:
        return SpringType.OVERDAMPED
    return SpringType.UNDERDAMPED


def create_solution(spring: SpringDescription, distance: float, velocity: float) -> SpringSolution:
    """Validate ``spring`` and build the closed-form solution for its regime.

    Parameters
    ----------
    spring: SpringDescription
        Physical parameters; ``InvalidParameterError`` if out of range.
    distance: float
        Initial displacement relative to the rest position.
    velocity: float
        Initial velocity.
    """
    spring.validate()
    kind = classify(spring)
    solution = _VARIANTS[kind].from_spring(spring, distance, velocity)
    _log.debug("spring %s -> %s %s", spring, kind.value, solution)
    if not all(np.isfinite(v) for v in vars(solution).values()):
        _log.warning(
            "degenerate %s spring (distance=%r, velocity=%r): non-finite coefficients %s",
            kind.value,
            distance,
            velocity,
            solution,
        )
    return solution
