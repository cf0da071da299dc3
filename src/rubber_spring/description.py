"""Physical description of a damped spring.

A ``SpringDescription`` is the immutable (mass, stiffness, damping) triple
for the ODE ``m * x'' + c * x' + k * x = 0``. It carries no initial
conditions; those belong to the motion built from it.

Public API:
 - SpringDescription dataclass (``validate``, ``discriminant``,
   ``with_damping_ratio``)
 - critical_damping(stiffness, mass) -> float
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import InvalidParameterError

__all__ = [
    "SpringDescription",
    "critical_damping",
]


@dataclass(frozen=True)
class SpringDescription:
    mass: float  # m
    stiffness: float  # k
    damping: float  # c

    @classmethod
    def with_damping_ratio(
        cls, mass: float, stiffness: float, ratio: float = 1.0
    ) -> "SpringDescription":
        """Build a spring whose damping is ``ratio`` times critical damping.

        ``ratio`` < 1 oscillates, 1 is (nominally) critical, > 1 is overdamped.
        The product ``2 * sqrt(m * k)`` is not always exact in float64, so a
        ratio of 1 may land a hair either side of the critical branch.
        """
        return cls(mass=mass, stiffness=stiffness, damping=ratio * 2.0 * math.sqrt(mass * stiffness))

    @property
    def discriminant(self) -> float:
        """Return ``c^2 - 4mk``; its sign selects the damping regime."""
        return self.damping * self.damping - 4.0 * self.mass * self.stiffness

    def validate(self) -> None:
        context = {"mass": self.mass, "stiffness": self.stiffness, "damping": self.damping}
        for name, value in context.items():
            if not math.isfinite(value):
                raise InvalidParameterError(f"{name} must be finite", context=context)
        if self.mass <= 0:
            raise InvalidParameterError("mass must be > 0", context=context)
        if self.stiffness <= 0:
            raise InvalidParameterError("stiffness must be > 0", context=context)
        if self.damping < 0:
            raise InvalidParameterError("damping must be >= 0", context=context)


def critical_damping(stiffness: float, mass: float) -> float:
    """Return damping coefficient for critical damping (c = 2 * sqrt(k*m))."""
    if stiffness <= 0 or mass <= 0:
        raise InvalidParameterError(
            "stiffness and mass must be > 0", context={"stiffness": stiffness, "mass": mass}
        )
    return 2.0 * math.sqrt(stiffness * mass)
