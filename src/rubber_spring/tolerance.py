"""Tolerance value and float comparison helpers.

``near_zero`` is the band test shared by the rest snap in
``SpringMotion.position`` and the settle counter in
``SpringMotion.is_settled``. The band is strict (open interval) with an
exact-equality escape so that ``near_zero(0.0, 0.0)`` still holds.
``nan`` never compares near anything.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidParameterError
from .settings import DEFAULT_TOLERANCE_BAND

__all__ = [
    "Tolerance",
    "near_equal",
    "near_zero",
]


@dataclass(frozen=True)
class Tolerance:
    distance: float = DEFAULT_TOLERANCE_BAND  # absolute band around rest

    def validate(self) -> None:
        if not self.distance > 0:
            raise InvalidParameterError(
                "tolerance distance must be > 0", context={"distance": self.distance}
            )


def near_equal(a: float, b: float, epsilon: float) -> bool:
    """Return True if ``a`` lies strictly within ``epsilon`` of ``b`` (or equals it)."""
    return (b - epsilon) < a < (b + epsilon) or a == b


def near_zero(value: float, epsilon: float) -> bool:
    return near_equal(value, 0.0, epsilon)
