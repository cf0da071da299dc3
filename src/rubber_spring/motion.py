"""Spring motion between a start and a rest (end) position.

``SpringMotion`` wraps one closed-form solution (chosen once at
construction) and exposes the capability set an animation driver samples:

 - ``position(t)``  absolute position; snaps to the end value when the
   relative displacement is within the tolerance band
 - ``velocity(t)``  velocity (relative == absolute, the end is constant)
 - ``is_settled(t)`` stateful settle check, see below

Settle Policy:
A single near-zero sample is weak evidence (an oscillating spring crosses
zero on every half period), so the motion only reports settled after
``settle_threshold`` samples (default 30) have landed inside the band.
Samples are counted cumulatively across the session, not consecutively.
The counter lives in ``SettleTracker``, separate from the pure solution,
and is mutated by every ``is_settled`` call: call it once per sampled time
step. Once settled, the motion stays settled.

Concurrency:
Instances are not thread-safe; ``is_settled`` races on the counter if
called from several threads.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .description import SpringDescription
from .errors import InvalidParameterError
from .settings import DEFAULT_SETTLE_THRESHOLD
from .solution import SpringSolution, SpringType, TimeLike, create_solution
from .tolerance import Tolerance, near_zero

__all__ = [
    "SettleTracker",
    "SpringMotion",
]

_log = logging.getLogger(__name__)


@dataclass
class SettleTracker:
    """Sequential near-zero counter backing ``SpringMotion.is_settled``.

    Attributes
    ----------
    threshold: int
        Near-zero samples required before reporting settled (>= 1).
    crossing_count: int
        Near-zero samples observed so far; never decreases.
    settled_at: float
        Time passed to the call that reached ``threshold``; ``math.inf``
        until then. Written once.
    """

    threshold: int = DEFAULT_SETTLE_THRESHOLD
    crossing_count: int = 0
    settled_at: float = math.inf

    def validate(self) -> None:
        if self.threshold < 1:
            raise InvalidParameterError(
                "settle threshold must be >= 1", context={"threshold": self.threshold}
            )

    @property
    def settled(self) -> bool:
        return self.crossing_count >= self.threshold

    def observe(self, time: float, near_rest: bool) -> bool:
        """Record one sample and return whether the motion is settled."""
        if near_rest:
            self.crossing_count += 1
        if not self.settled:
            return False
        if self.settled_at == math.inf:
            self.settled_at = time
            _log.debug("spring settled at t=%s after %d near-rest samples", time, self.crossing_count)
        return True


class SpringMotion:
    def __init__(
        self,
        spring: SpringDescription,
        start: float,
        end: float,
        velocity: float,
        *,
        tolerance: Optional[Tolerance] = None,
        settle_threshold: Optional[int] = None,
    ) -> None:
        self._tolerance = tolerance or Tolerance()
        self._tolerance.validate()
        self._tracker = SettleTracker(
            threshold=DEFAULT_SETTLE_THRESHOLD if settle_threshold is None else settle_threshold
        )
        self._tracker.validate()
        self._end_position = end
        self._solution: SpringSolution = create_solution(spring, start - end, velocity)

    # Properties -------------------------------------------------------
    @property
    def end_position(self) -> float:
        return self._end_position

    @property
    def solution(self) -> SpringSolution:
        return self._solution

    @property
    def type(self) -> SpringType:
        return self._solution.type

    @property
    def tolerance(self) -> Tolerance:
        return self._tolerance

    @property
    def crossing_count(self) -> int:
        return self._tracker.crossing_count

    @property
    def settled_at(self) -> float:
        return self._tracker.settled_at

    # Evaluation -------------------------------------------------------
    def position(self, time: TimeLike) -> TimeLike:
        rel = self._solution.position(time)
        band = self._tolerance.distance
        if isinstance(rel, np.ndarray):
            near = ((rel > -band) & (rel < band)) | (rel == 0.0)
            return np.where(near, self._end_position, self._end_position + rel)
        if near_zero(rel, band):
            return self._end_position
        return self._end_position + rel

    def velocity(self, time: TimeLike) -> TimeLike:
        return self._solution.velocity(time)

    def is_settled(self, time: float) -> bool:
        """Count a near-rest sample at ``time`` and report whether settled.

        Mutates the settle counter: calling twice with the same ``time``
        counts twice.
        """
        rel = self._solution.position(time)
        return self._tracker.observe(time, near_zero(rel, self._tolerance.distance))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(end: {self._end_position:.1f}, {self.type.value})"
