"""Closed-form damped spring motion.

Evaluates position and velocity of a damped harmonic oscillator directly
from its analytic solution, plus a settle heuristic for animation drivers.
"""

from .description import SpringDescription, critical_damping  # noqa: F401
from .errors import InvalidParameterError, SpringError  # noqa: F401
from .motion import SettleTracker, SpringMotion  # noqa: F401
from .solution import (  # noqa: F401
    CriticallyDampedSolution,
    OverdampedSolution,
    SpringSolution,
    SpringType,
    UnderdampedSolution,
    classify,
    create_solution,
)
from .tolerance import Tolerance, near_equal, near_zero  # noqa: F401

__version__ = "0.1.0"
