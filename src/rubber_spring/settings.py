"""Global configuration and constants for spring motion."""

from __future__ import annotations

import os
from typing import Final

# Absolute band around zero used for the rest snap and the settle check
DEFAULT_TOLERANCE_BAND: Final = float(os.environ.get("RUBBER_SPRING_TOLERANCE_BAND", "1e-4"))

# Number of near-zero samples before a motion reports settled
DEFAULT_SETTLE_THRESHOLD: Final = int(os.environ.get("RUBBER_SPRING_SETTLE_THRESHOLD", "30"))
