from __future__ import annotations

from typing import List, Tuple

from rubber_spring import SpringDescription, SpringMotion

CRITICAL = SpringDescription(mass=1.0, stiffness=100.0, damping=20.0)  # cmk = 0
OVERDAMPED = SpringDescription(mass=1.0, stiffness=100.0, damping=30.0)  # cmk = 500
UNDERDAMPED = SpringDescription(mass=1.0, stiffness=100.0, damping=4.0)  # cmk = -384
UNDAMPED = SpringDescription(mass=1.0, stiffness=100.0, damping=0.0)  # cmk = -400


def frame_times(fps: int = 60, max_ms: int = 2000) -> List[float]:
    dt = 1.0 / fps
    return [i * dt for i in range(int(max_ms / 1000.0 * fps) + 1)]


def drive_until_settled(
    motion: SpringMotion, fps: int = 60, max_ms: int = 5000
) -> Tuple[List[float], bool]:
    """Sample ``motion`` like an animation driver; return positions and settled flag."""
    positions: List[float] = []
    for t in frame_times(fps, max_ms):
        positions.append(motion.position(t))
        if motion.is_settled(t):
            return positions, True
    return positions, False
