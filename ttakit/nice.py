"""Nice-value helpers for task priorities."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import MutableSequence, Optional

PRIO_MIN = -20
PRIO_MAX = 19


class SchedPriority(IntEnum):
    """Standard priority levels for the scheduler."""

    URGENT = -20
    HIGH = -10
    NORMAL = 0
    LAZY = 19


def nice_to_prio(nice: int) -> int:
    """Clamp a nice value into the range [PRIO_MIN, PRIO_MAX]."""
    return max(PRIO_MIN, min(PRIO_MAX, nice))


def compare_nice(nice1: int, nice2: int) -> int:
    """Negative, zero or positive as ``nice1`` is below, equal to or above ``nice2``."""
    return nice1 - nice2


def shuffle_by_nice(nices: MutableSequence[int], rng: Optional[random.Random] = None) -> None:
    """Shuffle ``nices`` in place."""
    chooser = rng if rng is not None else random
    count = len(nices)
    for i in range(count - 1):
        j = i + chooser.randrange(count - i)
        nices[i], nices[j] = nices[j], nices[i]


def lock_priority(nice: int) -> int:
    """Clamp a nice value into the user range [NORMAL, PRIO_MAX]."""
    return max(SchedPriority.NORMAL.value, min(PRIO_MAX, nice))