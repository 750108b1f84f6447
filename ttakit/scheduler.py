"""Process-wide scheduler with inspection hooks."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Scheduler:
    """Scheduler facade; the default instance reports an idle system."""

    _overrides: dict[int, int] = field(default_factory=dict, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def current_priority(self) -> int:
        """Priority of the current context."""
        return 0

    def set_priority_override(self, task: Any, new_priority: int) -> None:
        """Record a requested priority for ``task``; scheduling is not affected."""
        with self._lock:
            self._overrides[id(task)] = int(new_priority)

    def pending_count(self) -> int:
        """Number of tasks waiting to run."""
        return 0

    def running_count(self) -> int:
        """Number of tasks currently running."""
        return 0

    def load_average(self) -> float:
        """Average scheduler load."""
        return 0.0


_INSTANCE = Scheduler()


def get_instance() -> Scheduler:
    """The shared scheduler."""
    return _INSTANCE