"""Futures, promises and tasks that fulfil them."""

from __future__ import annotations

import threading
import time
from typing import Any, Callable, Optional


class Future:
    """Read side of a one-shot result; ``result`` blocks until it is set."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._ready = False
        self._result: Any = None

    def _set(self, value: Any) -> None:
        with self._cond:
            self._result = value
            self._ready = True
            self._cond.notify_all()

    def result(self, timeout: Optional[float] = None) -> Any:
        """Wait for the value; raise TimeoutError if ``timeout`` seconds pass first."""
        with self._cond:
            if not self._cond.wait_for(lambda: self._ready, timeout):
                raise TimeoutError("future not ready")
            return self._result

    def done(self) -> bool:
        with self._cond:
            return self._ready


class Promise:
    """Write side of a future."""

    def __init__(self) -> None:
        self._future = Future()

    def set_value(self, value: Any) -> None:
        """Store ``value`` and wake every waiter."""
        self._future._set(value)

    @property
    def future(self) -> Future:
        """The future this promise fulfils."""
        return self._future


class Task:
    """A call of ``func(arg)`` whose result fulfils an optional promise."""

    def __init__(
        self,
        func: Callable[[Any], Any],
        arg: Any = None,
        promise: Optional[Promise] = None,
    ) -> None:
        self.func = func
        self.arg = arg
        self.promise = promise

    def execute(self) -> Any:
        """Run the function, fulfil the promise and return the result."""
        result = self.func(self.arg)
        if self.promise is not None:
            self.promise.set_value(result)
        return result


def schedule(task: Task) -> Any:
    """Run ``task`` right away and return its result."""
    return task.execute()


def yield_now() -> None:
    """Give other threads a chance to run."""
    time.sleep(0)