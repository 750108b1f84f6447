"""Fixed-size thread pool running prioritised tasks."""

from __future__ import annotations

import os
import threading
from typing import Any, Callable

from .queues import PriorityTaskQueue
from .tasks import Future, Promise, Task
from .timing import get_tick_count

ERR_JOIN_FAILED = -101
ERR_SHUTDOWN_RETRY = -102
ERR_FATAL_EXIT = -103


class Worker:
    """One pool thread; pulls tasks from its pool until told to stop."""

    def __init__(self, pool: "ThreadPool", nice: int = 0) -> None:
        self.pool = pool
        self.nice = nice
        self.ts = get_tick_count()
        self.should_stop = False
        self.exit_code = 0
        self.thread = threading.Thread(target=self.run, daemon=True)

    def _apply_nice(self) -> None:
        setpriority = getattr(os, "setpriority", None)
        if setpriority is None:
            return
        try:
            setpriority(os.PRIO_PROCESS, 0, self.nice)
        except OSError:
            pass

    def _ready(self) -> bool:
        pool = self.pool
        return not pool._queue.is_empty() or self.should_stop or pool.is_shutdown

    def run(self) -> int:
        """Worker loop; returns the exit code.

        A task that raises sets the exit code to ``ERR_FATAL_EXIT`` and the
        worker carries on with the next task.
        """
        self._apply_nice()
        pool = self.pool
        while not self.should_stop:
            with pool._cond:
                pool._cond.wait_for(self._ready)
                if self.should_stop or pool.is_shutdown:
                    break
                task = pool._queue.pop()
            try:
                task.execute()
            except Exception:
                self.exit_code = ERR_FATAL_EXIT
        return self.exit_code


class ThreadPool:
    """Pool of worker threads; higher-priority tasks run first.

    Shutting down stops the workers once their current task finishes;
    tasks still queued are dropped and their futures never complete.
    """

    def __init__(self, num_threads: int = 4, default_nice: int = 0) -> None:
        if num_threads < 0:
            raise ValueError("num_threads must be non-negative")
        self.num_threads = num_threads
        self.creation_ts = get_tick_count()
        self.is_shutdown = False
        self._cond = threading.Condition()
        self._queue = PriorityTaskQueue()
        self.workers = [Worker(self, default_nice) for _ in range(num_threads)]
        for worker in self.workers:
            worker.thread.start()

    def submit(self, func: Callable[[Any], Any], arg: Any = None, priority: int = 0) -> Future:
        """Queue ``func(arg)`` and return the future of its result."""
        promise = Promise()
        task = Task(func, arg, promise)
        with self._cond:
            if self.is_shutdown:
                raise RuntimeError("cannot submit to a pool that has been shut down")
            self._queue.push(task, priority)
            self._cond.notify()
        return promise.future

    def force_shutdown(self) -> None:
        """Tell every worker to stop and wake them all."""
        with self._cond:
            self.is_shutdown = True
            for worker in self.workers:
                worker.should_stop = True
            self._cond.notify_all()

    def shutdown(self) -> None:
        """Stop the workers, wait for them and drop queued tasks."""
        self.force_shutdown()
        current = threading.current_thread()
        for worker in self.workers:
            if worker.thread is not current and worker.thread.is_alive():
                worker.thread.join()
        with self._cond:
            while not self._queue.is_empty():
                self._queue.pop()

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, *args: Any) -> None:
        self.shutdown()