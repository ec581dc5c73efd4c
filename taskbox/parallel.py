"""Run tasks concurrently with a limit on the number of failures."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from typing import Any

Task = Callable[[], Any]


class ErrorsLimitExceededError(Exception):
    """Raised when tasks fail as many times as allowed, or the limit is not positive."""

    def __init__(self, message: str = "errors limit exceeded") -> None:
        super().__init__(message)


class EmptyTasksError(Exception):
    """Raised when there are no tasks to run."""

    def __init__(self, message: str = "empty task list") -> None:
        super().__init__(message)


def run(tasks: Iterable[Task], workers: int, max_errors: int) -> None:
    """Run ``tasks`` on ``workers`` threads.

    A task fails by raising an exception. Once ``max_errors`` tasks have failed
    no further tasks are started and :class:`ErrorsLimitExceededError` is raised.
    """
    pending_tasks = list(tasks)
    if not pending_tasks:
        raise EmptyTasksError()
    if max_errors <= 0:
        raise ErrorsLimitExceededError()
    if workers < 1:
        raise ValueError("workers must be positive")

    workers = min(workers, len(pending_tasks))
    pending = iter(pending_tasks)
    lock = threading.Lock()
    errors = 0

    def work() -> None:
        nonlocal errors
        while True:
            with lock:
                if errors >= max_errors:
                    return
                task = next(pending, None)
            if task is None:
                return
            try:
                task()
            except Exception:
                with lock:
                    errors += 1

    threads = [threading.Thread(target=work) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    if errors >= max_errors:
        raise ErrorsLimitExceededError()