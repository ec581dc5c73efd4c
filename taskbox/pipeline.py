"""Concurrent pipelines of stages joined by bounded queues."""

from __future__ import annotations

import queue
import threading
from collections.abc import Callable, Iterable, Iterator
from typing import Any

Stage = Callable[[Iterable[Any]], Iterable[Any]]

_POLL_INTERVAL = 0.005
_END = object()


class _Failure:
    def __init__(self, error: BaseException) -> None:
        self.error = error


def _put(buffer: queue.Queue, item: Any, done: threading.Event) -> bool:
    while not done.is_set():
        try:
            buffer.put(item, timeout=_POLL_INTERVAL)
        except queue.Full:
            continue
        return True
    return False


def _drain(buffer: queue.Queue, done: threading.Event) -> Iterator[Any]:
    while not done.is_set():
        try:
            item = buffer.get(timeout=_POLL_INTERVAL)
        except queue.Empty:
            continue
        if item is _END:
            return
        if isinstance(item, _Failure):
            raise item.error
        yield item


def chan_wrap(source: Iterable[Any], done: threading.Event | None) -> Iterator[Any]:
    """Consume ``source`` on its own thread and yield its items until ``done`` is set."""
    stop = done if done is not None else threading.Event()
    buffer: queue.Queue = queue.Queue(maxsize=1)

    def pump() -> None:
        try:
            for item in source:
                if not _put(buffer, item, stop):
                    return
        except Exception as error:
            _put(buffer, _Failure(error), stop)
            return
        _put(buffer, _END, stop)

    threading.Thread(target=pump, daemon=True).start()
    return _drain(buffer, stop)


def execute_pipeline(
    source: Iterable[Any], done: threading.Event | None, *args: Stage
) -> Iterable[Any]:
    """Chain the stages in ``args`` over ``source``; each runs concurrently.

    Setting ``done`` stops the flow of items between stages.
    """
    output: Iterable[Any] = source
    for stage in args:
        output = stage(chan_wrap(output, done))
    return output