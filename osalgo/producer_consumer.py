"""Producer and consumer threads sharing a bounded buffer."""

from __future__ import annotations

import sys
import threading
from collections import deque
from typing import Any, Callable, Iterable, Iterator, Sequence

DEFAULT_CAPACITY = 10

_DONE = object()


class BoundedBuffer:
    """Thread-safe FIFO of fixed capacity; put blocks when full, get when empty."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[Any] = deque()
        self._lock = threading.Lock()
        self._not_full = threading.Condition(self._lock)
        self._not_empty = threading.Condition(self._lock)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def put(self, item: Any) -> None:
        """Append an item, waiting while the buffer is full."""
        with self._not_full:
            self._not_full.wait_for(lambda: len(self._items) < self.capacity)
            self._items.append(item)
            self._not_empty.notify()

    def get(self) -> Any:
        """Remove and return the oldest item, waiting while the buffer is empty."""
        with self._not_empty:
            self._not_empty.wait_for(lambda: bool(self._items))
            item = self._items.popleft()
            self._not_full.notify()
            return item


def run(
    items: Iterable[Any],
    capacity: int = DEFAULT_CAPACITY,
    on_consume: Callable[[Any], None] | None = None,
) -> list[Any]:
    """Produce items on one thread and consume them on another.

    Returns the items in the order they were consumed. An exception raised
    while producing or in ``on_consume`` is raised again once both threads end.
    """
    buffer = BoundedBuffer(capacity)
    consumed: list[Any] = []
    errors: list[BaseException] = []

    def produce() -> None:
        try:
            for item in items:
                buffer.put(item)
        except BaseException as exc:  # handed back to the caller
            errors.append(exc)
        finally:
            buffer.put(_DONE)

    def consume() -> None:
        failed = False
        while (item := buffer.get()) is not _DONE:
            if failed:
                continue
            consumed.append(item)
            if on_consume is not None:
                try:
                    on_consume(item)
                except BaseException as exc:  # keep draining so the producer ends
                    errors.append(exc)
                    failed = True

    threads = [threading.Thread(target=produce), threading.Thread(target=consume)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    if errors:
        raise errors[0]
    return consumed


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str], prompt: str) -> int:
    print(prompt, end="", flush=True)
    try:
        token = next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None
    return int(token)


def main(argv: Sequence[str] | None = None) -> int:
    """Read items from standard input on the producer thread and print them as consumed."""
    tokens = _tokens(sys.stdin)

    def entered(total: int) -> Iterator[int]:
        for number in range(1, total + 1):
            yield _read_int(tokens, f"Enter item {number}: ")

    try:
        total = _read_int(tokens, "Enter the number of items: ")
        run(entered(total), on_consume=lambda item: print(f"Consumed item = {item}"))
    except (EOFError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0