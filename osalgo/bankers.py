"""Banker's algorithm safety check."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence


@dataclass(frozen=True)
class SafetyResult:
    """Outcome of a safety check.

    ``order`` lists the 0-based indices of processes in the order they were
    satisfied; ``work`` holds the work vector right after each of them.
    """

    order: tuple[int, ...]
    work: tuple[tuple[int, ...], ...]
    safe: bool


def need_matrix(
    allocation: Sequence[Sequence[int]], maximum: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Remaining need of each process: maximum minus allocation."""
    if len(allocation) != len(maximum):
        raise ValueError("allocation and maximum have different process counts")
    need = []
    for alloc_row, max_row in zip(allocation, maximum):
        if len(alloc_row) != len(max_row):
            raise ValueError("allocation and maximum have different resource counts")
        need.append([m - a for a, m in zip(alloc_row, max_row)])
    return need


def safety_check(
    available: Sequence[int],
    allocation: Sequence[Sequence[int]],
    maximum: Sequence[Sequence[int]],
) -> SafetyResult:
    """Run repeated passes granting every process whose need fits the work vector."""
    need = need_matrix(allocation, maximum)
    resources = len(available)
    if any(len(row) != resources for row in allocation):
        raise ValueError("each process must list one value per resource class")

    work = list(available)
    finished = [False] * len(need)
    order: list[int] = []
    snapshots: list[tuple[int, ...]] = []
    while len(order) < len(need):
        progressed = False
        for pid, (need_row, alloc_row) in enumerate(zip(need, allocation)):
            if finished[pid] or any(n > w for n, w in zip(need_row, work)):
                continue
            work = [w + a for w, a in zip(work, alloc_row)]
            finished[pid] = True
            order.append(pid)
            snapshots.append(tuple(work))
            progressed = True
        if not progressed:
            break
    return SafetyResult(tuple(order), tuple(snapshots), all(finished))


def format_report(result: SafetyResult) -> str:
    """Render each satisfied process with its work vector, then the verdict."""
    lines = []
    for pid, work in zip(result.order, result.work):
        lines.append(f"Process {pid + 1} is satisfied")
        lines.extend(f"a[{k}]={value}" for k, value in enumerate(work))
    if result.safe:
        lines.append("The system is in a safe state.")
    else:
        lines.append("The system is in an unsafe state. Deadlock may occur.")
    return "\n".join(lines) + "\n"


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str], prompt: str = "") -> int:
    if prompt:
        print(prompt, end="", flush=True)
    try:
        token = next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None
    return int(token)


def _read_matrix(tokens: Iterator[str], rows: int, cols: int) -> list[list[int]]:
    return [[_read_int(tokens) for _ in range(cols)] for _ in range(rows)]


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive safety check reading the matrices from standard input."""
    tokens = _tokens(sys.stdin)
    try:
        processes = _read_int(tokens, "Enter number of processes: ")
        classes = _read_int(tokens, "Enter number of resource classes: ")
        if processes < 0 or classes < 0:
            raise ValueError("counts must not be negative")
        available = []
        for k in range(1, classes + 1):
            _read_int(tokens, f"Enter instances of resource class {k}: ")
            available.append(
                _read_int(
                    tokens,
                    f"Enter free vectors of resource class {k} (resources available): ",
                )
            )
        print("Enter the current allocation matrix:")
        allocation = _read_matrix(tokens, processes, classes)
        print("Enter the request matrix:")
        maximum = _read_matrix(tokens, processes, classes)
        result = safety_check(available, allocation, maximum)
    except (EOFError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print()
    print(format_report(result), end="")
    return 0