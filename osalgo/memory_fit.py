"""Contiguous memory allocation with first, best and worst fit."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Iterable, Iterator, Sequence


class FitStrategy(Enum):
    """Placement strategy; values match the interactive menu choices."""

    FIRST = 1
    BEST = 2
    WORST = 3


Allocation = list[int | None]


def first_fit(blocks: Sequence[int], processes: Sequence[int]) -> Allocation:
    """Place each process in the first block with enough room left."""
    remaining = list(blocks)
    result: Allocation = []
    for size in processes:
        chosen = next((j for j, free in enumerate(remaining) if free >= size), None)
        if chosen is not None:
            remaining[chosen] -= size
        result.append(chosen)
    return result


def _fit_by(blocks: Sequence[int], processes: Sequence[int], pick) -> Allocation:
    remaining = list(blocks)
    result: Allocation = []
    for size in processes:
        fitting = [j for j, free in enumerate(remaining) if free >= size]
        chosen = pick(fitting, key=remaining.__getitem__, default=None)
        if chosen is not None:
            remaining[chosen] -= size
        result.append(chosen)
    return result


def best_fit(blocks: Sequence[int], processes: Sequence[int]) -> Allocation:
    """Place each process in the smallest block that still fits it."""
    return _fit_by(blocks, processes, min)


def worst_fit(blocks: Sequence[int], processes: Sequence[int]) -> Allocation:
    """Place each process in the largest block that fits it."""
    return _fit_by(blocks, processes, max)


_STRATEGIES = {
    FitStrategy.FIRST: first_fit,
    FitStrategy.BEST: best_fit,
    FitStrategy.WORST: worst_fit,
}

_HEADERS = {
    FitStrategy.FIRST: None,
    FitStrategy.BEST: "Best Fit",
    FitStrategy.WORST: "Worst Fit",
}


def allocate(
    strategy: FitStrategy, blocks: Sequence[int], processes: Sequence[int]
) -> Allocation:
    """Run the given strategy; the input block sizes are left untouched."""
    return _STRATEGIES[FitStrategy(strategy)](blocks, processes)


def format_allocation(
    strategy: FitStrategy, processes: Sequence[int], allocation: Sequence[int | None]
) -> str:
    """Render where each process was placed, block indices from 0."""
    strategy = FitStrategy(strategy)
    header = _HEADERS[strategy]
    separator = ":" if strategy is FitStrategy.BEST else " "
    lines = ["", header] if header else []
    for pid, (size, block) in enumerate(zip(processes, allocation)):
        lines.append(f"Alloc[{size}]")
        if block is None:
            lines.append(f"Process {pid} of size {size} is not allocated")
        else:
            lines.append(
                f"Process {pid} of size {size} is allocated in block{separator}{block}"
            )
    return "\n".join(lines) + "\n"


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
    """Interactive menu running the strategies until an invalid choice."""
    tokens = _tokens(sys.stdin)
    try:
        process_count = _read_int(tokens, "Enter the no of process: ")
        block_count = _read_int(tokens, "Enter the no of blocks: ")
        print("Enter the size of each process:")
        processes = [_read_int(tokens, f"Process {i}:") for i in range(process_count)]
        print("Enter the block sizes:")
        blocks = [_read_int(tokens, f"Block {i}:") for i in range(block_count)]
    except (EOFError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    while True:
        print("\n1.First fit 2.Best fit 3.Worst fit")
        try:
            strategy = FitStrategy(_read_int(tokens, "Enter your choice: "))
        except EOFError:
            print()
            return 0
        except ValueError:
            print("Invalid Choice...!")
            return 0
        allocation = allocate(strategy, blocks, processes)
        print(format_allocation(strategy, processes, allocation), end="")