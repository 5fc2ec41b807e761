"""Page replacement simulation: FIFO, LRU and LFU."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from itertools import count
from typing import Iterable, Iterator, Sequence


class ReplacementPolicy(Enum):
    """Which resident page gives way when a new page must be loaded."""

    FIFO = "fifo"
    LRU = "lru"
    LFU = "lfu"


@dataclass(frozen=True)
class PagingStep:
    """One page reference and the frame contents right after it."""

    page: int
    memory: tuple[int | None, ...]
    fault: bool


@dataclass(frozen=True)
class PagingResult:
    """Full trace of a page replacement run."""

    policy: ReplacementPolicy
    frames: int
    steps: tuple[PagingStep, ...]

    @property
    def faults(self) -> int:
        """Number of references that had to load a page."""
        return sum(step.fault for step in self.steps)


def _check_frames(frames: int) -> None:
    if frames < 1:
        raise ValueError("at least one frame is required")


def fifo(pages: Sequence[int], frames: int) -> PagingResult:
    """Replace the page that was loaded earliest."""
    _check_frames(frames)
    memory: list[int | None] = [None] * frames
    front = 0
    steps = []
    for page in pages:
        hit = page in memory
        if not hit:
            memory[front] = page
            front = (front + 1) % frames
        steps.append(PagingStep(page, tuple(memory), not hit))
    return PagingResult(ReplacementPolicy.FIFO, frames, tuple(steps))


def _free_or(memory: list[int | None], scores: list[int]) -> int:
    """Index of the first empty frame, else of the first lowest score."""
    if None in memory:
        return memory.index(None)
    return min(range(len(memory)), key=scores.__getitem__)


def lru(pages: Sequence[int], frames: int) -> PagingResult:
    """Replace the page whose last use lies furthest in the past."""
    _check_frames(frames)
    memory: list[int | None] = [None] * frames
    last_used = [0] * frames
    clock = count(1)
    steps = []
    for page in pages:
        hit = page in memory
        slot = memory.index(page) if hit else _free_or(memory, last_used)
        memory[slot] = page
        last_used[slot] = next(clock)
        steps.append(PagingStep(page, tuple(memory), not hit))
    return PagingResult(ReplacementPolicy.LRU, frames, tuple(steps))


def lfu(pages: Sequence[int], frames: int) -> PagingResult:
    """Replace the page referenced least often since it was loaded."""
    _check_frames(frames)
    memory: list[int | None] = [None] * frames
    uses = [0] * frames
    steps = []
    for page in pages:
        hit = page in memory
        if hit:
            uses[memory.index(page)] += 1
        else:
            slot = _free_or(memory, uses)
            memory[slot] = page
            uses[slot] = 1
        steps.append(PagingStep(page, tuple(memory), not hit))
    return PagingResult(ReplacementPolicy.LFU, frames, tuple(steps))


_POLICIES = {
    ReplacementPolicy.FIFO: fifo,
    ReplacementPolicy.LRU: lru,
    ReplacementPolicy.LFU: lfu,
}


def simulate(
    policy: ReplacementPolicy, pages: Sequence[int], frames: int
) -> PagingResult:
    """Run the given replacement policy over a reference string."""
    return _POLICIES[ReplacementPolicy(policy)](pages, frames)


def format_trace(result: PagingResult) -> str:
    """Render the reference-by-reference table and the fault total."""
    lines = ["Page\tMemory\t\tPage Fault"]
    for step in result.steps:
        cells = "".join("- " if frame is None else f"{frame} " for frame in step.memory)
        lines.append(f"{step.page}\t{cells}\t\t{'Yes' if step.fault else 'No'}")
    lines.append("")
    lines.append(f"Total Page Faults = {result.faults}")
    return "\n".join(lines) + "\n"


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None
    return int(token)


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive page replacement run; the policy is chosen on the command line."""
    parser = argparse.ArgumentParser(prog="paging", description=__doc__)
    parser.add_argument(
        "policy",
        nargs="?",
        default=ReplacementPolicy.FIFO.value,
        choices=[policy.value for policy in ReplacementPolicy],
    )
    args = parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        print("Enter number of pages: ", end="", flush=True)
        length = _read_int(tokens)
        print("Enter the page reference string: ", end="", flush=True)
        pages = [_read_int(tokens) for _ in range(length)]
        print("Enter number of frames: ", end="", flush=True)
        frames = _read_int(tokens)
        result = simulate(ReplacementPolicy(args.policy), pages, frames)
    except (EOFError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print()
    print(format_trace(result), end="")
    return 0