"""Dining philosophers: which hungry philosophers eat together."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from itertools import combinations
from typing import Iterable, Iterator, Sequence


@dataclass(frozen=True)
class EatingRound:
    """Philosophers granted to eat in one round and those left waiting."""

    eating: tuple[int, ...]
    waiting: tuple[int, ...]


def _round(philosophers: Sequence[int], chosen: Iterable[int]) -> EatingRound:
    chosen = set(chosen)
    return EatingRound(
        tuple(p for i, p in enumerate(philosophers) if i in chosen),
        tuple(p for i, p in enumerate(philosophers) if i not in chosen),
    )


def one_at_a_time(philosophers: Sequence[int]) -> list[EatingRound]:
    """Each hungry philosopher eats alone in turn."""
    return [_round(philosophers, [i]) for i in range(len(philosophers))]


def two_at_a_time(philosophers: Sequence[int]) -> list[EatingRound]:
    """Every pair of hungry philosophers, in order, eats together."""
    return [
        _round(philosophers, pair)
        for pair in combinations(range(len(philosophers)), 2)
    ]


def format_rounds(rounds: Sequence[EatingRound], numbered: bool = False) -> str:
    """Render the rounds, optionally headed by a combination number."""
    lines: list[str] = []
    for number, entry in enumerate(rounds, start=1):
        if numbered:
            lines.append(f"Combination {number}")
        names = " and ".join(f"P {p}" for p in entry.eating)
        verb = "is" if len(entry.eating) == 1 else "are"
        lines.append(f"{names} {verb} granted to eat")
        lines.extend(f"P {p} is waiting" for p in entry.waiting)
        lines.append("")
    return "\n".join(lines) + "\n" if lines else ""


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
    """Interactive menu listing who may eat at the same time."""
    tokens = _tokens(sys.stdin)
    print("DINING PHILOSOPHER PROBLEM")
    try:
        _read_int(tokens, "Enter the total no. of philosophers: ")
        hungry = _read_int(tokens, "How many are hungry: ")
        philosophers = [
            _read_int(tokens, f"Enter philosopher {i} position: ")
            for i in range(1, hungry + 1)
        ]
    except (EOFError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    while True:
        print("\n1. One can eat at a time\n2. Two can eat at a time\n3. Exit")
        try:
            choice = _read_int(tokens, "Enter your choice: ")
        except EOFError:
            print()
            return 0
        except ValueError:
            choice = 0
        if choice == 1:
            print("\nAllow one philosopher to eat at any time")
            print(format_rounds(one_at_a_time(philosophers)), end="")
        elif choice == 2:
            print("\nAllow two philosophers to eat at same time")
            print(format_rounds(two_at_a_time(philosophers), numbered=True), end="")
        elif choice == 3:
            print("\nExiting...")
            return 0
        else:
            print("Invalid choice! Try again.")