"""Non-preemptive CPU scheduling: first-come-first-served and priority."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from itertools import accumulate
from typing import Iterable, Iterator, Sequence


@dataclass(frozen=True)
class ScheduledProcess:
    """One process in execution order, with its computed times."""

    pid: int
    burst: int
    waiting: int
    turnaround: int
    priority: int | None = None


@dataclass(frozen=True)
class Schedule:
    """Processes in the order they run on the CPU."""

    processes: tuple[ScheduledProcess, ...]

    def _mean(self, values: Iterable[int]) -> float:
        if not self.processes:
            raise ValueError("schedule has no processes")
        return sum(values) / len(self.processes)

    def average_waiting(self) -> float:
        """Mean waiting time over all processes."""
        return self._mean(p.waiting for p in self.processes)

    def average_turnaround(self) -> float:
        """Mean turnaround time over all processes."""
        return self._mean(p.turnaround for p in self.processes)


def waiting_times(bursts: Sequence[int]) -> list[int]:
    """Waiting time of each process when run back to back in the given order."""
    return list(accumulate(bursts, initial=0))[:-1]


def turnaround_times(bursts: Sequence[int], waiting: Sequence[int]) -> list[int]:
    """Turnaround time of each process: its burst plus its waiting time."""
    if len(bursts) != len(waiting):
        raise ValueError("bursts and waiting times differ in length")
    return [burst + wait for burst, wait in zip(bursts, waiting)]


def _build(
    pids: Sequence[int],
    bursts: Sequence[int],
    priorities: Sequence[int | None],
) -> Schedule:
    waits = waiting_times(bursts)
    tats = turnaround_times(bursts, waits)
    return Schedule(
        tuple(
            ScheduledProcess(pid, burst, wait, tat, prio)
            for pid, burst, wait, tat, prio in zip(pids, bursts, waits, tats, priorities)
        )
    )


def fcfs(bursts: Sequence[int]) -> Schedule:
    """Schedule processes in arrival order; pids are numbered from 1."""
    bursts = list(bursts)
    if not bursts:
        raise ValueError("at least one process is required")
    pids = range(1, len(bursts) + 1)
    return _build(pids, bursts, [None] * len(bursts))


def priority_schedule(bursts: Sequence[int], priorities: Sequence[int]) -> Schedule:
    """Schedule by priority, lower number first.

    Ties are ordered by an in-place exchange sort, so equal priorities are
    not necessarily kept in arrival order.
    """
    bursts = list(bursts)
    priorities = list(priorities)
    if not bursts:
        raise ValueError("at least one process is required")
    if len(bursts) != len(priorities):
        raise ValueError("bursts and priorities differ in length")
    entries = [
        (prio, burst, pid)
        for pid, (burst, prio) in enumerate(zip(bursts, priorities), start=1)
    ]
    count = len(entries)
    for i in range(count - 1):
        for j in range(i + 1, count):
            if entries[i][0] > entries[j][0]:
                entries[i], entries[j] = entries[j], entries[i]
    return _build(
        [pid for _, _, pid in entries],
        [burst for _, burst, _ in entries],
        [prio for prio, _, _ in entries],
    )


def format_table(schedule: Schedule) -> str:
    """Render the per-process table followed by the two averages."""
    with_priority = any(p.priority is not None for p in schedule.processes)
    if with_priority:
        lines = ["Process\tBurst Time\tPriority\tWaiting Time\tTurnaround Time"]
        lines.extend(
            f"P{p.pid}\t{p.burst}\t\t{p.priority}\t\t{p.waiting}\t\t{p.turnaround}"
            for p in schedule.processes
        )
    else:
        lines = ["Process\tBurst Time\tWaiting Time\tTurnaround Time"]
        lines.extend(
            f"P{p.pid}\t{p.burst}\t\t{p.waiting}\t\t{p.turnaround}"
            for p in schedule.processes
        )
    lines.append("")
    lines.append(f"Average Waiting Time: {schedule.average_waiting():.2f}")
    lines.append(f"Average Turnaround Time: {schedule.average_turnaround():.2f}")
    return "\n".join(lines) + "\n"


def gantt_chart(schedule: Schedule) -> str:
    """Render a text Gantt chart, each time unit two characters wide."""
    bar = " " + "".join("--" * p.burst + " " for p in schedule.processes)
    names = "|" + "".join(
        " " * (p.burst - 1) + f"P{p.pid}" + " " * (p.burst - 1) + "|"
        for p in schedule.processes
    )
    ends = accumulate(p.burst for p in schedule.processes)
    times = "0" + "".join(
        str(end).rjust(p.burst * 2) for p, end in zip(schedule.processes, ends)
    )
    return "\n".join(["Gantt Chart:", bar, names, bar, times]) + "\n"


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


def _report(schedule: Schedule) -> None:
    print()
    print(format_table(schedule), end="")
    print()
    print(gantt_chart(schedule), end="")


def main_fcfs(argv: Sequence[str] | None = None) -> int:
    """Interactive first-come-first-served scheduler."""
    tokens = _tokens(sys.stdin)
    try:
        count = _read_int(tokens, "Enter the number of processes: ")
        print("Enter the burst times for the processes:")
        bursts = [
            _read_int(tokens, f"Burst time for process {pid}: ")
            for pid in range(1, count + 1)
        ]
        schedule = fcfs(bursts)
    except (EOFError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    _report(schedule)
    return 0


def main_priority(argv: Sequence[str] | None = None) -> int:
    """Interactive non-preemptive priority scheduler."""
    tokens = _tokens(sys.stdin)
    try:
        count = _read_int(tokens, "Enter number of processes: ")
        bursts: list[int] = []
        priorities: list[int] = []
        for pid in range(1, count + 1):
            bursts.append(_read_int(tokens, f"\nEnter burst time for process {pid}: "))
            priorities.append(
                _read_int(
                    tokens,
                    f"Enter priority for process {pid} "
                    "(lower number = higher priority): ",
                )
            )
        schedule = priority_schedule(bursts, priorities)
    except (EOFError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    _report(schedule)
    return 0