# osalgo

Small, readable implementations of classic operating-system algorithms,
usable both as a library and as interactive command-line programs.

## Contents

| Module | What it does |
| --- | --- |
| `osalgo.scheduling` | FCFS and non-preemptive priority scheduling, with result tables and Gantt charts |
| `osalgo.bankers` | Banker's algorithm safety check |
| `osalgo.memory_fit` | First-, best- and worst-fit memory allocation |
| `osalgo.paging` | FIFO, LRU and LFU page replacement with a step-by-step trace |
| `osalgo.dining` | Dining philosophers: who eats and who waits, one or two at a time |
| `osalgo.producer_consumer` | A bounded buffer shared by a producer thread and a consumer thread |

## Installation

```
pip install .
```

## Library use

### CPU scheduling

`fcfs(bursts)` runs processes in the order given; `priority_schedule(bursts,
priorities)` runs them by priority, lower number first. Both return a
`Schedule` of `ScheduledProcess` entries (`pid`, `burst`, `waiting`,
`turnaround`, `priority`), with pids numbered from 1. All processes are taken
to arrive at time 0.

```python
from osalgo.scheduling import fcfs, format_table, gantt_chart

schedule = fcfs([5, 3, 8])
print(format_table(schedule))
print(gantt_chart(schedule))
print(schedule.average_waiting(), schedule.average_turnaround())
```

`waiting_times(bursts)` and `turnaround_times(bursts, waiting)` are available
on their own as well.

### Banker's algorithm

`safety_check(available, allocation, maximum)` returns a `SafetyResult` with
the order in which processes (0-based) were satisfied, the work vector after
each one, and whether the state is safe. `need_matrix(allocation, maximum)`
gives the remaining need.

```python
from osalgo.bankers import safety_check, format_report

result = safety_check(
    available=[3, 3, 2],
    allocation=[[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]],
    maximum=[[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]],
)
print(result.safe, result.order)
print(format_report(result))
```

### Memory allocation

`first_fit`, `best_fit` and `worst_fit` take block sizes and process sizes
and return, for each process, the index of the block it was placed in, or
`None`. The input block sizes are not modified. `allocate(strategy, blocks,
processes)` picks the function by `FitStrategy` (`FIRST`, `BEST`, `WORST`).

```python
from osalgo.memory_fit import FitStrategy, allocate, format_allocation

processes = [212, 417, 112, 426]
allocation = allocate(FitStrategy.BEST, [100, 500, 200, 300, 600], processes)
print(format_allocation(FitStrategy.BEST, processes, allocation))
```

### Page replacement

`fifo`, `lru` and `lfu` take a reference string and a frame count and return
a `PagingResult` whose `steps` record each page, the frame contents after it
(`None` for an empty frame) and whether it faulted; `faults` gives the total.
`simulate(policy, pages, frames)` chooses by `ReplacementPolicy`.

```python
from osalgo.paging import ReplacementPolicy, simulate, format_trace

result = simulate(ReplacementPolicy.LRU, [7, 0, 1, 2, 0, 3, 0, 4], frames=3)
print(result.faults)
print(format_trace(result))
```

### Dining philosophers

`one_at_a_time(philosophers)` and `two_at_a_time(philosophers)` list
`EatingRound`s of who eats and who waits; `format_rounds(rounds, numbered)`
renders them.

### Producer and consumer

`BoundedBuffer(capacity)` is a thread-safe FIFO whose `put` blocks while full
and `get` blocks while empty. `run(items, capacity, on_consume)` produces the
items on one thread, consumes them on another and returns them in the order
consumed; the default capacity is 10.

```python
from osalgo.producer_consumer import run

print(run(range(25), capacity=4))
```

## Command-line programs

Each program prompts for its input on standard input:

```
osalgo-fcfs                  # first-come first-served scheduling
osalgo-priority              # priority scheduling (lower number = higher priority)
osalgo-bankers               # Banker's algorithm safety check
osalgo-fit                   # first/best/worst fit, chosen from a menu
osalgo-paging [fifo|lru|lfu] # page replacement; fifo when no policy is given
osalgo-dining                # dining philosophers menu
osalgo-prodcons              # producer-consumer with a bounded buffer of 10
```

`osalgo-fit` repeats its menu until an invalid choice or the end of input;
`osalgo-dining` repeats until choice 3. Malformed or missing input makes a
program print an error and exit with status 1.

## Limits

Scheduling is non-preemptive with no arrival times; the Banker's module only
checks whether a state is safe and does not process new resource requests;
the dining philosophers module lists combinations rather than running
philosopher threads.

## Running the tests

```
pip install .[test]
pytest
```