import io

import pytest

from osalgo.paging import (
    PagingResult,
    ReplacementPolicy,
    fifo,
    format_trace,
    lfu,
    lru,
    main,
    simulate,
)

REFERENCE = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2, 1, 2, 0, 1, 7, 0, 1]
POLICIES = list(ReplacementPolicy)


@pytest.mark.parametrize("policy", POLICIES)
@pytest.mark.parametrize("frames", [1, 2, 3, 4])
def test_invariants(policy, frames):
    result = simulate(policy, REFERENCE, frames)
    assert len(result.steps) == len(REFERENCE)
    for step, page in zip(result.steps, REFERENCE):
        assert step.page == page
        assert len(step.memory) == frames
        assert page in step.memory
    assert result.faults == sum(step.fault for step in result.steps)
    assert result.faults >= len(set(REFERENCE))


@pytest.mark.parametrize("policy", POLICIES)
def test_enough_frames_faults_once_per_distinct_page(policy):
    result = simulate(policy, REFERENCE, len(set(REFERENCE)))
    assert result.faults == len(set(REFERENCE))


def test_fifo_belady_anomaly():
    pages = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]
    assert fifo(pages, 3).faults == 9
    assert fifo(pages, 4).faults == 10


def test_fifo_evicts_oldest_lru_evicts_least_recent():
    pages = [1, 2, 3, 1, 4]
    assert 1 not in fifo(pages, 3).steps[-1].memory
    last = lru(pages, 3).steps[-1].memory
    assert 2 not in last and 1 in last


def test_lfu_evicts_least_frequent():
    last = lfu([1, 1, 2, 3, 4], 3).steps[-1].memory
    assert 2 not in last
    assert 1 in last and 3 in last and 4 in last


def test_hit_is_not_fault():
    result = lru([5, 5], 2)
    assert [step.fault for step in result.steps] == [True, False]
    assert result.steps[0].memory == (5, None)


@pytest.mark.parametrize("policy", POLICIES)
def test_simulate_dispatches(policy):
    result = simulate(policy, REFERENCE, 3)
    assert isinstance(result, PagingResult)
    assert result.policy is policy


@pytest.mark.parametrize("policy", POLICIES)
def test_zero_frames_rejected(policy):
    with pytest.raises(ValueError):
        simulate(policy, [1, 2], 0)


def test_format_trace():
    result = fifo([1, 2], 3)
    lines = format_trace(result).splitlines()
    assert lines[0] == "Page\tMemory\t\tPage Fault"
    assert lines[1] == "1\t1 - - \t\tYes"
    assert lines[-1] == f"Total Page Faults = {result.faults}"


def test_main_runs_selected_policy(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 2 1\n2\n"))
    assert main(["lru"]) == 0
    out = capsys.readouterr().out
    assert "1\t1 2 \t\tNo" in out
    assert "Total Page Faults = 2" in out


def test_main_reports_truncated_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 2\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err