import io

import pytest

from osalgo.bankers import format_report, main, need_matrix, safety_check

AVAILABLE = [3, 3, 2]
ALLOCATION = [[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]]
MAXIMUM = [[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]]


def test_need_plus_allocation_is_maximum():
    need = need_matrix(ALLOCATION, MAXIMUM)
    for need_row, alloc_row, max_row in zip(need, ALLOCATION, MAXIMUM):
        assert [n + a for n, a in zip(need_row, alloc_row)] == max_row


def test_need_matrix_shape_errors():
    with pytest.raises(ValueError):
        need_matrix([[1, 2]], [[1, 2], [3, 4]])
    with pytest.raises(ValueError):
        need_matrix([[1, 2]], [[1]])


def test_classic_safe_sequence():
    result = safety_check(AVAILABLE, ALLOCATION, MAXIMUM)
    assert result.safe is True
    assert result.order == (1, 3, 4, 0, 2)


def test_final_work_returns_all_allocations():
    result = safety_check(AVAILABLE, ALLOCATION, MAXIMUM)
    totals = [a + sum(col) for a, col in zip(AVAILABLE, zip(*ALLOCATION))]
    assert list(result.work[-1]) == totals


def test_each_grant_fits_previous_work():
    result = safety_check(AVAILABLE, ALLOCATION, MAXIMUM)
    need = need_matrix(ALLOCATION, MAXIMUM)
    previous = [tuple(AVAILABLE)] + list(result.work[:-1])
    for pid, before in zip(result.order, previous):
        assert all(n <= w for n, w in zip(need[pid], before))


def test_unsafe_state():
    result = safety_check([0], [[1], [1]], [[3], [3]])
    assert result.safe is False
    assert result.order == ()
    assert format_report(result).endswith(
        "The system is in an unsafe state. Deadlock may occur.\n"
    )


def test_no_processes_is_safe():
    result = safety_check([1, 1], [], [])
    assert result.safe is True
    assert result.order == ()


def test_row_length_must_match_available():
    with pytest.raises(ValueError):
        safety_check([1, 1], [[0]], [[1]])


def test_report_lists_work_vectors():
    result = safety_check(AVAILABLE, ALLOCATION, MAXIMUM)
    lines = format_report(result).splitlines()
    assert lines[0] == f"Process {result.order[0] + 1} is satisfied"
    assert lines[1:4] == [f"a[{k}]={v}" for k, v in enumerate(result.work[0])]
    assert lines[-1] == "The system is in a safe state."


def test_main_reads_matrices(monkeypatch, capsys):
    text = "2 1\n4 1\n1 1\n2 2\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Process 1 is satisfied" in out
    assert "The system is in a safe state." in out


def test_main_truncated_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 1\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err