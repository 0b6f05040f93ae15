import pytest

from algokit.cli import main
from algokit.recursion import factorial


def _run(argv, capsys):
    status = main(argv)
    return status, capsys.readouterr().out


def test_matrix_prints_sample_graph(capsys):
    status, out = _run(["matrix"], capsys)
    assert status == 0
    assert out.splitlines() == ["Adjacency Matrix:", "0 1 0", "1 0 1", "0 1 0"]


def test_bubble_sort_default_values(capsys):
    status, out = _run(["bubble-sort"], capsys)
    expected = " ".join(str(v) for v in sorted([64, 34, 25, 12, 22]))
    assert status == 0
    assert out.strip() == "Sorted array: " + expected


def test_bubble_sort_given_values(capsys):
    _, out = _run(["bubble-sort", "3", "1", "2"], capsys)
    assert out.strip() == "Sorted array: 1 2 3"


def test_heap_sort_default_values(capsys):
    _, out = _run(["heap-sort"], capsys)
    expected = " ".join(str(v) for v in sorted([12, 11, 13, 5, 6, 7]))
    assert out.strip() == "Heap Sorted Array: " + expected


def test_heap_sort_given_values(capsys):
    _, out = _run(["heap-sort", "9", "-4", "0"], capsys)
    assert out.strip() == "Heap Sorted Array: -4 0 9"


def test_factorial_default(capsys):
    _, out = _run(["factorial"], capsys)
    assert out.strip() == f"Factorial of 5 is {factorial(5)}"


def test_factorial_given(capsys):
    _, out = _run(["factorial", "7"], capsys)
    assert out.strip() == f"Factorial of 7 is {factorial(7)}"


def test_missing_command_exits_with_usage_error():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_non_integer_value_rejected():
    with pytest.raises(SystemExit) as info:
        main(["bubble-sort", "x"])
    assert info.value.code == 2