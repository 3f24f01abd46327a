import csv
import os
import random
import sys

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from heapkit import benchmark


def test_generate_random_list_is_seedable():
    a = benchmark.generate_random_list(20, random.Random(3))
    b = benchmark.generate_random_list(20, random.Random(3))
    assert a == b
    assert len(a) == 20
    assert all(0 <= v <= 1000000 for v in a)


@pytest.mark.parametrize("name", sorted(benchmark.OPERATIONS))
def test_operations_leave_valid_heaps(name):
    data = benchmark.generate_random_list(50, random.Random(11))
    heap = benchmark.OPERATIONS[name](data)
    assert heap.is_heap()
    if name == "extract":
        assert heap.is_empty()
    else:
        assert heap.size() == 50


def test_measure_operation_time_single_iteration_has_zero_stdev():
    avg, std, space = benchmark.measure_operation_time(benchmark.op_build, 10, iterations=1)
    assert avg >= 0.0
    assert std == 0.0
    assert space > 0


def test_run_benchmarks_writes_csv(tmp_path):
    out = tmp_path / "bench.csv"
    rows = benchmark.run_benchmarks(str(out), base_input=4, rounds=3, iterations=2, seed=5)
    assert rows == len(benchmark.OPERATIONS) * 3

    with open(out, newline="") as f:
        lines = list(csv.reader(f))
    assert lines[0] == benchmark.CSV_HEADER
    assert len(lines) == rows + 1
    assert [int(r[0]) for r in lines[1:4]] == [4, 8, 16]
    assert {r[1] for r in lines[1:]} == set(benchmark.OPERATIONS)


def test_run_benchmarks_rejects_bad_arguments(tmp_path):
    with pytest.raises(ValueError):
        benchmark.run_benchmarks(str(tmp_path / "x.csv"), base_input=0)
