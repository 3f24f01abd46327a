"""
Timing and space benchmarks for BinaryHeap.

Each operation is run over random integer lists whose size doubles every
round; average time, its standard deviation and the average memory held by
the resulting heap are written to a CSV file, one row per (operation, size).

Usage:
    python -m heapkit.cli bench --path heap_performance.csv
"""

from __future__ import annotations

import csv
import logging
import random
import statistics
import sys
import time
from typing import Callable, Dict, List, Optional, Tuple

from .datastructures.heap import BinaryHeap

logger = logging.getLogger(__name__)

CSV_HEADER = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
    "Average Space (bytes)",
]


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int, rng: Optional[random.Random] = None) -> List[int]:
    """Generate a list of random integers of given size."""
    rng = rng or random.Random()
    return [rng.randint(0, 1000000) for _ in range(size)]


def measure_space(heap: BinaryHeap) -> int:
    """Estimate memory held by `heap`: the object, its buffer and live elements."""
    total = sys.getsizeof(heap) + sys.getsizeof(heap._buf)  # buffer counts its slot array
    for i in range(len(heap)):
        total += sys.getsizeof(heap._buf[i])
    return total


def measure_operation_time(
    operation: Callable[[List[int]], BinaryHeap],
    input_size: int,
    iterations: int = 5,
    rng: Optional[random.Random] = None,
) -> Tuple[float, float, float]:
    """Run `operation` `iterations` times on fresh data.

    Returns (average ms, standard deviation ms, average space in bytes).
    """
    times = []
    sizes = []
    for _ in range(iterations):
        data = generate_random_list(input_size, rng)
        start = time.perf_counter()
        heap = operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds
        sizes.append(measure_space(heap))

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev, statistics.mean(sizes)


# ----------------------------
# Operations to Benchmark
# ----------------------------

def op_insert(data: List[int]) -> BinaryHeap:
    heap: BinaryHeap[int] = BinaryHeap()
    for item in data:
        heap.insert(item)
    return heap


def op_extract(data: List[int]) -> BinaryHeap:
    heap = op_insert(data)
    while not heap.is_empty():
        heap.extract_root()
    return heap


def op_build(data: List[int]) -> BinaryHeap:
    return BinaryHeap.from_sequence(data)


def op_replace(data: List[int]) -> BinaryHeap:
    heap = BinaryHeap.from_sequence(data)
    n = len(data)
    # Reuse the data itself as replacement values and walk slots in a fixed stride.
    for k, value in enumerate(data):
        heap.replace(value, (k * 7919) % n)
    return heap


OPERATIONS: Dict[str, Callable[[List[int]], BinaryHeap]] = {
    "insert": op_insert,
    "extract": op_extract,
    "build": op_build,
    "replace": op_replace,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(
    output_file: str,
    base_input: int = 100,
    rounds: int = 8,
    iterations: int = 5,
    seed: Optional[int] = None,
) -> int:
    """Run exponential performance tests and write them to `output_file`.

    Returns the number of data rows written.
    """
    if base_input < 1 or rounds < 1 or iterations < 1:
        raise ValueError("base_input, rounds and iterations must all be >= 1")
    rng = random.Random(seed)
    input_sizes = [base_input * (2 ** i) for i in range(rounds)]
    written = 0

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time, avg_space = measure_operation_time(op_func, size, iterations, rng)
                writer.writerow([size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}"])
                written += 1
                logger.info(
                    "%-8s | Size: %-8d | Avg Time: %.3f ms | Std: %.3f ms | Avg Space: %.0f bytes",
                    op_name, size, avg_time, std_time, avg_space,
                )

    return written
