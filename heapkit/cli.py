"""
Heap Command-Line Interface (CLI)

This script exposes the BinaryHeap operations via subcommands so they can be
tried from a shell. It ties together:
- Bulk construction and draining (sort order)
- Insertion and index replacement
- The benchmark harness (CSV output)

Usage examples:
    python -m heapkit.cli sort 5 3 8 1 9 2
    python -m heapkit.cli sort --min 5 3 8 1 9 2
    python -m heapkit.cli build 4 10 3 5 1
    python -m heapkit.cli replace 4 10 3 5 1 --index 4 --value 20
    python -m heapkit.cli bench --path heap_performance.csv
"""

import argparse
import logging
import sys

from .benchmark import run_benchmarks
from .datastructures.heap import BinaryHeap, MinOrder
from .errors import HeapError

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Utility: drain a heap into a list
# -------------------------------------------------------------------
def drain(heap):
    """Extract every element, largest first."""
    out = []
    while not heap.is_empty():
        out.append(heap.extract_root())
    return out


def format_values(values):
    return " ".join(str(v) for v in values)


# -------------------------------------------------------------------
# Core command handlers
# -------------------------------------------------------------------
def cmd_sort(args):
    """Heap-sort the given values (descending, or ascending with --min)."""
    if args.min:
        heap = BinaryHeap.from_sequence(MinOrder(v) for v in args.values)
        print(format_values(m.value for m in drain(heap)))
    else:
        heap = BinaryHeap.from_sequence(args.values)
        print(format_values(drain(heap)))


def cmd_build(args):
    """Build a heap bottom-up and show its array layout."""
    heap = BinaryHeap.from_sequence(args.values)
    print(heap.render())
    print(f"is_heap: {heap.is_heap()}")


def cmd_push(args):
    """Insert values one at a time, showing the layout after each insert."""
    heap = BinaryHeap(args.capacity)
    for v in args.values:
        heap.insert(v)
        print(f"insert {v}: {heap.render()} (capacity {heap.capacity})")


def cmd_replace(args):
    """Build a heap, replace one slot and show the result."""
    heap = BinaryHeap.from_sequence(args.values)
    old = heap.replace(args.value, args.index)
    print(f"replaced: {old}")
    print(heap.render())
    print(f"is_heap: {heap.is_heap()}")


def cmd_bench(args):
    """Run the benchmark harness and write a CSV."""
    rows = run_benchmarks(
        args.path,
        base_input=args.base_input,
        rounds=args.rounds,
        iterations=args.iterations,
        seed=args.seed,
    )
    print(f"Benchmark completed. {rows} rows saved to {args.path}")


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m heapkit.cli", description="Binary heap CLI")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("sort", help="Heap-sort values")
    s.add_argument("values", type=int, nargs="*")
    s.add_argument("--min", action="store_true", help="Ascending order (min-heap)")
    s.set_defaults(func=cmd_sort)

    s = sub.add_parser("build", help="Build a heap from values")
    s.add_argument("values", type=int, nargs="*")
    s.set_defaults(func=cmd_build)

    s = sub.add_parser("push", help="Insert values one by one")
    s.add_argument("values", type=int, nargs="*")
    s.add_argument("--capacity", type=int, default=BinaryHeap.DEFAULT_CAPACITY)
    s.set_defaults(func=cmd_push)

    s = sub.add_parser("replace", help="Replace the value at a heap index")
    s.add_argument("values", type=int, nargs="*")
    s.add_argument("--index", type=int, required=True)
    s.add_argument("--value", type=int, required=True)
    s.set_defaults(func=cmd_replace)

    s = sub.add_parser("bench", help="Benchmark heap operations to CSV")
    s.add_argument("--path", required=True)
    s.add_argument("--base-input", type=int, default=100)
    s.add_argument("--rounds", type=int, default=8)
    s.add_argument("--iterations", type=int, default=5)
    s.add_argument("--seed", type=int, default=None)
    s.set_defaults(func=cmd_bench)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m heapkit.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig does nothing if the root logger already has handlers.
    logging.getLogger("heapkit").setLevel(level)
    try:
        args.func(args)
    except (HeapError, ValueError) as exc:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        parser.error(str(exc))


if __name__ == "__main__":
    main()
