#!/usr/bin/env python3
"""
MiniDS Benchmark
================
Times the core operations of the tree and heap on shuffled integers,
verifies each structure afterwards, and prints a report.

Usage:
    python bench.py                        # Both structures, defaults
    python bench.py --structure heap       # Heap only
    python bench.py --size 5000 --repeat 5 # Bigger workload
    python bench.py --verbose              # DEBUG logging
"""

import argparse
import logging
import random
import sys
import time
from typing import Any, Callable, Dict, List, Optional, Tuple

from heaps.binary_heap import Heap
from trees.bst import BinarySearchTree

logger = logging.getLogger(__name__)

# ─── Defaults ───────────────────────────────────────────────────────────────

DEFAULT_SIZE = 1000
DEFAULT_REPEAT = 3
DEFAULT_SEED = 1977
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

STRUCTURES = ("bst", "heap")


# ─── ANSI color codes ──────────────────────────────────────────────────────
class Color:
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RESET = "\033[0m"


# ─── Timing ─────────────────────────────────────────────────────────────────

def best_of(repeat: int, fn: Callable[[], Any]) -> Tuple[float, Any]:
    """
    Run fn repeat times. Returns (fastest seconds, result of last run).
    """
    best: Optional[float] = None
    result = None
    for _ in range(repeat):
        start = time.perf_counter()
        result = fn()
        elapsed = time.perf_counter() - start
        if best is None or elapsed < best:
            best = elapsed
    return best or 0.0, result


# ─── Workloads ──────────────────────────────────────────────────────────────

def bench_bst(values: List[int], repeat: int) -> Dict[str, Any]:
    """Insert, search, floor, iterate and delete on a BinarySearchTree."""

    def build() -> BinarySearchTree:
        tree = BinarySearchTree()
        for v in values:
            tree.insert_unique(v)
        return tree

    timings: Dict[str, float] = {}
    timings["insert"], tree = best_of(repeat, build)
    timings["search"], _ = best_of(repeat, lambda: [tree.search(v) for v in values])
    timings["floor"], _ = best_of(repeat, lambda: [tree.floor(v) for v in values])
    timings["iterate"], ordered = best_of(repeat, lambda: list(tree))

    issues = tree.verify_structure()
    if ordered != sorted(set(values)):
        issues.append("In-order iteration does not match sorted input")

    half = values[: len(values) // 2]
    start = time.perf_counter()
    for v in half:
        tree.delete(v)
    timings["delete"] = time.perf_counter() - start
    issues.extend(tree.verify_structure())

    logger.debug("bst: %d values, %d issues", len(values), len(issues))
    return {"name": "BinarySearchTree", "timings": timings, "issues": issues}


def bench_heap(values: List[int], repeat: int) -> Dict[str, Any]:
    """Add and drain on min- and max-ordered heaps."""

    def build(factory: Callable[[], Heap]) -> Heap:
        heap = factory()
        for v in values:
            heap.add(v)
        return heap

    timings: Dict[str, float] = {}
    timings["add"], min_heap = best_of(repeat, lambda: build(Heap.new_min))
    issues = min_heap.verify_structure()

    start = time.perf_counter()
    drained = list(min_heap.drain())
    timings["drain"] = time.perf_counter() - start
    if drained != sorted(values):
        issues.append("Min-heap drain is not ascending")

    max_heap = build(Heap.new_max)
    issues.extend(max_heap.verify_structure())
    if list(max_heap.drain()) != sorted(values, reverse=True):
        issues.append("Max-heap drain is not descending")

    logger.debug("heap: %d values, %d issues", len(values), len(issues))
    return {"name": "Heap", "timings": timings, "issues": issues}


WORKLOADS = {
    "bst": bench_bst,
    "heap": bench_heap,
}


# ─── Reporting ──────────────────────────────────────────────────────────────

def print_report(results: List[Dict[str, Any]], size: int, repeat: int) -> None:
    """Print a formatted benchmark report."""
    print()
    print(f"{Color.BOLD}{'═' * 60}{Color.RESET}")
    print(f"{Color.BOLD}  MiniDS BENCHMARK REPORT{Color.RESET}")
    print(f"{Color.BOLD}{'═' * 60}{Color.RESET}")
    print(f"  Values: {size}   Repeat: {repeat}")
    print(f"{Color.BOLD}{'─' * 60}{Color.RESET}")

    for r in results:
        icon = (f"{Color.GREEN}✔{Color.RESET}" if not r["issues"]
                else f"{Color.RED}❌{Color.RESET}")
        print(f"  {icon} {Color.CYAN}{r['name']}{Color.RESET}")
        for op, seconds in r["timings"].items():
            print(f"    {op:<12} {seconds * 1000:10.3f} ms")
        for issue in r["issues"]:
            print(f"    {Color.DIM}└─ {issue}{Color.RESET}")

    print(f"{Color.BOLD}{'═' * 60}{Color.RESET}")
    print()


# ─── Main ───────────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="MiniDS data structure benchmark",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--structure",
        choices=STRUCTURES + ("all",),
        default="all",
        help="Which structure to benchmark (default: all)",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=DEFAULT_SIZE,
        help=f"Number of values to insert (default: {DEFAULT_SIZE})",
    )
    parser.add_argument(
        "--repeat",
        type=int,
        default=DEFAULT_REPEAT,
        help=f"Timing repeats, best run is reported (default: {DEFAULT_REPEAT})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help="Shuffle seed",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.size < 1:
        parser.error("--size must be at least 1")
    if args.repeat < 1:
        parser.error("--repeat must be at least 1")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )

    values = list(range(args.size))
    random.Random(args.seed).shuffle(values)

    names = STRUCTURES if args.structure == "all" else (args.structure,)
    results = [WORKLOADS[name](values, args.repeat) for name in names]

    print_report(results, args.size, args.repeat)

    has_issues = any(r["issues"] for r in results)
    if has_issues:
        logger.warning("verification issues detected")
    return 1 if has_issues else 0


if __name__ == "__main__":
    sys.exit(main())
