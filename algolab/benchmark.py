"""Timing of sorting algorithms over growing random inputs."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from algolab.sorting import merge_sort, quick_sort, random_array, selection_sort

SortFunction = Callable[[list[int]], list[int]]

ALGORITHMS: dict[str, SortFunction] = {
    "selection": selection_sort,
    "quick": quick_sort,
    "merge": merge_sort,
}

_DEFAULT_SIZES = {
    "selection": (1000, 10000, 1000),
    "quick": (5000, 10000, 500),
    "merge": (5000, 10000, 500),
}

CSV_HEADER = "n,Time taken (ms)"


@dataclass(frozen=True)
class Timing:
    """CPU time in milliseconds taken to sort ``n`` elements."""

    n: int
    milliseconds: float


def time_sort(
    sort: SortFunction,
    sizes: Iterable[int],
    low: int = 1,
    high: int = 10000,
    rng: random.Random | None = None,
) -> Iterator[Timing]:
    """Yield the CPU time of ``sort`` on a fresh random array of each size."""
    rng = rng or random.Random()
    for n in sizes:
        data = random_array(n, low, high, rng)
        start = time.process_time()
        sort(data)
        elapsed = time.process_time() - start
        yield Timing(n, elapsed * 1000)


def write_csv(timings: Iterable[Timing], path: str | Path) -> None:
    """Write the timings as CSV rows ``n,milliseconds`` under a header line."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(CSV_HEADER + "\n")
        for timing in timings:
            handle.write(f"{timing.n},{timing.milliseconds:.2f}\n")


def _reported(timings: Iterable[Timing]) -> Iterator[Timing]:
    for timing in timings:
        print(f"Time taken to sort {timing.n} elements: {timing.milliseconds:.2f} ms")
        yield timing


def main(argv: list[str] | None = None) -> int:
    """Time one sorting algorithm and save the results as CSV."""
    parser = argparse.ArgumentParser(description="Time a sorting algorithm.")
    parser.add_argument("--algorithm", choices=sorted(ALGORITHMS), default="quick")
    parser.add_argument("--output", default="sorting_times.csv")
    parser.add_argument("--start", type=int)
    parser.add_argument("--stop", type=int)
    parser.add_argument("--step", type=int)
    parser.add_argument("--min", dest="low", type=int, default=1)
    parser.add_argument("--max", dest="high", type=int, default=10000)
    parser.add_argument("--seed", type=int)
    args = parser.parse_args(argv)

    start, stop, step = _DEFAULT_SIZES[args.algorithm]
    start = start if args.start is None else args.start
    stop = stop if args.stop is None else args.stop
    step = step if args.step is None else args.step
    if step <= 0:
        parser.error("--step must be positive")
    if args.low > args.high:
        parser.error("--min must not exceed --max")

    rng = random.Random(args.seed)
    timings = time_sort(
        ALGORITHMS[args.algorithm], range(start, stop + 1, step), args.low, args.high, rng
    )
    try:
        write_csv(_reported(timings), args.output)
    except OSError:
        print("Error opening file.")
        return 1
    print(f"Data saved to {args.output}")
    return 0