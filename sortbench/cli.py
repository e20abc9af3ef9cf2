"""Interactive menu that sorts a fixed sample with a chosen algorithm and times it."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from typing import TextIO

from sortbench.sorting import Algorithm, Order, UnknownAlgorithmError, sort

SAMPLE = (50, 32, 28, 72, 61, 84, 18, 41, 99, 5, 35, 75, 79, 15, 43, 70, 66)
RULE = "=" * 29

_ALGORITHM_MENU = (
    " 0: EXIT\n"
    " 1: BUBBLE_SORT\n"
    " 2: QUICK_SORT\n"
    " 3: MERGE_SORT\n"
    " 4: INSERTION_SORT\n"
    " 5: BUCKET_SORT\n"
    " 6: HEAP_SORT\n"
)
_ORDER_MENU = " 1: Ascending\n 2: Descending\n"


def format_array(numbers: Sequence[int]) -> str:
    """Return the numbers separated by single spaces."""
    return " ".join(str(value) for value in numbers)


def format_elapsed(seconds: float) -> str:
    """Describe an elapsed CPU time."""
    return f"elapsed time: {seconds:f} seconds"


def run_once(
    algorithm: Algorithm | str,
    order: Order | str = Order.ASCENDING,
    out: TextIO | None = None,
) -> list[int]:
    """Sort a copy of the sample, report it to ``out`` and return the result."""
    if out is None:
        out = sys.stdout
    numbers = list(SAMPLE)
    print(RULE, file=out)
    print(f"unsorted: {format_array(numbers)}", file=out)
    start = time.process_time()
    try:
        sort(numbers, algorithm, order)
    except UnknownAlgorithmError as exc:
        print(f"\n{exc}", file=out)
        prefix = ""
    else:
        prefix = f"{Algorithm(algorithm).label} "
    elapsed = time.process_time() - start
    print(f"{prefix}sorted: {format_array(numbers)}", file=out)
    print(format_elapsed(elapsed), file=out)
    print(RULE, file=out)
    return numbers


def _ask(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the menu loop until the user picks 0 or input ends."""
    parser = argparse.ArgumentParser(
        prog="sortbench",
        description="Sort a sample array with a chosen algorithm and time it.",
    )
    parser.parse_args(argv)
    while True:
        sys.stdout.write(_ALGORITHM_MENU)
        choice = _ask(" Enter a sorting algorithm: ")
        if choice is None:
            break
        algorithm = choice[:1]
        if algorithm == "0":
            break
        sys.stdout.write(_ORDER_MENU)
        mode = _ask(" Enter a sorting order: ") or ""
        order = Order.DESCENDING if mode[:1] == Order.DESCENDING.value else Order.ASCENDING
        run_once(algorithm, order, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())