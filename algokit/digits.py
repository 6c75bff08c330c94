"""Sum of the decimal digits of a batch of random numbers."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable, Sequence

from algokit.array import Array

LOWEST = 1
HIGHEST = 999


def digit_sum(values: Iterable[int]) -> int:
    """Return the total of the decimal digits of every value."""
    total = 0
    for value in values:
        if value < 0:
            raise ValueError(f"digit sum needs non-negative values, got {value}")
        total += sum(int(ch) for ch in str(value))
    return total


def random_values(size: int, rng: random.Random | None = None) -> Array:
    """Return an array of ``size`` random integers between 1 and 999."""
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    rng = rng if rng is not None else random.Random()
    values = Array(size, 0)
    for index in range(size):
        values[index] = rng.randint(LOWEST, HIGHEST)
    return values


def main(argv: Sequence[str] | None = None) -> int:
    """Fill an array with random numbers and print the sum of their digits."""
    parser = argparse.ArgumentParser(
        prog="digits", description="Sum the digits of random numbers."
    )
    parser.add_argument("--size", type=int, help="number of values (asked for if omitted)")
    parser.add_argument("--seed", type=int, help="seed for the random generator")
    args = parser.parse_args(argv)

    size = args.size
    if size is None:
        try:
            size = int(input("Input array size "))
        except (ValueError, EOFError):
            print("array size must be a whole number")
            return 1
    try:
        values = random_values(size, random.Random(args.seed))
    except ValueError as error:
        print(error)
        return 1

    for index, value in enumerate(values):
        print(f"[{index}]={value}")
    print(f"The amount: {digit_sum(values)}")
    return 0