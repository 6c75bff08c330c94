"""Small exercises on arrays, lists, dictionaries and filtering."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence

from algokit.linked_list import LinkedList

_SAMPLE = (1, 2, 3, 4, 5)
NOT_FOUND = "Not found"


def array_sums(by_value: bool) -> tuple[int, int]:
    """Sum a five-element array before and after a helper zeroes its last slot.

    When ``by_value`` is true the helper works on a copy, so the second sum
    is unchanged; otherwise it modifies the caller's array.
    """
    values = list(_SAMPLE)
    first = sum(values)
    target = list(values) if by_value else values
    target[-1] = 0
    return first, sum(values)


def prepend_all(values: Iterable[int]) -> list[int]:
    """Insert each value at the front in turn and return the resulting order."""
    items = LinkedList()
    for value in values:
        items.insert(value)
    return list(items)


def lookup_definitions(
    entries: Iterable[tuple[str, str]], queries: Iterable[str]
) -> list[str]:
    """Return the first definition of each queried word, or ``Not found``."""
    dictionary: dict[str, str] = {}
    for word, definition in entries:
        dictionary.setdefault(word, definition)
    return [dictionary.get(query, NOT_FOUND) for query in queries]


def less_than(values: Iterable[int], limit: int) -> list[int]:
    """Return the values below ``limit``, keeping their order."""
    return [value for value in values if value < limit]


class _Tokens:
    def __init__(self, text: str) -> None:
        self._stream: Iterator[str] = iter(text.split())

    def word(self) -> str:
        token = next(self._stream, None)
        if token is None:
            raise ValueError("unexpected end of input")
        return token

    def number(self) -> int:
        return int(self.word())

    def rest(self) -> list[str]:
        return list(self._stream)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one exercise, reading its input from standard input."""
    parser = argparse.ArgumentParser(prog="practice", description="Run a practice exercise.")
    parser.add_argument("exercise", choices=("array1", "array2", "list1", "map1", "vector1"))
    args = parser.parse_args(argv)

    try:
        if args.exercise in ("array1", "array2"):
            first, second = array_sums(by_value=args.exercise == "array2")
            print(f"Sum1: {first}")
            print(f"Sum2: {second}")
            return 0

        tokens = _Tokens(sys.stdin.read())
        if args.exercise == "list1":
            count = tokens.number()
            values = [tokens.number() for _ in range(count)]
            print("".join(f"{value} " for value in prepend_all(values)))
        elif args.exercise == "map1":
            count = tokens.number()
            entries = [(tokens.word(), tokens.word()) for _ in range(count)]
            for answer in lookup_definitions(entries, tokens.rest()):
                print(answer)
        else:
            count = tokens.number()
            values = [tokens.number() for _ in range(count)]
            limit = tokens.number()
            print("".join(f"{value} " for value in less_than(values, limit)), end="")
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0