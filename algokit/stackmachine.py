"""A four-register stack machine driven by PUSH and POP commands."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Mapping, Sequence

from algokit.stack import Stack

PUSH = "PUSH"
POP = "POP"
EXIT = "EXIT"
REGISTERS = "ABCD"

_DIGITS = frozenset("0123456789")


def is_number(text: str) -> bool:
    """Return whether ``text`` holds only decimal digits (an empty text counts)."""
    return all(ch in _DIGITS for ch in text)


def run(tokens: Iterable[str]) -> dict[str, int]:
    """Execute a command stream and return the final register values.

    Commands come in pairs of a command word and an operand. ``PUSH``
    pushes a number or the value of the register named by the operand's
    first character; any other command pops the top of the stack into the
    register named by the operand. ``EXIT``, or the end of the tokens, stops
    the machine. Registers start at zero.
    """
    stack = Stack()
    registers = dict.fromkeys(REGISTERS, 0)
    stream = iter(tokens)
    for command in stream:
        if command == EXIT:
            break
        operand = next(stream, None)
        if operand is None:
            raise ValueError(f"command {command} has no operand")
        name = operand[:1]
        if command == PUSH:
            if is_number(operand):
                stack.push(int(operand))
            elif name in registers:
                stack.push(registers[name])
        else:
            value = stack.pop()
            if name in registers:
                registers[name] = value
    return registers


def format_registers(registers: Mapping[str, int]) -> str:
    """Render the registers one per line as ``NAME = value``."""
    return "".join(f"{name} = {registers.get(name, 0)}\n" for name in REGISTERS)


def main(argv: Sequence[str] | None = None) -> int:
    """Read commands from standard input and print the registers."""
    parser = argparse.ArgumentParser(
        prog="stackmachine",
        description="Run PUSH/POP commands from standard input over registers A-D.",
    )
    parser.parse_args(argv)
    try:
        registers = run(sys.stdin.read().split())
    except IndexError:
        print("POP from an empty stack", file=sys.stderr)
        return 1
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(format_registers(registers), end="")
    return 0