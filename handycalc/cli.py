"""Interactive command-line front ends: basic calculator, scientific calculator, vending machine."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Callable, Iterator, Sequence
from typing import TextIO, TypeVar

from handycalc.calculator import (
    calculate,
    cosine_degrees,
    natural_log,
    power,
    sine_degrees,
    tangent_degrees,
)
from handycalc.geometry import square_root
from handycalc.vending import Item, Payment, item_cost, total_price

T = TypeVar("T")

EXIT_CHOICE = 11

_SCIENTIFIC_MENU = """
Scientific Calculator
1. Addition (+)
2. Subtraction (-)
3. Multiplication (*)
4. Division (/)
5. Sin(x)
6. Cos(x)
7. Tan(x)
8. Log(x)
9. Square root
10. Power
11. Exit"""

_VENDING_MENU = """
Available items:
1. Soda       - ₹30.00
2. Chips      - ₹20.00
3. Chocolate  - ₹25.00
4. Water      - ₹15.00
"""

_BINARY_SYMBOLS = {1: "+", 2: "-", 3: "*", 4: "/"}
_TRIG = {5: ("Sin", sine_degrees), 6: ("Cos", cosine_degrees), 7: ("Tan", tangent_degrees)}


class InputError(Exception):
    """Raised when the user's input cannot be read as requested."""


def _fmt(value: float) -> str:
    return f"{value:.2f}"


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class _Console:
    """Prompts on an output stream and reads whitespace-separated answers."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._tokens = _tokens(stdin)
        self._out = stdout

    def say(self, text: str = "", end: str = "\n") -> None:
        self._out.write(text + end)
        self._out.flush()

    def ask(self, prompt: str, convert: Callable[[str], T]) -> T:
        self.say(prompt, end="")
        try:
            token = next(self._tokens)
        except StopIteration:
            raise InputError("unexpected end of input") from None
        try:
            return convert(token)
        except ValueError:
            raise InputError(f"invalid input: {token!r}") from None

    def ask_int(self, prompt: str) -> int:
        return self.ask(prompt, int)

    def ask_float(self, prompt: str) -> float:
        return self.ask(prompt, float)


def _run_calculator(console: _Console) -> None:
    symbol = console.ask("Enter an operator (+, -, *, /): ", lambda token: token[0])
    a = console.ask_float("Enter first number: ")
    b = console.ask_float("Enter second number: ")
    try:
        result = calculate(symbol, a, b)
    except ZeroDivisionError:
        console.say("Error: Division by zero!")
    except ValueError:
        console.say("Error: Invalid operator!")
    else:
        console.say(f"{_fmt(a)} {symbol} {_fmt(b)} = {_fmt(result)}")


def _safe_power(base: float, exponent: float) -> float:
    try:
        return power(base, exponent)
    except OverflowError:
        return math.inf
    except (ValueError, ZeroDivisionError):
        return math.nan


def _scientific_step(console: _Console, choice: int) -> None:
    if choice in _BINARY_SYMBOLS:
        symbol = _BINARY_SYMBOLS[choice]
        a = console.ask_float("Enter first number: ")
        b = console.ask_float("Enter second number: ")
        try:
            result = calculate(symbol, a, b)
        except ZeroDivisionError:
            console.say("Error: Division by zero!")
        else:
            console.say(f"Result: {_fmt(a)} {symbol} {_fmt(b)} = {_fmt(result)}")
    elif choice in _TRIG:
        name, function = _TRIG[choice]
        angle = console.ask_float("Enter angle in degrees: ")
        console.say(f"{name}({_fmt(angle)}) = {_fmt(function(angle))}")
    elif choice == 8:
        number = console.ask_float("Enter number: ")
        try:
            console.say(f"Log({_fmt(number)}) = {_fmt(natural_log(number))}")
        except ValueError:
            console.say("Error: Invalid input for logarithm!")
    elif choice == 9:
        number = console.ask_float("Enter number: ")
        try:
            console.say(f"Square root of {_fmt(number)} = {_fmt(square_root(number))}")
        except ValueError:
            console.say("Error: Cannot calculate square root of negative number!")
    elif choice == 10:
        base = console.ask_float("Enter base number: ")
        exponent = console.ask_float("Enter exponent: ")
        result = _safe_power(base, exponent)
        console.say(f"{_fmt(base)} raised to power {_fmt(exponent)} = {_fmt(result)}")
    elif choice == EXIT_CHOICE:
        console.say("Thank you for using the Scientific Calculator!")
    else:
        console.say("Invalid choice! Please enter a number between 1 and 11.")


def _run_scientific(console: _Console) -> None:
    choice = None
    while choice != EXIT_CHOICE:
        console.say(_SCIENTIFIC_MENU)
        choice = console.ask_int("\nEnter your choice (1-11): ")
        _scientific_step(console, choice)


def _run_vending(console: _Console) -> None:
    console.say("------ Welcome to Smart Vending Machine ------")
    console.say(_VENDING_MENU, end="")
    choice = console.ask_int("\nEnter your choice (1-4): ")
    try:
        label = Item(choice).label
    except ValueError:
        label = "Invalid item"
    console.say(f"\nYou selected {label}")

    quantity = console.ask_int("Enter quantity: ")
    cost = total_price(item_cost(choice), quantity)

    payment = Payment(cost)
    payment.insert(console.ask_float("Enter money: ₹"))
    while not payment.complete:
        payment.insert(
            console.ask_float(f"Insufficient funds. Please add ₹{_fmt(payment.due)} more: ")
        )

    console.say("\nThank you for your purchase!")
    console.say(f"Total cost: ₹{_fmt(cost)}")
    console.say(f"Change returned: ₹{_fmt(payment.change)}")
    console.say("---------- Have a great day! ----------")


_PROGRAMS = {
    "calculator": _run_calculator,
    "scientific": _run_scientific,
    "vending": _run_vending,
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="handycalc", description="Interactive calculators and a vending machine."
    )
    parser.add_argument("program", choices=sorted(_PROGRAMS), help="which program to run")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen interactive program on standard input and output."""
    args = _parser().parse_args(argv)
    console = _Console(sys.stdin, sys.stdout)
    try:
        _PROGRAMS[args.program](console)
    except InputError as error:
        sys.stdout.write("\n")
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())