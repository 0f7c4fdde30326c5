#!/usr/bin/env python3
"""
demo.py — smartnum in action

================================================================================
THE PROBLEM
================================================================================

    >>> import numpy as np
    >>> np.int8(100) + np.int8(100)
    -56

Fixed-width arithmetic wraps silently, and float division by zero raises
in plain Python. A Number instead grows into a wider representation and
turns domain errors into NaN or a signed infinity.

================================================================================
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from smartnum import Number, DisplayStyle, ParseError, parse


def show(label: str, n: Number) -> None:
    print(f"  {label:<28} {str(n):>24}  {n.type_name()}")


def demonstrate_selection():
    print("=" * 60)
    print("SELECTION")
    print("=" * 60)
    for text in ("100", "32767", "32768", "3000000000", "9223372036854775808",
                 "0.5", "0.1", "nan", "-inf"):
        show(f"parse({text!r})", parse(text))
    print()


def demonstrate_promotion():
    print("=" * 60)
    print("PROMOTION")
    print("=" * 60)
    a = Number.of(100)
    show("100 + 100", a + a)
    show("2**62 + 2**62", Number.of(2 ** 62) + Number.of(2 ** 62))
    show("(2**63 - 1) ** 2", Number.of(2 ** 63 - 1) * Number.of(2 ** 63 - 1))
    show("7 / 2", Number.of(7) / Number.of(2))
    show("8 / 2", Number.of(8) / Number.of(2))
    show("-7 % 2", Number.of(-7) % Number.of(2))
    show("0.1 + 0.2", Number.of(0.1) + Number.of(0.2))
    print()


def demonstrate_specials():
    print("=" * 60)
    print("SPECIAL VALUES")
    print("=" * 60)
    show("5 / 0", Number.of(5) / Number.of(0))
    show("-5 / 0", Number.of(-5) / Number.of(0))
    show("0 / 0", Number.of(0) / Number.of(0))
    show("inf + -inf", parse("inf") + parse("-inf"))
    show("inf * -2", Number.infinity() * Number.of(-2))
    show("1e308 * 10", Number.of(1e308) * Number.of(10))
    print(f"  symbolic style:              {Number.infinity().format(DisplayStyle.SYMBOLIC)}")
    print(f"  NaN == NaN:                  {Number.nan() == Number.nan()}")
    print()


def demonstrate_parse_errors():
    print("=" * 60)
    print("PARSE ERRORS")
    print("=" * 60)
    for text in ("12abc", "   "):
        try:
            parse(text)
        except ParseError as e:
            print(f"  {text!r:<10} -> {e.kind.name}: {e}")
    print()


def main():
    demonstrate_selection()
    demonstrate_promotion()
    demonstrate_specials()
    demonstrate_parse_errors()


if __name__ == "__main__":
    main()
