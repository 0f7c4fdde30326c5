"""
parsing.py — Text to Number

Order of attempts on the trimmed text:

    1. special tokens (case-insensitive)    nan, inf, -inf, infinity, ∞ ...
    2. integer   [+-]?digits                -> selector on the exact int
    3. float     decimal or scientific      -> selector on the float

The whole string must match; there are no partial parses.
"""

from __future__ import annotations
from enum import Enum
import logging
import re

from .core import Number


logger = logging.getLogger(__name__)


class ParseErrorKind(Enum):
    EMPTY = "empty"
    INVALID_FORMAT = "invalid_format"


class ParseError(ValueError):
    """
    Text could not be read as a Number.

    Attributes:
        kind: why parsing failed
        text: the offending input, untrimmed
    """

    def __init__(self, kind: ParseErrorKind, text: str):
        self.kind = kind
        self.text = text
        super().__init__(f"Cannot parse {text!r} as a number ({kind.value})")


_SPECIAL_TOKENS = {
    "nan": Number.nan,
    "inf": Number.infinity,
    "+inf": Number.infinity,
    "infinity": Number.infinity,
    "+infinity": Number.infinity,
    "∞": Number.infinity,
    "+∞": Number.infinity,
    "-inf": Number.negative_infinity,
    "-infinity": Number.negative_infinity,
    "-∞": Number.negative_infinity,
}

# ASCII digits only
_INTEGER = re.compile(r"[+-]?[0-9]+")
_FLOAT = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse(text: str) -> Number:
    """
    Parse text into the minimal Number.

    Raises:
        TypeError: if text is not a str
        ParseError: kind EMPTY for blank text, INVALID_FORMAT otherwise
    """
    if not isinstance(text, str):
        raise TypeError(f"parse() expects str, got {type(text).__name__}")

    token = text.strip()
    if not token:
        logger.debug("Rejecting blank input %r", text)
        raise ParseError(ParseErrorKind.EMPTY, text)

    special = _SPECIAL_TOKENS.get(token.lower())
    if special is not None:
        return special()

    if _INTEGER.fullmatch(token):
        try:
            return Number.of(int(token))
        except ValueError:
            # past sys.get_int_max_str_digits(); the float path approximates it
            logger.debug("Integer literal of %d digits read as float", len(token))

    if _FLOAT.fullmatch(token):
        return Number.of(float(token))

    logger.debug("Rejecting malformed input %r", text)
    raise ParseError(ParseErrorKind.INVALID_FORMAT, text)
