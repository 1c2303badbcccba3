"""
Built-in validators for vouch.

Scalar validators take a value and return Ok/Err. Bound combinators are
factories that close over their limits and return a validator.

Several names shadow builtins (int, float, min, max, range, object) so
that callers can write `v.int` or `v.range(1, 3)`; inside this module the
builtins are reached through the `builtins` module.
"""

from __future__ import annotations

import builtins
import re
from collections.abc import Mapping
from datetime import date as _date
from datetime import datetime
from typing import Any

from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

from .context import allows_sequence_objects
from .core import compose
from .types import Err, Ok, Result, ValidationFailure, Validator

# Leading number, the way a lenient numeric parser reads "12px" as 12
_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)

# Calendar date, then whatever character separates it from the time
_ISO_CALENDAR_DATE = re.compile(
    r"(?:[0-9]{4}-[0-9]{2}-[0-9]{2}|[0-9]{8})(?P<sep>.?)"
)

# Reduced-precision and ordinal dates, which fromisoformat does not read
_ISO_PARTIAL_DATES = (
    (re.compile(r"[0-9]{4}"), "%Y"),
    (re.compile(r"[0-9]{4}-[0-9]{2}"), "%Y-%m"),
    (re.compile(r"[0-9]{4}-[0-9]{3}"), "%Y-%j"),
)


def _fail(message: str, value: Any) -> Err[ValidationFailure]:
    return Err(ValidationFailure(message, value=value))


# Dates and times


def _parse_iso(value: str) -> datetime:
    """
    Parse an ISO-8601 date or timestamp.

    Besides what datetime.fromisoformat reads, accepts "2020", "2020-05"
    and ordinal "2020-001". The time must be joined to the date with "T".

    Raises:
        ValueError: If the string is not ISO-8601
    """
    for pattern, fmt in _ISO_PARTIAL_DATES:
        if pattern.fullmatch(value):
            parsed = datetime.strptime(value, fmt)
            # strptime rolls day 366 of a common year into the next year
            if parsed.year != builtins.int(value[:4]):
                raise ValueError(f"day of year out of range: {value!r}")
            return parsed

    match = _ISO_CALENDAR_DATE.match(value)
    if match and match.group("sep") not in ("", "T"):
        raise ValueError(f"Invalid isoformat string: {value!r}")
    return datetime.fromisoformat(value)


def date(value: str | _date) -> Result:
    """
    Normalize a date to a `YYYY-MM-DD` string.

    Accepts date/datetime instances and ISO-8601 strings, including
    reduced-precision ("2020-05" gives "2020-05-01") and ordinal
    ("2020-032" gives "2020-02-01") dates. A timestamp string keeps the
    calendar date of its own offset, so "2020-01-01T23:30:00-05:00"
    gives "2020-01-01".
    """
    if isinstance(value, datetime):
        return Ok(value.date().isoformat())
    if isinstance(value, _date):
        return Ok(value.isoformat())
    if not isinstance(value, str):
        return _fail("is not a valid date", value)

    try:
        parsed = _parse_iso(value)
    except ValueError as e:
        return _fail(f"is not a valid date: {e}", value)
    return Ok(parsed.date().isoformat())


def timestamp(value: str | _date) -> Result:
    """
    Parse an ISO-8601 string into a datetime, keeping its UTC offset.

    date/datetime instances are passed through unchanged.
    """
    if isinstance(value, _date):
        return Ok(value)
    if not isinstance(value, str):
        return _fail("is not a valid timestamp", value)

    try:
        parsed = _parse_iso(value)
    except ValueError as e:
        return _fail(f"is not a valid timestamp: {e}", value)
    return Ok(parsed)


# Numbers


def int(value: Any) -> Result:
    """Read a base-10 integer from the start of the value's text."""
    if isinstance(value, builtins.int) and not isinstance(value, bool):
        return Ok(value)

    match = _INT_PREFIX.match(builtins.str(value))
    if match is None:
        return _fail("is not a valid integer", value)
    try:
        return Ok(builtins.int(match.group(1)))
    except ValueError:
        # digit strings past the interpreter's conversion limit
        return _fail("is not a valid integer", value)


def float(value: Any) -> Result:
    """Read a decimal number from the start of the value's text."""
    try:
        if isinstance(value, (builtins.int, builtins.float)) and not isinstance(
            value, bool
        ):
            return Ok(builtins.float(value))

        match = _FLOAT_PREFIX.match(builtins.str(value))
        if match is None:
            return _fail("is not a valid decimal", value)
        return Ok(builtins.float(match.group(1)))
    except (ValueError, OverflowError):
        return _fail("is not a valid decimal", value)


# inclusive
def min(bound: Any, message: str = "is too small") -> Validator:
    """
    Validate value >= bound.

    Usage:
        min(0)
        min(18, "must be an adult")
    """

    def check_min(value: Any) -> Result:
        try:
            too_small = bound > value
        except TypeError:
            too_small = True
        if too_small:
            return _fail(message, value)
        return Ok(value)

    return check_min


# inclusive
def max(bound: Any, message: str = "is too large") -> Validator:
    """Validate value <= bound."""

    def check_max(value: Any) -> Result:
        try:
            too_large = value > bound
        except TypeError:
            too_large = True
        if too_large:
            return _fail(message, value)
        return Ok(value)

    return check_max


# inclusive
def range(low: Any, high: Any, message: str | None = None) -> Validator:
    """
    Validate low <= value <= high. The lower bound is checked first.

    Usage:
        range(1, 10)
        compose(range(0, 120), int)
    """
    if low > high:
        raise ValueError(f"Lower bound {low} is greater than upper bound {high}")
    if message is None:
        message = f"is not between {low} and {high}"
    return compose(max(high, message), min(low, message))


# Strings and sequences


def string(value: Any) -> Result:
    if not isinstance(value, str):
        return _fail("is not a string", value)
    return Ok(value)


def _length(value: Any) -> builtins.int | None:
    try:
        return len(value)
    except TypeError:
        return None


# inclusive
def min_length(length: builtins.int, message: str = "is too short") -> Validator:
    """Validate len(value) >= length. Values without a length fail."""

    def check_min_length(value: Any) -> Result:
        n = _length(value)
        if n is None or n < length:
            return _fail(message, value)
        return Ok(value)

    return check_min_length


# inclusive
def max_length(length: builtins.int, message: str = "is too long") -> Validator:
    """Validate len(value) <= length. Values without a length fail."""

    def check_max_length(value: Any) -> Result:
        n = _length(value)
        if n is None or n > length:
            return _fail(message, value)
        return Ok(value)

    return check_max_length


# inclusive
def length_range(
    low: builtins.int, high: builtins.int, message: str | None = None
) -> Validator:
    """
    Validate low <= len(value) <= high.

    Without a message, each side keeps its own default ("is too short",
    "is too long").
    """
    if low < 0 or low > high:
        raise ValueError(f"Invalid length range: {low}..{high}")
    if message is None:
        return compose(max_length(high), min_length(low))
    return compose(max_length(high, message), min_length(low, message))


def not_blank(value: str) -> Result:
    if not isinstance(value, str):
        return _fail("is not a string", value)
    if value.strip() == "":
        return _fail("is blank", value)
    return Ok(value)


def trim(value: str) -> Result:
    """Strip surrounding whitespace. Non-strings pass through untouched."""
    if isinstance(value, str):
        return Ok(value.strip())
    return Ok(value)


def email(value: str) -> Result:
    """
    Validate email address syntax.

    Plain addresses only: display-name forms such as
    "Ada <ada@example.com>" and surrounding whitespace are rejected.
    """
    if not isinstance(value, str) or value != value.strip() or "<" in value:
        return _fail("is not a valid email", value)

    try:
        validate_email(value)
    except PydanticCustomError:
        return _fail("is not a valid email", value)
    return Ok(value)


# Structure


def object(value: Any) -> Result:
    """
    Validate that value is a mapping.

    Lists and tuples are rejected unless enabled with
    validation_context(allow_sequence_objects=True).
    """
    if isinstance(value, Mapping):
        return Ok(value)
    if allows_sequence_objects() and isinstance(value, (list, tuple)):
        return Ok(value)
    return _fail("is not an object", value)


def required(value: Any) -> Result:
    if value is None:
        return _fail("is required", value)
    return Ok(value)
