"""Stateless field checks shared by every element constructor.

Each routine takes a candidate value and the schema name of the field it is
destined for, and returns the validated, normalized value. Failures raise a
ValidationError subclass whose message names the field.

Routines never mutate their input and never perform I/O.
"""

from __future__ import annotations

import datetime
import re
from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar

from counter_report.errors import CardinalityError, InvalidEnumerationError, ValidationError

E = TypeVar("E", bound=Enum)
T = TypeVar("T")

_INTEGER_RE = re.compile(r"^\s*[+-]?\d+\s*$")
# Complement of the XML 1.0 Char production.
_NON_XML_CHAR_RE = re.compile(r"[^\t\n\r\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


# ─── Scalars ──────────────────────────────────────────────────────────────────


def validate_string(value: Any, field: str, allow_empty: bool = False) -> str:
    """Return value as stripped text.

    Accepts str, int, float and Enum members (their value). Rejects None, bool,
    mappings and sequences, and text holding characters outside the XML 1.0
    Char production. Empty text is rejected unless allow_empty is set.
    """
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ValidationError(
            f"{field} must be text, got {type(value).__name__} {value!r}. "
            f"Fix: pass a string value for {field}.",
            field=field,
            value=value,
        )
    text = str(value).strip()
    bad = _NON_XML_CHAR_RE.search(text)
    if bad:
        raise ValidationError(
            f"{field} contains character U+{ord(bad.group()):04X} at position {bad.start()}, "
            f"which XML 1.0 documents cannot carry. "
            f"Fix: remove control characters from {field}.",
            field=field,
            value=value,
        )
    if not text and not allow_empty:
        raise ValidationError(
            f"{field} must not be empty. Fix: supply a non-blank value for {field}.",
            field=field,
            value=value,
        )
    return text


def validate_positive_integer(value: Any, field: str, allow_zero: bool = True) -> int:
    """Return value as an int after checking its sign.

    Accepts int, integral float and integer-like strings ("5", " +7 ").
    Negative values always fail; zero fails when allow_zero is False.
    """
    number: int | None = None
    if isinstance(value, bool):
        number = None
    elif isinstance(value, int):
        number = value
    elif isinstance(value, float) and value.is_integer():
        number = int(value)
    elif isinstance(value, str) and _INTEGER_RE.match(value):
        number = int(value)

    if number is None:
        raise ValidationError(
            f"{field} must be a whole number, got {type(value).__name__} {value!r}.",
            field=field,
            value=value,
        )
    if number < 0 or (number == 0 and not allow_zero):
        bound = "zero or greater" if allow_zero else "greater than zero"
        raise ValidationError(
            f"{field} must be {bound}, got {number}.",
            field=field,
            value=value,
        )
    return number


def validate_enumeration(value: Any, enum_type: type[E], field: str) -> E:
    """Return the enum_type member matching value (a member or its code string)."""
    if isinstance(value, enum_type):
        return value
    code = validate_string(value, field)
    try:
        return enum_type(code)
    except ValueError:
        raise InvalidEnumerationError(
            f"Invalid {field} '{code}'. "
            f"Valid values: {[m.value for m in enum_type]}. "
            f"Fix: use one of the listed codes.",
            field=field,
            value=value,
        ) from None


def validate_date(value: Any, field: str) -> str:
    """Return value as an ISO YYYY-MM-DD string.

    datetime.date input is formatted; datetime input is truncated to its date
    since the schema type is xs:date.
    """
    if isinstance(value, datetime.datetime):
        value = value.date()
    if isinstance(value, datetime.date):
        return value.isoformat()
    text = validate_string(value, field)
    try:
        return datetime.date.fromisoformat(text).isoformat()
    except ValueError:
        raise ValidationError(
            f"{field} must be an ISO date (YYYY-MM-DD), got {text!r}.",
            field=field,
            value=value,
        ) from None


# ─── Collections ──────────────────────────────────────────────────────────────


def _members(collection: Any, expected_type: type[T], field: str) -> tuple[T, ...]:
    """Normalize collection to a tuple and check every member's type."""
    if collection is None:
        return ()
    if isinstance(collection, expected_type):
        return (collection,)
    if isinstance(collection, (str, bytes, Mapping)) or not isinstance(collection, (list, tuple)):
        raise CardinalityError(
            f"{field} must be a list of {expected_type.__name__}, "
            f"got {type(collection).__name__}.",
            field=field,
            value=collection,
        )
    for i, member in enumerate(collection):
        if not isinstance(member, expected_type):
            raise CardinalityError(
                f"{field}[{i}] must be a {expected_type.__name__}, "
                f"got {type(member).__name__} {member!r}. "
                f"Fix: construct the member with {expected_type.__name__}(...) "
                f"or {expected_type.__name__}.build(...).",
                field=field,
                value=collection,
            )
    return tuple(collection)


def validate_one_or_more_of(collection: Any, expected_type: type[T], field: str) -> tuple[T, ...]:
    """Require at least one expected_type member; a lone instance counts as one."""
    members = _members(collection, expected_type, field)
    if not members:
        raise CardinalityError(
            f"{field} requires at least one {expected_type.__name__}.",
            field=field,
            value=collection,
        )
    return members


def validate_zero_or_one_of(value: Any, expected_type: type[T], field: str) -> T | None:
    """Accept None, one expected_type instance, or a collection of at most one."""
    members = _members(value, expected_type, field)
    if len(members) > 1:
        raise CardinalityError(
            f"{field} allows at most one {expected_type.__name__}, got {len(members)}.",
            field=field,
            value=value,
        )
    return members[0] if members else None


def validate_one_of(value: Any, expected_type: type[T], field: str) -> T:
    """Require exactly one expected_type instance."""
    member = validate_zero_or_one_of(value, expected_type, field)
    if member is None:
        raise CardinalityError(
            f"{field} requires exactly one {expected_type.__name__}.",
            field=field,
            value=value,
        )
    return member


def validate_zero_or_more_of(collection: Any, expected_type: type[T], field: str) -> tuple[T, ...]:
    """Accept None or any number of expected_type members."""
    return _members(collection, expected_type, field)


def validate_strings(collection: Any, field: str) -> tuple[str, ...]:
    """Validate a zero-or-more list of text leaves (e.g. contributor roles)."""
    if collection is None:
        return ()
    if isinstance(collection, str):
        collection = [collection]
    if not isinstance(collection, (list, tuple)):
        raise CardinalityError(
            f"{field} must be a list of strings, got {type(collection).__name__}.",
            field=field,
            value=collection,
        )
    return tuple(validate_string(item, field) for item in collection)
