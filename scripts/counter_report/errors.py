"""Exception hierarchy for COUNTER report elements.

All errors are raised synchronously from a constructor or from ``build``.
There is no partial construction: an element either satisfies every invariant
or it does not exist.

    CounterError
    ├── ValidationError            — scalar type/shape/sign check failed
    │   ├── InvalidEnumerationError — code outside the allowed set
    │   └── CardinalityError        — collection occurrence or member type
    └── MalformedInputError         — build() input matches no known shape
"""

from __future__ import annotations

from typing import Any


class CounterError(Exception):
    """Base class for every error raised by counter_report."""


class ValidationError(CounterError, ValueError):
    """Raised when a field value fails its type, shape or sign check.

    Attributes:
        field: Schema name of the offending field (e.g. "Count").
        value: The rejected value.
    """

    def __init__(self, message: str, field: str | None = None, value: Any = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class InvalidEnumerationError(ValidationError):
    """Raised when a string field is not one of its element's allowed codes."""


class CardinalityError(ValidationError):
    """Raised when a collection field has too few/many members or a foreign member."""


class MalformedInputError(CounterError, ValueError):
    """Raised when build() receives data matching none of the element's input shapes.

    Attributes:
        element: XML element name the data was meant for (None on the abstract base).
        data: The raw input that could not be interpreted.
    """

    def __init__(self, element: str | None, data: Any) -> None:
        if element:
            hint = f"supply a mapping that contains every required <{element}> field"
        else:
            hint = "call build() on a concrete element type"
        target = f"<{element}>" if element else "an abstract schema element"
        super().__init__(
            f"Cannot build {target} from {type(data).__name__} {data!r}. "
            f"The input matches none of the recognized shapes for this element. "
            f"Fix: {hint}."
        )
        self.element = element
        self.data = data
