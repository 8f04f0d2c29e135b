"""Element-name → parser dispatch for building elements from raw data.

Every concrete element registers a parser under its XML element name. A parser
receives the raw mapping and returns the constructed element with the name of the
input shape it matched (STRUCTURED or SHORTHAND), or None when the mapping
matches none of the shapes it understands. Anything that does not reach
a parser, or that a parser declines, lands in the default handler, which always
raises MalformedInputError: guessing a shape risks producing an invalid report.

Public API:
    ElementRegistry         — the dispatch table
    REGISTRY                — process-wide instance populated at import time
    register_element(cls)   — class decorator registering cls._from_mapping
    build_element(name, data)
    build_multiple(name, data)
    is_associative(data)
    has_keys(data, keys)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Callable, NoReturn

from counter_report.errors import MalformedInputError

if TYPE_CHECKING:
    from counter_report.element import SchemaElement

logger = logging.getLogger(__name__)

STRUCTURED = "structured"
SHORTHAND = "shorthand"

Parser = Callable[[Mapping[str, Any]], "tuple[SchemaElement, str] | None"]


# ─── Input shape helpers ──────────────────────────────────────────────────────


def is_associative(data: Mapping[Any, Any]) -> bool:
    """True unless the mapping's keys are exactly the indices 0..n-1."""
    return list(data.keys()) != list(range(len(data)))


def has_keys(data: Mapping[str, Any], keys: Iterable[str]) -> bool:
    """True when every key is present with a non-None value."""
    return all(data.get(key) is not None for key in keys)


# ─── Registry ─────────────────────────────────────────────────────────────────


class ElementRegistry:
    """Maps XML element names to the parsers that build them."""

    def __init__(self) -> None:
        self._parsers: dict[str, Parser] = {}

    def register(self, name: str, parser: Parser) -> None:
        if name in self._parsers:
            raise ValueError(f"Element <{name}> is already registered")
        self._parsers[name] = parser

    def names(self) -> tuple[str, ...]:
        """Registered element names in registration order."""
        return tuple(self._parsers)

    def __contains__(self, name: object) -> bool:
        return name in self._parsers

    def build(self, name: str | None, data: Any) -> SchemaElement:
        """Build the element registered under name from raw data."""
        parser = self._parsers.get(name) if name else None
        if parser is None or not isinstance(data, Mapping):
            self.fallback(name, data)
        parsed = parser(data)
        if parsed is None:
            self.fallback(name, data)
        element, shape = parsed
        logger.debug("Built <%s> from %s mapping (%d keys)", name, shape, len(data))
        return element

    def build_multiple(self, name: str | None, data: Any) -> tuple[SchemaElement, ...]:
        """Build every entry of a list; None yields an empty tuple.

        A single mapping is treated as a one-entry list.
        """
        if data is None:
            return ()
        if isinstance(data, Mapping):
            return (self.build(name, data),)
        if isinstance(data, (list, tuple)):
            return tuple(self.build(name, item) for item in data)
        self.fallback(name, data)

    @staticmethod
    def fallback(name: str | None, data: Any) -> NoReturn:
        """Default handler: every unrecognized input is a hard error."""
        logger.debug("No input shape of <%s> matches %r", name, data)
        raise MalformedInputError(name, data)


REGISTRY = ElementRegistry()


def register_element(cls):
    """Class decorator: register cls._from_mapping under cls.ELEMENT."""
    REGISTRY.register(cls.ELEMENT, cls._from_mapping)
    return cls


def build_element(name: str, data: Any) -> SchemaElement:
    """Build the element named name (e.g. "ReportItems") from raw data."""
    return REGISTRY.build(name, data)


def build_multiple(name: str, data: Any) -> tuple[SchemaElement, ...]:
    """Build a tuple of name elements from a list of raw mappings."""
    return REGISTRY.build_multiple(name, data)
