"""SchemaElement base class and the recursive XML composition protocol.

Every concrete element is a frozen dataclass deriving from SchemaElement. It
declares:

    ELEMENT       — XML element name of its document root
    SCHEMA_ORDER  — ordered field roles; the only source of emission order
    _from_mapping — parser registered with counter_report.registry

Composition is document-to-document: as_document() builds a standalone tree
for this element, and each child contributes the root of its own freshly built
document, which is grafted under this root. No node is ever shared between two
documents.
"""

from __future__ import annotations

import io
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from counter_report.registry import REGISTRY


# ─── Field roles ──────────────────────────────────────────────────────────────


def _values(value: Any) -> tuple[Any, ...]:
    if value is None:
        return ()
    if isinstance(value, tuple):
        return value
    return (value,)


def _text(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


@dataclass(frozen=True)
class LeafField:
    """A scalar field rendered as <tag>text</tag>; one leaf per tuple member.

    None and empty strings are omitted, so optional absent fields produce no
    element at all.
    """

    attr: str
    tag: str

    def emit(self, element: SchemaElement, root: ET.Element) -> None:
        for value in _values(getattr(element, self.attr)):
            if value == "":
                continue
            ET.SubElement(root, self.tag).text = _text(value)


@dataclass(frozen=True)
class ChildField:
    """A field holding child SchemaElement(s), grafted in stored order."""

    attr: str

    def emit(self, element: SchemaElement, root: ET.Element) -> None:
        for child in _values(getattr(element, self.attr)):
            root.append(child.as_document().getroot())


FieldRole = LeafField | ChildField


# ─── Base element ─────────────────────────────────────────────────────────────


class SchemaElement:
    """Abstract base of every COUNTER report element."""

    ELEMENT: ClassVar[str | None] = None
    SCHEMA_ORDER: ClassVar[tuple[FieldRole, ...]] = ()

    @classmethod
    def build(cls, data: Any) -> SchemaElement:
        """Construct an element from raw data (a mapping of field names).

        Raises:
            MalformedInputError: data matches none of this element's input shapes,
                or build() was called on the abstract base.
            ValidationError: the data has the right shape but a field value is
                invalid; build() runs the same constructor checks as direct
                construction.
        """
        return REGISTRY.build(cls.ELEMENT, data)

    @classmethod
    def build_multiple(cls, data: Any) -> tuple[SchemaElement, ...]:
        """Build a tuple of this element from a list of raw mappings (None → ())."""
        return REGISTRY.build_multiple(cls.ELEMENT, data)

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Any]) -> tuple[SchemaElement, str] | None:
        """Parse data into (instance, input shape), or return None if no shape matches."""
        return None

    def as_document(self) -> ET.ElementTree:
        """Render this element and its subtree as a new standalone document."""
        root = ET.Element(self.ELEMENT)
        for role in self.SCHEMA_ORDER:
            role.emit(self, root)
        return ET.ElementTree(root)

    def to_xml(self) -> str:
        """Serialize as_document() to a UTF-8 XML 1.0 string."""
        buf = io.BytesIO()
        self.as_document().write(buf, encoding="UTF-8", xml_declaration=True)
        return buf.getvalue().decode("UTF-8")
