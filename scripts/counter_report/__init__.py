"""COUNTER 4.1 report elements — public API.

This package models the COUNTER release 4.1 usage-statistics report schema as
immutable, validated Python objects that render themselves as XML documents.
Elements are built either positionally or from loosely structured mappings.

Public API (re-exported from submodules):

Enums (types.py):
    MetricType         — 25 metric codes: ft_pdf, ft_html, toc, turnaway, ...
    ItemDataType       — Book, Collection, Database, Journal, Multimedia, Platform
    IdentifierType     — Online_ISSN, Print_ISSN, Online_ISBN, Print_ISBN, DOI, Proprietary
    ContributorIdType  — ISNI, ORCID, Proprietary
    DateType           — FirstAccessedOnline, PubDate
    AttributeType      — ArticleVersion, ArticleType, QualificationName, QualificationLevel, Proprietary
    Category           — Requests, Searches, Access_denied

Framework (element.py, registry.py):
    SchemaElement      — abstract base: build(), build_multiple(), as_document(), to_xml()
    LeafField          — SCHEMA_ORDER role for a scalar text leaf
    ChildField         — SCHEMA_ORDER role for grafted child elements
    ElementRegistry    — element name → parser dispatch with a failing default
    REGISTRY           — process-wide registry populated at import time
    build_element(name, data)  — build any registered element by XML name
    build_multiple(name, data) — build a tuple of elements from a list

Elements (elements.py), frozen dataclasses:
    PerformanceCounter — <Instance>: MetricType + Count
    Identifier         — <ItemIdentifier>: Type + Value
    ItemContributorId  — <ItemContributorID>: Type + Value
    ItemContributor    — <ItemContributor>
    ItemDate           — <ItemDate>: Type + ISO date Value
    ItemAttribute      — <ItemAttribute>: Type + Value
    DateRange          — <Period>: Begin + End
    Metric             — <ItemPerformance>: Period + Category + Instance+
    ParentItem         — <ParentItem>
    ReportItems        — <ReportItems>

Errors (errors.py):
    CounterError, ValidationError, InvalidEnumerationError, CardinalityError,
    MalformedInputError

Validators (validators.py):
    validate_string, validate_positive_integer, validate_enumeration,
    validate_date, validate_one_of, validate_one_or_more_of,
    validate_zero_or_one_of, validate_zero_or_more_of, validate_strings

Example::

    from counter_report import PerformanceCounter

    counter = PerformanceCounter.build({"ft_pdf": 5})
    assert counter == PerformanceCounter("ft_pdf", 5)
    print(counter.to_xml())
"""

from counter_report.element import ChildField, LeafField, SchemaElement
from counter_report.elements import (
    DateRange,
    Identifier,
    ItemAttribute,
    ItemContributor,
    ItemContributorId,
    ItemDate,
    Metric,
    ParentItem,
    PerformanceCounter,
    ReportItems,
)
from counter_report.errors import (
    CardinalityError,
    CounterError,
    InvalidEnumerationError,
    MalformedInputError,
    ValidationError,
)
from counter_report.registry import REGISTRY, ElementRegistry, build_element, build_multiple
from counter_report.types import (
    AttributeType,
    Category,
    ContributorIdType,
    DateType,
    IdentifierType,
    ItemDataType,
    MetricType,
)
from counter_report.validators import (
    validate_date,
    validate_enumeration,
    validate_one_of,
    validate_one_or_more_of,
    validate_positive_integer,
    validate_string,
    validate_strings,
    validate_zero_or_more_of,
    validate_zero_or_one_of,
)

__all__ = [
    # Enums
    "AttributeType",
    "Category",
    "ContributorIdType",
    "DateType",
    "IdentifierType",
    "ItemDataType",
    "MetricType",
    # Framework
    "ChildField",
    "ElementRegistry",
    "LeafField",
    "REGISTRY",
    "SchemaElement",
    "build_element",
    "build_multiple",
    # Elements
    "DateRange",
    "Identifier",
    "ItemAttribute",
    "ItemContributor",
    "ItemContributorId",
    "ItemDate",
    "Metric",
    "ParentItem",
    "PerformanceCounter",
    "ReportItems",
    # Errors
    "CardinalityError",
    "CounterError",
    "InvalidEnumerationError",
    "MalformedInputError",
    "ValidationError",
    # Validators
    "validate_date",
    "validate_enumeration",
    "validate_one_of",
    "validate_one_or_more_of",
    "validate_positive_integer",
    "validate_string",
    "validate_strings",
    "validate_zero_or_more_of",
    "validate_zero_or_one_of",
]
