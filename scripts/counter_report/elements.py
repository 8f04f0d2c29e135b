"""Concrete COUNTER 4.1 report elements.

Each class is a frozen dataclass: positional construction validates every
field once in __post_init__, and the instance is read-only afterwards.
Collections are stored as tuples in the order supplied.

Input shapes accepted by build():
    nicely structured — a mapping keyed by the XML field names, e.g.
        {"MetricType": "ft_pdf", "Count": 5}
    shorthand — code/value elements only (PerformanceCounter, Identifier,
        ItemContributorId, ItemDate, ItemAttribute): one {code: value} entry,
        e.g. {"ft_pdf": 5} or {"DOI": "10.1234/abc"}
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from counter_report.element import ChildField, LeafField, SchemaElement
from counter_report.errors import ValidationError
from counter_report.registry import (
    SHORTHAND,
    STRUCTURED,
    has_keys,
    is_associative,
    register_element,
)
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


# ─── Internal helpers ─────────────────────────────────────────────────────────


def _assign(element: SchemaElement, attr: str, value: Any) -> None:
    # Frozen dataclasses only allow normalization through object.__setattr__.
    object.__setattr__(element, attr, value)


def _optional_string(value: Any, field: str) -> str | None:
    if value is None:
        return None
    return validate_string(value, field, allow_empty=True) or None


def _shorthand(cls, data: Mapping[str, Any], field_names: tuple[str, ...]):
    """Build cls(code, value) from a single-entry {code: value} mapping."""
    if len(data) != 1 or not is_associative(data):
        return None
    ((code, value),) = data.items()
    if code in field_names:
        return None
    return cls(code, value), SHORTHAND


# ─── Code/value elements ──────────────────────────────────────────────────────


@register_element
@dataclass(frozen=True)
class PerformanceCounter(SchemaElement):
    """One usage count for one metric type (<Instance>)."""

    ELEMENT = "Instance"
    SCHEMA_ORDER = (
        LeafField("metric_type", "MetricType"),
        LeafField("count", "Count"),
    )

    metric_type: MetricType
    count: int

    def __post_init__(self) -> None:
        _assign(self, "metric_type", validate_enumeration(self.metric_type, MetricType, "MetricType"))
        _assign(self, "count", validate_positive_integer(self.count, "Count"))

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Any]) -> tuple[PerformanceCounter, str] | None:
        if has_keys(data, ("MetricType", "Count")):
            return cls(data["MetricType"], data["Count"]), STRUCTURED
        return _shorthand(cls, data, ("MetricType", "Count"))


@register_element
@dataclass(frozen=True)
class Identifier(SchemaElement):
    """An item identifier such as a DOI or ISSN (<ItemIdentifier>)."""

    ELEMENT = "ItemIdentifier"
    SCHEMA_ORDER = (
        LeafField("type", "Type"),
        LeafField("value", "Value"),
    )

    type: IdentifierType
    value: str

    def __post_init__(self) -> None:
        _assign(self, "type", validate_enumeration(self.type, IdentifierType, "Type"))
        _assign(self, "value", validate_string(self.value, "Value"))

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Any]) -> tuple[Identifier, str] | None:
        if has_keys(data, ("Type", "Value")):
            return cls(data["Type"], data["Value"]), STRUCTURED
        return _shorthand(cls, data, ("Type", "Value"))


@register_element
@dataclass(frozen=True)
class ItemContributorId(SchemaElement):
    """A contributor identifier such as an ORCID (<ItemContributorID>)."""

    ELEMENT = "ItemContributorID"
    SCHEMA_ORDER = (
        LeafField("type", "Type"),
        LeafField("value", "Value"),
    )

    type: ContributorIdType
    value: str

    def __post_init__(self) -> None:
        _assign(self, "type", validate_enumeration(self.type, ContributorIdType, "Type"))
        _assign(self, "value", validate_string(self.value, "Value"))

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Any]) -> tuple[ItemContributorId, str] | None:
        if has_keys(data, ("Type", "Value")):
            return cls(data["Type"], data["Value"]), STRUCTURED
        return _shorthand(cls, data, ("Type", "Value"))


@register_element
@dataclass(frozen=True)
class ItemDate(SchemaElement):
    """A dated event of an item, e.g. its publication date (<ItemDate>)."""

    ELEMENT = "ItemDate"
    SCHEMA_ORDER = (
        LeafField("type", "Type"),
        LeafField("value", "Value"),
    )

    type: DateType
    value: str

    def __post_init__(self) -> None:
        _assign(self, "type", validate_enumeration(self.type, DateType, "Type"))
        _assign(self, "value", validate_date(self.value, "Value"))

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Any]) -> tuple[ItemDate, str] | None:
        if has_keys(data, ("Type", "Value")):
            return cls(data["Type"], data["Value"]), STRUCTURED
        return _shorthand(cls, data, ("Type", "Value"))


@register_element
@dataclass(frozen=True)
class ItemAttribute(SchemaElement):
    """A typed attribute of an item, e.g. its article version (<ItemAttribute>)."""

    ELEMENT = "ItemAttribute"
    SCHEMA_ORDER = (
        LeafField("type", "Type"),
        LeafField("value", "Value"),
    )

    type: AttributeType
    value: str

    def __post_init__(self) -> None:
        _assign(self, "type", validate_enumeration(self.type, AttributeType, "Type"))
        _assign(self, "value", validate_string(self.value, "Value"))

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Any]) -> tuple[ItemAttribute, str] | None:
        if has_keys(data, ("Type", "Value")):
            return cls(data["Type"], data["Value"]), STRUCTURED
        return _shorthand(cls, data, ("Type", "Value"))


# ─── Composite elements ───────────────────────────────────────────────────────


@register_element
@dataclass(frozen=True)
class ItemContributor(SchemaElement):
    """An author or other contributor of an item (<ItemContributor>).

    At least one of item_contributor_ids or item_contributor_name is required.
    """

    ELEMENT = "ItemContributor"
    SCHEMA_ORDER = (
        ChildField("item_contributor_ids"),
        LeafField("item_contributor_name", "ItemContributorName"),
        LeafField("item_contributor_affiliations", "ItemContributorAffiliation"),
        LeafField("item_contributor_roles", "ItemContributorRole"),
    )

    item_contributor_ids: tuple[ItemContributorId, ...] = ()
    item_contributor_name: str | None = None
    item_contributor_affiliations: tuple[str, ...] = ()
    item_contributor_roles: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _assign(self, "item_contributor_ids", validate_zero_or_more_of(
            self.item_contributor_ids, ItemContributorId, "ItemContributorID"
        ))
        _assign(self, "item_contributor_name", _optional_string(
            self.item_contributor_name, "ItemContributorName"
        ))
        _assign(self, "item_contributor_affiliations", validate_strings(
            self.item_contributor_affiliations, "ItemContributorAffiliation"
        ))
        _assign(self, "item_contributor_roles", validate_strings(
            self.item_contributor_roles, "ItemContributorRole"
        ))
        if not self.item_contributor_ids and self.item_contributor_name is None:
            raise ValidationError(
                "ItemContributor needs an ItemContributorID or an ItemContributorName. "
                "Fix: supply at least one way to identify the contributor.",
                field="ItemContributor",
            )

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Any]) -> tuple[ItemContributor, str] | None:
        if not (has_keys(data, ("ItemContributorID",)) or has_keys(data, ("ItemContributorName",))):
            return None
        return cls(
            ItemContributorId.build_multiple(data.get("ItemContributorID")),
            data.get("ItemContributorName"),
            data.get("ItemContributorAffiliation"),
            data.get("ItemContributorRole"),
        ), STRUCTURED


@register_element
@dataclass(frozen=True)
class DateRange(SchemaElement):
    """The reporting period of a metric (<Period>); begin must not follow end."""

    ELEMENT = "Period"
    SCHEMA_ORDER = (
        LeafField("begin", "Begin"),
        LeafField("end", "End"),
    )

    begin: str
    end: str

    def __post_init__(self) -> None:
        _assign(self, "begin", validate_date(self.begin, "Begin"))
        _assign(self, "end", validate_date(self.end, "End"))
        # ISO dates order lexically.
        if self.begin > self.end:
            raise ValidationError(
                f"Period Begin {self.begin} is after End {self.end}.",
                field="Period",
                value=(self.begin, self.end),
            )

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Any]) -> tuple[DateRange, str] | None:
        if has_keys(data, ("Begin", "End")):
            return cls(data["Begin"], data["End"]), STRUCTURED
        return None


@register_element
@dataclass(frozen=True)
class Metric(SchemaElement):
    """Usage counts of one category over one period (<ItemPerformance>)."""

    ELEMENT = "ItemPerformance"
    SCHEMA_ORDER = (
        ChildField("period"),
        LeafField("category", "Category"),
        ChildField("instances"),
    )

    period: DateRange
    category: Category
    instances: tuple[PerformanceCounter, ...]

    def __post_init__(self) -> None:
        _assign(self, "period", validate_one_of(self.period, DateRange, "Period"))
        _assign(self, "category", validate_enumeration(self.category, Category, "Category"))
        _assign(self, "instances", validate_one_or_more_of(
            self.instances, PerformanceCounter, "Instance"
        ))

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Any]) -> tuple[Metric, str] | None:
        if not has_keys(data, ("Period", "Category", "Instance")):
            return None
        return cls(
            DateRange.build(data["Period"]),
            data["Category"],
            PerformanceCounter.build_multiple(data["Instance"]),
        ), STRUCTURED


@register_element
@dataclass(frozen=True)
class ParentItem(SchemaElement):
    """The containing work of a reported item, e.g. the journal of an article."""

    ELEMENT = "ParentItem"
    SCHEMA_ORDER = (
        ChildField("item_identifiers"),
        ChildField("item_contributors"),
        ChildField("item_dates"),
        ChildField("item_attributes"),
        LeafField("item_publisher", "ItemPublisher"),
        LeafField("item_name", "ItemName"),
        LeafField("item_data_type", "ItemDataType"),
    )

    item_name: str
    item_data_type: ItemDataType
    item_identifiers: tuple[Identifier, ...] = ()
    item_contributors: tuple[ItemContributor, ...] = ()
    item_dates: tuple[ItemDate, ...] = ()
    item_attributes: tuple[ItemAttribute, ...] = ()
    item_publisher: str | None = None

    def __post_init__(self) -> None:
        _assign(self, "item_name", validate_string(self.item_name, "ItemName"))
        _assign(self, "item_data_type", validate_enumeration(
            self.item_data_type, ItemDataType, "ItemDataType"
        ))
        _assign(self, "item_identifiers", validate_zero_or_more_of(
            self.item_identifiers, Identifier, "ItemIdentifier"
        ))
        _assign(self, "item_contributors", validate_zero_or_more_of(
            self.item_contributors, ItemContributor, "ItemContributor"
        ))
        _assign(self, "item_dates", validate_zero_or_more_of(self.item_dates, ItemDate, "ItemDate"))
        _assign(self, "item_attributes", validate_zero_or_more_of(
            self.item_attributes, ItemAttribute, "ItemAttribute"
        ))
        _assign(self, "item_publisher", _optional_string(self.item_publisher, "ItemPublisher"))

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Any]) -> tuple[ParentItem, str] | None:
        if not has_keys(data, ("ItemName", "ItemDataType")):
            return None
        return cls(
            data["ItemName"],
            data["ItemDataType"],
            Identifier.build_multiple(data.get("ItemIdentifier")),
            ItemContributor.build_multiple(data.get("ItemContributor")),
            ItemDate.build_multiple(data.get("ItemDate")),
            ItemAttribute.build_multiple(data.get("ItemAttribute")),
            data.get("ItemPublisher"),
        ), STRUCTURED


@register_element
@dataclass(frozen=True)
class ReportItems(SchemaElement):
    """One reported item with its descriptive data and usage metrics.

    Args (positional order):
        item_platform: Platform the item is hosted on.
        item_name: Title of the item.
        item_data_type: ItemDataType code.
        item_performance: One or more Metric.
        parent_item: Optional ParentItem.
        item_identifiers: Zero or more Identifier.
        item_contributors: Zero or more ItemContributor.
        item_dates: Zero or more ItemDate.
        item_attributes: Zero or more ItemAttribute.
        item_publisher: Optional publisher name.

    The XML content model orders these differently from the constructor;
    SCHEMA_ORDER holds the XML order.
    """

    ELEMENT = "ReportItems"
    SCHEMA_ORDER = (
        ChildField("parent_item"),
        ChildField("item_identifiers"),
        ChildField("item_contributors"),
        ChildField("item_dates"),
        ChildField("item_attributes"),
        LeafField("item_platform", "ItemPlatform"),
        LeafField("item_publisher", "ItemPublisher"),
        LeafField("item_name", "ItemName"),
        LeafField("item_data_type", "ItemDataType"),
        ChildField("item_performance"),
    )

    item_platform: str
    item_name: str
    item_data_type: ItemDataType
    item_performance: tuple[Metric, ...]
    parent_item: ParentItem | None = None
    item_identifiers: tuple[Identifier, ...] = ()
    item_contributors: tuple[ItemContributor, ...] = ()
    item_dates: tuple[ItemDate, ...] = ()
    item_attributes: tuple[ItemAttribute, ...] = ()
    item_publisher: str | None = None

    def __post_init__(self) -> None:
        _assign(self, "item_platform", validate_string(self.item_platform, "ItemPlatform"))
        _assign(self, "item_publisher", _optional_string(self.item_publisher, "ItemPublisher"))
        _assign(self, "item_name", validate_string(self.item_name, "ItemName"))
        _assign(self, "item_data_type", validate_enumeration(
            self.item_data_type, ItemDataType, "ItemDataType"
        ))
        _assign(self, "item_performance", validate_one_or_more_of(
            self.item_performance, Metric, "ItemPerformance"
        ))
        _assign(self, "parent_item", validate_zero_or_one_of(
            self.parent_item, ParentItem, "ParentItem"
        ))
        _assign(self, "item_identifiers", validate_zero_or_more_of(
            self.item_identifiers, Identifier, "ItemIdentifier"
        ))
        _assign(self, "item_contributors", validate_zero_or_more_of(
            self.item_contributors, ItemContributor, "ItemContributor"
        ))
        _assign(self, "item_dates", validate_zero_or_more_of(self.item_dates, ItemDate, "ItemDate"))
        _assign(self, "item_attributes", validate_zero_or_more_of(
            self.item_attributes, ItemAttribute, "ItemAttribute"
        ))

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Any]) -> tuple[ReportItems, str] | None:
        if not has_keys(data, ("ItemPlatform", "ItemName", "ItemDataType", "ItemPerformance")):
            return None
        parent = data.get("ParentItem")
        return cls(
            data["ItemPlatform"],
            data["ItemName"],
            data["ItemDataType"],
            Metric.build_multiple(data["ItemPerformance"]),
            ParentItem.build(parent) if parent is not None else None,
            Identifier.build_multiple(data.get("ItemIdentifier")),
            ItemContributor.build_multiple(data.get("ItemContributor")),
            ItemDate.build_multiple(data.get("ItemDate")),
            ItemAttribute.build_multiple(data.get("ItemAttribute")),
            data.get("ItemPublisher"),
        ), STRUCTURED
