"""Tests for counter_report.elements — construction, validation and build().

BDD Acceptance Criteria:
    AC1: Given valid positional arguments, when an element is constructed,
         then every field reads back normalized (enum members, ints, tuples).
    AC2: Given a constructed element, when a field is assigned, then
         FrozenInstanceError is raised.
    AC3: Given a code outside an element's enumeration, when constructing,
         then InvalidEnumerationError is raised and no instance exists.
    AC4: Given the nicely structured or shorthand mapping of an element, when
         build() is called, then the result equals direct construction.
    AC5: Given a mapping that matches no input shape, when build() is called,
         then MalformedInputError is raised.

Coverage:
    - PerformanceCounter: codes, counts, shorthand, rejected shapes
    - Code/value elements: Identifier, ItemContributorId, ItemDate, ItemAttribute
    - ItemContributor: identity requirement, nested ID build
    - DateRange: date normalization, reversed period
    - Metric / ParentItem / ReportItems: cardinality and nested build
"""

from __future__ import annotations

import dataclasses
import datetime

import pytest

from counter_report import (
    CardinalityError,
    Category,
    DateRange,
    DateType,
    Identifier,
    IdentifierType,
    InvalidEnumerationError,
    ItemAttribute,
    ItemContributor,
    ItemContributorId,
    ItemDataType,
    ItemDate,
    MalformedInputError,
    Metric,
    MetricType,
    ParentItem,
    PerformanceCounter,
    ReportItems,
    ValidationError,
)
from conftest import _make_metric, _make_report_items


# ─── PerformanceCounter ───────────────────────────────────────────────────────


class TestPerformanceCounter:
    def test_fields_read_back(self) -> None:
        counter = PerformanceCounter("ft_pdf", 5)
        assert counter.metric_type is MetricType.FT_PDF
        assert counter.count == 5

    def test_member_and_code_construct_equal_elements(self) -> None:
        assert PerformanceCounter(MetricType.FT_PDF, 5) == PerformanceCounter("ft_pdf", 5)

    def test_count_string_normalized(self) -> None:
        assert PerformanceCounter("toc", "12").count == 12

    def test_zero_count_allowed(self) -> None:
        assert PerformanceCounter("turnaway", 0).count == 0

    def test_frozen(self) -> None:
        counter = PerformanceCounter("ft_pdf", 5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            counter.count = 6  # type: ignore[misc]

    def test_unknown_metric_rejected(self) -> None:
        with pytest.raises(InvalidEnumerationError, match="ft_docx"):
            PerformanceCounter("ft_docx", 5)

    @pytest.mark.parametrize("count", [-1, 2.5, "five", None])
    def test_bad_count_rejected(self, count) -> None:
        with pytest.raises(ValidationError) as exc_info:
            PerformanceCounter("ft_pdf", count)
        assert exc_info.value.field == "Count"

    def test_build_nicely_structured(self) -> None:
        built = PerformanceCounter.build({"MetricType": "ft_pdf", "Count": 5})
        assert built == PerformanceCounter("ft_pdf", 5)

    def test_build_shorthand(self) -> None:
        assert PerformanceCounter.build({"ft_pdf": 5}) == PerformanceCounter("ft_pdf", 5)

    def test_build_ignores_extra_keys_in_structured_form(self) -> None:
        built = PerformanceCounter.build({"MetricType": "toc", "Count": 1, "Note": "x"})
        assert built == PerformanceCounter("toc", 1)

    @pytest.mark.parametrize(
        "data",
        [
            {"MetricType": "ft_pdf"},
            {"Count": 5},
            {"ft_pdf": 5, "ft_html": 3},
            {0: 5},
            {},
            ["ft_pdf", 5],
            "ft_pdf",
            None,
        ],
    )
    def test_build_rejects_unrecognized_shapes(self, data) -> None:
        with pytest.raises(MalformedInputError) as exc_info:
            PerformanceCounter.build(data)
        assert exc_info.value.element == "Instance"
        assert exc_info.value.data == data

    def test_build_multiple(self) -> None:
        built = PerformanceCounter.build_multiple([{"ft_pdf": 1}, {"MetricType": "toc", "Count": 2}])
        assert built == (PerformanceCounter("ft_pdf", 1), PerformanceCounter("toc", 2))

    def test_build_multiple_none_is_empty(self) -> None:
        assert PerformanceCounter.build_multiple(None) == ()


# ─── Code/value elements ──────────────────────────────────────────────────────


class TestCodeValueElements:
    def test_identifier(self) -> None:
        ident = Identifier("DOI", "10.1000/182")
        assert ident.type is IdentifierType.DOI
        assert ident.value == "10.1000/182"

    def test_identifier_shorthand(self) -> None:
        assert Identifier.build({"Online_ISSN": "1234-5678"}) == Identifier("Online_ISSN", "1234-5678")

    def test_identifier_blank_value_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Value must not be empty"):
            Identifier("DOI", " ")

    def test_identifier_rejects_contributor_code(self) -> None:
        with pytest.raises(InvalidEnumerationError):
            Identifier("ORCID", "0000-0002-1825-0097")

    def test_contributor_id(self) -> None:
        assert ItemContributorId.build({"ORCID": "0000-0002-1825-0097"}).value == "0000-0002-1825-0097"

    def test_item_date_accepts_date_objects(self) -> None:
        item_date = ItemDate("PubDate", datetime.date(2015, 3, 1))
        assert item_date.type is DateType.PUBLICATION
        assert item_date.value == "2015-03-01"

    def test_item_date_rejects_free_text(self) -> None:
        with pytest.raises(ValidationError, match="ISO date"):
            ItemDate("FirstAccessedOnline", "last spring")

    def test_attribute_structured(self) -> None:
        built = ItemAttribute.build({"Type": "ArticleVersion", "Value": "VoR"})
        assert built == ItemAttribute("ArticleVersion", "VoR")

    def test_shorthand_key_naming_a_field_is_malformed(self) -> None:
        with pytest.raises(MalformedInputError):
            ItemAttribute.build({"Type": "ArticleVersion"})


# ─── ItemContributor ──────────────────────────────────────────────────────────


class TestItemContributor:
    def test_name_only(self) -> None:
        contributor = ItemContributor(item_contributor_name="A. Author")
        assert contributor.item_contributor_ids == ()
        assert contributor.item_contributor_roles == ()

    def test_needs_id_or_name(self) -> None:
        with pytest.raises(ValidationError, match="ItemContributorID or an ItemContributorName"):
            ItemContributor(item_contributor_roles=("Author",))

    def test_blank_name_counts_as_absent(self) -> None:
        with pytest.raises(ValidationError):
            ItemContributor(item_contributor_name="")

    def test_build_nested_ids(self) -> None:
        built = ItemContributor.build({
            "ItemContributorID": [{"ORCID": "0000-0002-1825-0097"}],
            "ItemContributorRole": "Author",
        })
        assert built.item_contributor_ids == (ItemContributorId("ORCID", "0000-0002-1825-0097"),)
        assert built.item_contributor_roles == ("Author",)

    def test_foreign_id_member_rejected(self) -> None:
        with pytest.raises(CardinalityError):
            ItemContributor((Identifier("DOI", "10.1000/1"),))


# ─── DateRange ────────────────────────────────────────────────────────────────


class TestDateRange:
    def test_dates_normalized(self) -> None:
        period = DateRange(datetime.date(2015, 1, 1), "2015-01-31")
        assert (period.begin, period.end) == ("2015-01-01", "2015-01-31")

    def test_single_day(self) -> None:
        assert DateRange("2015-01-01", "2015-01-01").begin == "2015-01-01"

    def test_reversed_rejected(self) -> None:
        with pytest.raises(ValidationError, match="after End"):
            DateRange("2015-02-01", "2015-01-01")


# ─── Metric ───────────────────────────────────────────────────────────────────


class TestMetric:
    def test_fields(self, metric, period) -> None:
        assert metric.period == period
        assert metric.category is Category.REQUESTS
        assert metric.instances == (PerformanceCounter("ft_pdf", 5),)

    def test_list_of_instances_stored_as_tuple(self, period) -> None:
        counters = [PerformanceCounter("ft_pdf", 1), PerformanceCounter("ft_html", 2)]
        assert Metric(period, "Requests", counters).instances == tuple(counters)

    def test_instances_required(self, period) -> None:
        with pytest.raises(CardinalityError, match="at least one"):
            Metric(period, "Requests", ())

    def test_period_must_be_date_range(self) -> None:
        with pytest.raises(CardinalityError):
            Metric({"Begin": "2015-01-01", "End": "2015-01-31"}, "Requests", (PerformanceCounter("toc", 1),))

    def test_build_equals_direct_construction(self, period) -> None:
        built = Metric.build({
            "Period": {"Begin": "2015-01-01", "End": "2015-01-31"},
            "Category": "Requests",
            "Instance": [{"ft_pdf": 5}],
        })
        assert built == _make_metric()


# ─── ParentItem ───────────────────────────────────────────────────────────────


class TestParentItem:
    def test_defaults(self) -> None:
        parent = ParentItem("Journal of Examples", "Journal")
        assert parent.item_data_type is ItemDataType.JOURNAL
        assert parent.item_identifiers == ()
        assert parent.item_publisher is None

    def test_empty_publisher_normalized_to_none(self) -> None:
        assert ParentItem("Journal of Examples", "Journal", item_publisher="").item_publisher is None

    def test_build_with_identifiers(self) -> None:
        built = ParentItem.build({
            "ItemName": "Journal of Examples",
            "ItemDataType": "Journal",
            "ItemIdentifier": [{"Print_ISSN": "1234-5678"}],
            "ItemPublisher": "Example Press",
        })
        assert built == ParentItem(
            "Journal of Examples",
            "Journal",
            item_identifiers=(Identifier("Print_ISSN", "1234-5678"),),
            item_publisher="Example Press",
        )


# ─── ReportItems ──────────────────────────────────────────────────────────────


class TestReportItems:
    def test_fields(self, report_items) -> None:
        assert report_items.item_platform == "Example Platform"
        assert report_items.item_data_type is ItemDataType.JOURNAL
        assert report_items.parent_item.item_name == "Journal of Examples"
        assert len(report_items.item_identifiers) == 2

    def test_lone_metric_accepted(self) -> None:
        items = _make_report_items(item_performance=_make_metric())
        assert items.item_performance == (_make_metric(),)

    def test_performance_required(self) -> None:
        with pytest.raises(CardinalityError):
            _make_report_items(item_performance=[])

    def test_two_parents_rejected(self) -> None:
        parent = ParentItem("Journal of Examples", "Journal")
        with pytest.raises(CardinalityError, match="at most one"):
            _make_report_items(parent_item=[parent, parent])

    def test_unknown_data_type_rejected(self) -> None:
        with pytest.raises(InvalidEnumerationError):
            _make_report_items(item_data_type="Article")

    def test_hashable(self, report_items) -> None:
        assert hash(report_items) == hash(_make_report_items())

    def test_build_equals_direct_construction(self, report_items) -> None:
        built = ReportItems.build({
            "ItemPlatform": "Example Platform",
            "ItemName": "An Example Article",
            "ItemDataType": "Journal",
            "ParentItem": {"ItemName": "Journal of Examples", "ItemDataType": "Journal"},
            "ItemIdentifier": [{"DOI": "10.1000/1"}, {"Type": "Print_ISSN", "Value": "1234-5678"}],
            "ItemPerformance": [{
                "Period": {"Begin": "2015-01-01", "End": "2015-01-31"},
                "Category": "Requests",
                "Instance": {"ft_pdf": 5},
            }],
        })
        assert built == report_items

    def test_invalid_nested_value_propagates(self) -> None:
        with pytest.raises(InvalidEnumerationError):
            ReportItems.build({
                "ItemPlatform": "Example Platform",
                "ItemName": "An Example Article",
                "ItemDataType": "Journal",
                "ItemPerformance": [{
                    "Period": {"Begin": "2015-01-01", "End": "2015-01-31"},
                    "Category": "Requests",
                    "Instance": [{"ft_pdf": 1}, {"downloads": 2}],
                }],
            })

    def test_malformed_nested_value_propagates(self) -> None:
        with pytest.raises(MalformedInputError) as exc_info:
            ReportItems.build({
                "ItemPlatform": "Example Platform",
                "ItemName": "An Example Article",
                "ItemDataType": "Journal",
                "ItemPerformance": [{"Category": "Requests", "Instance": [{"ft_pdf": 1}]}],
            })
        assert exc_info.value.element == "ItemPerformance"
