"""Shared pytest fixtures and helpers for the counter_report test suite.

Provides:
- Module-level helper functions (_make_metric, _make_report_items) importable
  directly by any test module that needs a valid element tree.
- Module-level _ELEMENT_FIXTURE singleton for YAML-driven parametrized tests.

pytest fixtures:
    period           — January 2015 DateRange.
    metric           — Requests metric with one ft_pdf counter.
    report_items     — ReportItems with parent, two identifiers and one metric.
    element_fixture  — ElementFixture singleton (YAML-driven test data).
"""

from __future__ import annotations

import pytest

from counter_report import (
    Category,
    DateRange,
    Identifier,
    ItemDataType,
    Metric,
    ParentItem,
    PerformanceCounter,
    ReportItems,
)

# Import after production imports so pythonpath=scripts:tests resolves fixtures/
from fixtures.fixture_loader import ElementFixture


# ─── Element Fixture Singleton ────────────────────────────────────────────────
# Loaded once at import time so parametrize decorators can use it directly.

_ELEMENT_FIXTURE = ElementFixture()


# ─── Module-Level Helpers ─────────────────────────────────────────────────────


def _make_metric(count: int = 5, metric_type: str = "ft_pdf") -> Metric:
    """Return a January 2015 Requests metric with a single counter."""
    return Metric(
        DateRange("2015-01-01", "2015-01-31"),
        Category.REQUESTS,
        (PerformanceCounter(metric_type, count),),
    )


def _make_report_items(**overrides) -> ReportItems:
    """Return a ReportItems with a parent item, two identifiers and one metric.

    Args:
        **overrides: Keyword arguments replacing the defaults passed to the
            ReportItems constructor.
    """
    kwargs = dict(
        item_platform="Example Platform",
        item_name="An Example Article",
        item_data_type=ItemDataType.JOURNAL,
        item_performance=(_make_metric(),),
        parent_item=ParentItem("Journal of Examples", "Journal"),
        item_identifiers=(Identifier("DOI", "10.1000/1"), Identifier("Print_ISSN", "1234-5678")),
    )
    kwargs.update(overrides)
    return ReportItems(**kwargs)


# ─── pytest Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture
def period() -> DateRange:
    return DateRange("2015-01-01", "2015-01-31")


@pytest.fixture
def metric() -> Metric:
    return _make_metric()


@pytest.fixture
def report_items() -> ReportItems:
    return _make_report_items()


@pytest.fixture
def element_fixture() -> ElementFixture:
    """Return the module-level ElementFixture singleton."""
    return _ELEMENT_FIXTURE
