"""Closed code sets of the COUNTER 4.1 report schema.

All enums are str Enums: members compare equal to their code string, so an
element built from "ft_pdf" and one built from MetricType.FT_PDF are equal.

Values match the enumerations of counter4_1.xsd.
"""

from __future__ import annotations

from enum import Enum


class MetricType(str, Enum):
    """PerformanceCounter <MetricType> codes."""

    ABSTRACT = "abstract"
    AUDIO = "audio"
    DATA_SET = "data_set"
    FT_EPUB = "ft_epub"
    FT_HTML = "ft_html"
    FT_HTML_MOBILE = "ft_html_mobile"
    FT_PDF = "ft_pdf"
    FT_PDF_MOBILE = "ft_pdf_mobile"
    FT_PS = "ft_ps"
    FT_PS_MOBILE = "ft_ps_mobile"
    FT_TOTAL = "ft_total"
    IMAGE = "image"
    MULTIMEDIA = "multimedia"
    NO_LICENSE = "no_license"
    OTHER = "other"
    PODCAST = "podcast"
    RECORD_VIEW = "record_view"
    REFERENCE = "reference"
    RESULT_CLICK = "result_click"
    SEARCH_FED = "search_fed"
    SEARCH_REG = "search_reg"
    SECTIONED_HTML = "sectioned_html"
    TOC = "toc"
    TURNAWAY = "turnaway"
    VIDEO = "video"


class ItemDataType(str, Enum):
    """<ItemDataType> codes for ReportItems and ParentItem."""

    BOOK = "Book"
    COLLECTION = "Collection"
    DATABASE = "Database"
    JOURNAL = "Journal"
    MULTIMEDIA = "Multimedia"
    PLATFORM = "Platform"


class IdentifierType(str, Enum):
    """<ItemIdentifier><Type> codes."""

    ONLINE_ISSN = "Online_ISSN"
    PRINT_ISSN = "Print_ISSN"
    ONLINE_ISBN = "Online_ISBN"
    PRINT_ISBN = "Print_ISBN"
    DOI = "DOI"
    PROPRIETARY = "Proprietary"


class ContributorIdType(str, Enum):
    """<ItemContributorID><Type> codes."""

    ISNI = "ISNI"
    ORCID = "ORCID"
    PROPRIETARY = "Proprietary"


class DateType(str, Enum):
    """<ItemDate><Type> codes."""

    FIRST_ACCESSED_ONLINE = "FirstAccessedOnline"
    PUBLICATION = "PubDate"


class AttributeType(str, Enum):
    """<ItemAttribute><Type> codes."""

    ARTICLE_VERSION = "ArticleVersion"
    ARTICLE_TYPE = "ArticleType"
    QUALIFICATION_NAME = "QualificationName"
    QUALIFICATION_LEVEL = "QualificationLevel"
    PROPRIETARY = "Proprietary"


class Category(str, Enum):
    """<ItemPerformance><Category> codes."""

    REQUESTS = "Requests"
    SEARCHES = "Searches"
    ACCESS_DENIED = "Access_denied"
