"""
PDF rendering options.

The assembler always submits FIXED_PDF_OPTIONS: numeric page numbers and the
standard header on the first page only. The other enum members exist for
document renderer adapters.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Final


class PageNumbers(str, Enum):
    """Page numbering mode."""

    NONE = "none"
    NUMERIC = "numeric"
    ROMAN = "roman"


class HeaderRepeat(str, Enum):
    """Which pages carry the header."""

    FIRST_PAGE_ONLY = "first_page_only"
    ALL_PAGES = "all_pages"


PDF_HEADER_HTML: Final[str] = (
    '<div class="document-header">'
    '<span class="document-header__brand">Investment Application</span>'
    "</div>"
)


@dataclass(frozen=True)
class HeaderOptions:
    """Header placement."""

    header_repeat: HeaderRepeat = HeaderRepeat.FIRST_PAGE_ONLY
    header_html: str = PDF_HEADER_HTML


@dataclass(frozen=True)
class PdfOptions:
    """Options passed with the markup to the document renderer."""

    page_numbers: PageNumbers = PageNumbers.NUMERIC
    header: HeaderOptions = field(default_factory=HeaderOptions)


FIXED_PDF_OPTIONS: Final[PdfOptions] = PdfOptions(
    page_numbers=PageNumbers.NUMERIC,
    header=HeaderOptions(
        header_repeat=HeaderRepeat.FIRST_PAGE_ONLY,
        header_html=PDF_HEADER_HTML,
    ),
)
