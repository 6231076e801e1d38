"""
WeasyPrint document renderer.

Converts HTML markup to PDF. Page numbering and header repetition are
expressed as CSS paged-media rules: the header markup becomes a running
element placed in the top margin box of the first page or of every page.
"""

import re
from dataclasses import dataclass
from typing import Optional

from appdocs.documents.pdf_options import HeaderRepeat, PageNumbers, PdfOptions

HEADER_CLASS = "appdocs-running-header"

_BODY_OPEN = re.compile(r"<body[^>]*>", re.IGNORECASE)

_PAGE_COUNTERS = {
    PageNumbers.NUMERIC: "counter(page)",
    PageNumbers.ROMAN: "counter(page, lower-roman)",
}


@dataclass(frozen=True)
class PdfDocument:
    """Rendered PDF."""

    content: bytes

    def to_bytes(self) -> bytes:
        return self.content


def page_css(options: PdfOptions) -> str:
    """Paged-media stylesheet for the given options."""
    rules = [f".{HEADER_CLASS} {{ position: running(appdocs-header); }}"]

    counter = _PAGE_COUNTERS.get(options.page_numbers)
    if counter is not None:
        rules.append(f"@page {{ @bottom-center {{ content: {counter}; }} }}")

    selector = "@page :first" if options.header.header_repeat == HeaderRepeat.FIRST_PAGE_ONLY else "@page"
    rules.append(f"{selector} {{ @top-center {{ content: element(appdocs-header); }} }}")

    return "\n".join(rules)


def inject_header(markup: str, header_html: str) -> str:
    """Insert the running header as the first element of <body>."""
    header = f'<div class="{HEADER_CLASS}">{header_html}</div>'
    match = _BODY_OPEN.search(markup)
    if match is None:
        return header + markup
    return markup[:match.end()] + header + markup[match.end():]


class WeasyPrintDocumentRenderer:
    """Document renderer producing PDF bytes with WeasyPrint."""

    def __init__(self, base_url: Optional[str] = None):
        """
        Args:
            base_url: base for relative URLs (images, stylesheets) in the markup
        """
        self.base_url = base_url

    def render(self, markup: str, options: PdfOptions) -> PdfDocument:
        # Lazy import: WeasyPrint loads native libraries on import
        from weasyprint import CSS, HTML

        html = HTML(string=inject_header(markup, options.header.header_html), base_url=self.base_url)
        content = html.write_pdf(stylesheets=[CSS(string=page_css(options))])
        return PdfDocument(content=content)
