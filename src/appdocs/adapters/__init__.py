"""
Adapters: concrete implementations of the assembler's collaborators.

- stores: in-memory and JSON-file application stores
- template_paths: mapping-backed template path provider
- jinja_renderer: Jinja2 markup renderer
- weasyprint_renderer: WeasyPrint HTML → PDF renderer
"""

from .jinja_renderer import JinjaMarkupRenderer, format_money, template_path_from_uri
from .stores import InMemoryApplicationStore, JsonApplicationStore
from .template_paths import DEFAULT_TEMPLATE_PATHS, MappingTemplatePathProvider
from .weasyprint_renderer import PdfDocument, WeasyPrintDocumentRenderer, inject_header, page_css

__all__ = [
    # Stores
    "InMemoryApplicationStore",
    "JsonApplicationStore",
    # Templates
    "MappingTemplatePathProvider",
    "DEFAULT_TEMPLATE_PATHS",
    # Markup
    "JinjaMarkupRenderer",
    "format_money",
    "template_path_from_uri",
    # PDF
    "WeasyPrintDocumentRenderer",
    "PdfDocument",
    "page_css",
    "inject_header",
]
