"""
Collaborator interfaces consumed by the document assembler.

Concrete implementations live in appdocs.adapters; any object with the same
methods works. Implementations must be safe for concurrent use if the
assembler is shared across threads.
"""

from decimal import Decimal
from typing import Any, Optional, Protocol
from uuid import UUID

from appdocs.core.domain.application import Application
from appdocs.documents.pdf_options import PdfOptions


class ApplicationStore(Protocol):
    """Read-only lookup of application records."""

    def find_by_id(self, application_id: UUID) -> Optional[Application]:
        ...


class TemplatePathProvider(Protocol):
    """Resolves a template key to a path fragment."""

    def get(self, template_key: str) -> str:
        ...


class MarkupRenderer(Protocol):
    """Renders a template with a view model into markup."""

    def render(self, template_uri: str, view_model: Any) -> str:
        ...


class RenderedDocument(Protocol):
    """Document returned by the document renderer."""

    def to_bytes(self) -> bytes:
        ...


class DocumentRenderer(Protocol):
    """Converts markup into a document."""

    def render(self, markup: str, options: PdfOptions) -> RenderedDocument:
        ...


class PresentationSettings(Protocol):
    """Shared presentation fields and the portfolio tax rate."""

    support_email: str
    signature: str
    tax_rate: Decimal


class DiagnosticsSink(Protocol):
    """Receives pipeline warnings; logging.Logger satisfies it."""

    def warning(self, msg: str, *args: Any) -> None:
        ...
