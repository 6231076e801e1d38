"""
Document pipeline: from application record to PDF bytes.

- review_reason: review reason → applicant-facing explanation
- builders: per-state view model builders
- pdf_options: fixed PDF rendering options
- collaborators: store / template / renderer interfaces
- assembler: DocumentAssembler orchestrating one generation request
"""

from .assembler import (
    AssemblyOutcome,
    AssemblyResult,
    DocumentAssembler,
    normalize_base_uri,
)
from .builders import (
    ActivatedViewModelBuilder,
    InReviewViewModelBuilder,
    PendingViewModelBuilder,
    full_name,
    legal_entity_of,
)
from .exceptions import (
    ConfigurationError,
    ContractViolationError,
    DataIntegrityError,
    DocumentError,
    MissingCollaboratorError,
)
from .pdf_options import (
    FIXED_PDF_OPTIONS,
    PDF_HEADER_HTML,
    HeaderOptions,
    HeaderRepeat,
    PageNumbers,
    PdfOptions,
)
from .review_reason import (
    IN_REVIEW_MESSAGE_PREFIX,
    ReviewExplanation,
    ReviewReasonClassifier,
)

__all__ = [
    # Assembler
    "DocumentAssembler",
    "AssemblyOutcome",
    "AssemblyResult",
    "normalize_base_uri",
    # Builders
    "PendingViewModelBuilder",
    "ActivatedViewModelBuilder",
    "InReviewViewModelBuilder",
    "full_name",
    "legal_entity_of",
    # Exceptions
    "DocumentError",
    "DataIntegrityError",
    "MissingCollaboratorError",
    "ConfigurationError",
    "ContractViolationError",
    # PDF options
    "PdfOptions",
    "HeaderOptions",
    "PageNumbers",
    "HeaderRepeat",
    "PDF_HEADER_HTML",
    "FIXED_PDF_OPTIONS",
    # Review reasons
    "ReviewReasonClassifier",
    "ReviewExplanation",
    "IN_REVIEW_MESSAGE_PREFIX",
]
