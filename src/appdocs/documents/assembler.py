"""
Document assembler: application id in, PDF bytes out.

Pipeline per call:
1. Look up the application; a missing record is a warning and no document
2. Strip one trailing "/" from the base URI
3. Dispatch on application state to its view model builder; an unsupported
   state is a warning and no document
4. Resolve the state's template path and render markup with the view model
5. Convert markup to PDF with FIXED_PDF_OPTIONS

Every external call is made once. Nothing is retried and no partial
document is ever returned. The assembler holds no per-request state, so one
instance can serve concurrent callers if its collaborators can.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from uuid import UUID

from appdocs.core.domain.application import ApplicationState
from appdocs.documents.builders import (
    ActivatedViewModelBuilder,
    InReviewViewModelBuilder,
    PendingViewModelBuilder,
)
from appdocs.documents.collaborators import (
    ApplicationStore,
    DiagnosticsSink,
    DocumentRenderer,
    MarkupRenderer,
    PresentationSettings,
    TemplatePathProvider,
)
from appdocs.documents.exceptions import MissingCollaboratorError
from appdocs.documents.pdf_options import FIXED_PDF_OPTIONS
from appdocs.documents.review_reason import ReviewReasonClassifier


def normalize_base_uri(base_uri: str) -> str:
    """
    Remove exactly one trailing "/" so that base_uri + template path has no
    doubled separator.

    Args:
        base_uri: Base URI of the template location

    Returns:
        base_uri without its trailing separator, otherwise unchanged
    """
    if base_uri.endswith("/"):
        return base_uri[:-1]
    return base_uri


class AssemblyOutcome(str, Enum):
    """How a generation request ended."""

    GENERATED = "generated"
    NOT_FOUND = "not_found"
    UNSUPPORTED_STATE = "unsupported_state"


@dataclass(frozen=True)
class AssemblyResult:
    """Result of one generation request."""

    outcome: AssemblyOutcome
    application_id: UUID
    document: Optional[bytes] = None
    state: Optional[ApplicationState] = None

    # Details
    details: str = ""

    @property
    def has_document(self) -> bool:
        return self.outcome == AssemblyOutcome.GENERATED


class DocumentAssembler:
    """
    Generates the lifecycle-state document for an application.

    Supported states:
    - PENDING    → PendingViewModelBuilder    ("PendingApplication")
    - ACTIVATED  → ActivatedViewModelBuilder  ("ActivatedApplication")
    - IN_REVIEW  → InReviewViewModelBuilder   ("InReviewApplication")
    - any other  → warning, no document
    """

    def __init__(
        self,
        store: ApplicationStore,
        template_path_provider: TemplatePathProvider,
        markup_renderer: MarkupRenderer,
        document_renderer: DocumentRenderer,
        settings: PresentationSettings,
        logger: DiagnosticsSink,
        review_reason_case_sensitive: Optional[bool] = None,
    ):
        """
        Args:
            store: application lookup
            template_path_provider: template key → path fragment
            markup_renderer: template + view model → markup
            document_renderer: markup + options → document
            settings: support email, signature, tax rate
            logger: warning sink (normally a logging.Logger)
            review_reason_case_sensitive: review keyword casing; None takes
                settings.review_reason_case_sensitive when present, else True

        Raises:
            MissingCollaboratorError: If any collaborator is None
        """
        collaborators = {
            "store": store,
            "template_path_provider": template_path_provider,
            "markup_renderer": markup_renderer,
            "document_renderer": document_renderer,
            "settings": settings,
            "logger": logger,
        }
        for name, collaborator in collaborators.items():
            if collaborator is None:
                raise MissingCollaboratorError(name)

        self.store = store
        self.template_path_provider = template_path_provider
        self.markup_renderer = markup_renderer
        self.document_renderer = document_renderer
        self.settings = settings
        self.logger = logger

        if review_reason_case_sensitive is None:
            review_reason_case_sensitive = getattr(settings, "review_reason_case_sensitive", True)
        classifier = ReviewReasonClassifier(case_sensitive=review_reason_case_sensitive)
        self._builders = {
            ApplicationState.PENDING: PendingViewModelBuilder(settings),
            ApplicationState.ACTIVATED: ActivatedViewModelBuilder(settings),
            ApplicationState.IN_REVIEW: InReviewViewModelBuilder(settings, classifier),
        }

    def generate(self, application_id: UUID, base_uri: str) -> Optional[bytes]:
        """
        Generate the PDF for an application.

        Args:
            application_id: Application identifier
            base_uri: Location the template paths are relative to

        Returns:
            PDF bytes, or None when the application is missing or its state
            has no document

        Raises:
            DataIntegrityError: If the record cannot produce a well-formed document
        """
        return self.assemble(application_id, base_uri).document

    def assemble(self, application_id: UUID, base_uri: str) -> AssemblyResult:
        """Same as generate(), reporting why no document was produced."""
        application = self.store.find_by_id(application_id)
        if application is None:
            self.logger.warning(f"No application found for id '{application_id}'")
            return AssemblyResult(
                outcome=AssemblyOutcome.NOT_FOUND,
                application_id=application_id,
                details=f"No application found for id '{application_id}'",
            )

        base_uri = normalize_base_uri(base_uri)

        builder = self._builders.get(application.state)
        if builder is None:
            message = (
                f"The application is in state '{application.state.value}' "
                "and no valid document can be generated for it."
            )
            self.logger.warning(message)
            return AssemblyResult(
                outcome=AssemblyOutcome.UNSUPPORTED_STATE,
                application_id=application_id,
                state=application.state,
                details=message,
            )

        view_model = builder.build(application)
        template_path = self.template_path_provider.get(builder.template_key)
        markup = self.markup_renderer.render(f"{base_uri}{template_path}", view_model)
        document = self.document_renderer.render(markup, FIXED_PDF_OPTIONS).to_bytes()

        return AssemblyResult(
            outcome=AssemblyOutcome.GENERATED,
            application_id=application_id,
            document=document,
            state=application.state,
            details=f"Rendered {builder.template_key} from {base_uri}{template_path}",
        )
