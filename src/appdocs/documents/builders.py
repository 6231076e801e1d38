"""
View model builders: one per supported application state.

Pending:   reference, state label, full name, date, support email, signature
Activated: Pending fields + legal entity (if any) + portfolio funds + total
InReview:  Activated fields + review message + raw review record

Builders are pure: they read the application and presentation settings and
return a fresh immutable view model. Records that cannot produce a
well-formed document raise DataIntegrityError instead of rendering blanks.
"""

from typing import Any, Dict, Optional

from appdocs.core.domain.application import Application, LegalEntity
from appdocs.core.domain.view_models import (
    ActivatedApplicationViewModel,
    InReviewApplicationViewModel,
    PendingApplicationViewModel,
)
from appdocs.core.math.portfolio import flatten_portfolio_funds, portfolio_total_amount
from appdocs.documents.collaborators import PresentationSettings
from appdocs.documents.exceptions import DataIntegrityError
from appdocs.documents.review_reason import ReviewReasonClassifier


# =============================================================================
# SHARED FIELDS
# =============================================================================


def full_name(application: Application) -> str:
    """
    Applicant display name, "<first name> <surname>".

    Raises:
        DataIntegrityError: If either name part is blank
    """
    person = application.person
    for field_name in ("first_name", "surname"):
        if not getattr(person, field_name).strip():
            raise DataIntegrityError(
                f"Application '{application.id}' has a blank applicant {field_name}",
                application_id=application.id,
                field=f"person.{field_name}",
            )
    return f"{person.first_name} {person.surname}"


def _common_fields(application: Application, settings: PresentationSettings) -> Dict[str, Any]:
    return {
        "reference_number": application.reference_number,
        "state": application.state.description,
        "full_name": full_name(application),
        "applied_on": application.date,
        "support_email": settings.support_email,
        "signature": settings.signature,
    }


def legal_entity_of(application: Application) -> Optional[LegalEntity]:
    """
    Legal entity to show, None for applications made by a person.

    Raises:
        DataIntegrityError: If the application is flagged as a legal entity
            but carries no legal entity descriptor
    """
    if not application.is_legal_entity:
        return None
    if application.legal_entity is None:
        raise DataIntegrityError(
            f"Application '{application.id}' is flagged as a legal entity but has no legal entity",
            application_id=application.id,
            field="legal_entity",
        )
    return application.legal_entity


def _portfolio_fields(application: Application, settings: PresentationSettings) -> Dict[str, Any]:
    funds = flatten_portfolio_funds(application.products)
    return {
        "legal_entity": legal_entity_of(application),
        "portfolio_funds": funds,
        "portfolio_total_amount": portfolio_total_amount(funds, settings.tax_rate),
    }


# =============================================================================
# BUILDERS
# =============================================================================


class PendingViewModelBuilder:
    """Builds the pending application view model."""

    template_key = "PendingApplication"

    def __init__(self, settings: PresentationSettings):
        self.settings = settings

    def build(self, application: Application) -> PendingApplicationViewModel:
        return PendingApplicationViewModel(**_common_fields(application, self.settings))


class ActivatedViewModelBuilder:
    """Builds the activated application view model."""

    template_key = "ActivatedApplication"

    def __init__(self, settings: PresentationSettings):
        self.settings = settings

    def build(self, application: Application) -> ActivatedApplicationViewModel:
        return ActivatedApplicationViewModel(
            **_common_fields(application, self.settings),
            **_portfolio_fields(application, self.settings),
        )


class InReviewViewModelBuilder:
    """
    Builds the in-review application view model.

    The review message is IN_REVIEW_MESSAGE_PREFIX followed by the
    classifier's explanation of the current review reason.
    """

    template_key = "InReviewApplication"

    def __init__(self, settings: PresentationSettings, classifier: ReviewReasonClassifier):
        self.settings = settings
        self.classifier = classifier

    def build(self, application: Application) -> InReviewApplicationViewModel:
        """
        Args:
            application: Application in the IN_REVIEW state

        Returns:
            InReviewApplicationViewModel

        Raises:
            DataIntegrityError: If the review record is missing or its reason is blank
        """
        review = application.current_review
        if review is None:
            raise DataIntegrityError(
                f"Application '{application.id}' is in review but has no review record",
                application_id=application.id,
                field="current_review",
            )
        if not review.reason or not review.reason.strip():
            raise DataIntegrityError(
                f"Application '{application.id}' has a review record without a reason",
                application_id=application.id,
                field="current_review.reason",
            )

        return InReviewApplicationViewModel(
            **_common_fields(application, self.settings),
            **_portfolio_fields(application, self.settings),
            in_review_message=self.classifier.in_review_message(review.reason),
            in_review_information=review,
        )
