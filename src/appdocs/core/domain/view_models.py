"""
View models: immutable presentation structures handed to the markup renderer.

One instance is built per generation request and never mutated or shared.
Optional parts (legal entity) are absent (None), never zero-valued.
"""

import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from .application import Fund, LegalEntity, Review


class PendingApplicationViewModel(BaseModel):
    """Fields shown on every application document."""

    reference_number: str = Field(..., description="Application reference number")
    state: str = Field(..., description="Human-readable state label")
    full_name: str = Field(..., description="Applicant first name and surname")
    applied_on: datetime.date = Field(..., description="Application date")
    support_email: str = Field(..., description="Support contact address")
    signature: str = Field(..., description="Signature block")

    model_config = {"frozen": True}


class ActivatedApplicationViewModel(PendingApplicationViewModel):
    """Pending fields plus the portfolio."""

    legal_entity: Optional[LegalEntity] = Field(
        None, description="Legal entity, present only for legal-entity applications"
    )
    portfolio_funds: tuple[Fund, ...] = Field(
        default_factory=tuple, description="Funds across all products, in order"
    )
    portfolio_total_amount: Decimal = Field(
        Decimal("0"), description="Sum of (amount - fees) * tax rate over the portfolio"
    )


class InReviewApplicationViewModel(ActivatedApplicationViewModel):
    """Activated fields plus the review explanation."""

    in_review_message: str = Field(..., description="Review explanation shown to the applicant")
    in_review_information: Review = Field(..., description="Raw review record")
