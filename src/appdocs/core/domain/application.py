"""
Application: domain record that drives document selection.

Immutable Pydantic models for the application record as it is read from the
application store. The core never advances or mutates these records.

Models accept blank names and a missing review; the view model builders
reject those at generation time with DataIntegrityError.
"""

import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class ApplicationState(str, Enum):
    """Lifecycle state of an application."""

    PENDING = "Pending"
    ACTIVATED = "Activated"
    IN_REVIEW = "InReview"
    CLOSED = "Closed"

    @property
    def description(self) -> str:
        """Human-readable state label shown on documents."""
        return _STATE_DESCRIPTIONS[self]


_STATE_DESCRIPTIONS = {
    ApplicationState.PENDING: "Pending",
    ApplicationState.ACTIVATED: "Activated",
    ApplicationState.IN_REVIEW: "In Review",
    ApplicationState.CLOSED: "Closed",
}


# =============================================================================
# NESTED MODELS
# =============================================================================


class Person(BaseModel):
    """Applicant."""

    first_name: str = Field(..., description="First name")
    surname: str = Field(..., description="Surname")

    model_config = {"frozen": True}


class Fund(BaseModel):
    """
    Fund position held in a product.

    No sign invariant is enforced on amount or fees; aggregation treats
    both as given.
    """

    name: Optional[str] = Field(None, description="Display name of the fund")
    amount: Decimal = Field(..., description="Invested amount")
    fees: Decimal = Field(Decimal("0"), description="Fees charged on the position")

    model_config = {"frozen": True}

    @field_validator("amount", "fees", mode="before")
    @classmethod
    def float_through_str(cls, v):
        """Floats go through str() so binary representation noise never reaches Decimal."""
        if isinstance(v, float):
            return str(v)
        return v


class Product(BaseModel):
    """Investment product; an ordered collection of funds."""

    name: Optional[str] = Field(None, description="Display name of the product")
    funds: tuple[Fund, ...] = Field(default_factory=tuple, description="Funds in order")

    model_config = {"frozen": True}


class LegalEntity(BaseModel):
    """Legal entity the application is made on behalf of."""

    name: str = Field(..., min_length=1, description="Registered name")
    registration_number: Optional[str] = Field(None, description="Company registration number")

    model_config = {"frozen": True}


class Review(BaseModel):
    """Why an application is held in review."""

    reason: str = Field(..., description="Free-text review reason")

    model_config = {"frozen": True}


# =============================================================================
# APPLICATION MODEL
# =============================================================================


class Application(BaseModel):
    """
    Application record.

    `legal_entity` is only meaningful when `is_legal_entity` is set, and
    `current_review` only when the state is IN_REVIEW.
    """

    id: UUID = Field(..., description="Unique identifier")
    reference_number: str = Field(..., description="Reference number shown to the applicant")
    state: ApplicationState = Field(..., description="Lifecycle state")
    person: Person = Field(..., description="Applicant")
    date: datetime.date = Field(..., description="Date the application was made")

    is_legal_entity: bool = Field(False, description="Application made for a legal entity")
    legal_entity: Optional[LegalEntity] = Field(None, description="Legal entity descriptor")

    products: tuple[Product, ...] = Field(default_factory=tuple, description="Products in order")
    current_review: Optional[Review] = Field(None, description="Active review record")

    model_config = {"frozen": True}
