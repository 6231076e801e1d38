"""
Domain models and view models.

Contains the application record (Application, Person, Product, Fund,
LegalEntity, Review) and the per-state presentation structures.
"""

from appdocs.core.domain.application import (
    Application,
    ApplicationState,
    Fund,
    LegalEntity,
    Person,
    Product,
    Review,
)
from appdocs.core.domain.view_models import (
    ActivatedApplicationViewModel,
    InReviewApplicationViewModel,
    PendingApplicationViewModel,
)

__all__ = [
    # Application record
    "Application",
    "ApplicationState",
    "Person",
    "Product",
    "Fund",
    "LegalEntity",
    "Review",
    # View models
    "PendingApplicationViewModel",
    "ActivatedApplicationViewModel",
    "InReviewApplicationViewModel",
]
