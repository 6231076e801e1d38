"""
Tests for application domain models

Covers:
- ApplicationState labels
- Decimal handling of fund amounts
- Parsing from stored records
- Immutability (frozen=True)
"""

import datetime
from decimal import Decimal
from uuid import UUID

import pytest
from pydantic import ValidationError

from appdocs.core.domain import (
    Application,
    ApplicationState,
    Fund,
    LegalEntity,
    Person,
    Product,
    Review,
)


@pytest.fixture
def record():
    """Stored application record."""
    return {
        "id": "6f1c1b2e-8d53-4c1e-9a55-2d5b0f9b7a10",
        "reference_number": "REF1",
        "state": "Activated",
        "person": {"first_name": "Jane", "surname": "Doe"},
        "date": "2024-03-01",
        "is_legal_entity": True,
        "legal_entity": {"name": "Doe Holdings", "registration_number": "2020/123456/07"},
        "products": [
            {"name": "Retirement", "funds": [{"amount": "100.00", "fees": "10.00"}]},
            {"funds": [{"amount": 50, "fees": 5}]},
        ],
    }


class TestApplicationState:
    def test_values(self) -> None:
        assert ApplicationState("Pending") is ApplicationState.PENDING
        assert ApplicationState("InReview") is ApplicationState.IN_REVIEW

    def test_descriptions(self) -> None:
        assert ApplicationState.PENDING.description == "Pending"
        assert ApplicationState.ACTIVATED.description == "Activated"
        assert ApplicationState.IN_REVIEW.description == "In Review"
        assert ApplicationState.CLOSED.description == "Closed"

    def test_unknown_state_rejected(self) -> None:
        with pytest.raises(ValueError):
            ApplicationState("Archived")


class TestFund:
    def test_float_amount_has_no_binary_noise(self) -> None:
        fund = Fund(amount=0.1, fees=0.2)
        assert fund.amount == Decimal("0.1")
        assert fund.fees == Decimal("0.2")

    def test_fees_default_to_zero(self) -> None:
        assert Fund(amount="12.50").fees == Decimal("0")

    def test_negative_values_accepted(self) -> None:
        fund = Fund(amount="-5", fees="-1")
        assert fund.amount == Decimal("-5")

    def test_frozen(self) -> None:
        fund = Fund(amount="1")
        with pytest.raises(ValidationError):
            fund.amount = Decimal("2")


class TestApplication:
    def test_parse_record(self, record) -> None:
        app = Application.model_validate(record)

        assert app.id == UUID("6f1c1b2e-8d53-4c1e-9a55-2d5b0f9b7a10")
        assert app.state is ApplicationState.ACTIVATED
        assert app.date == datetime.date(2024, 3, 1)
        assert app.person == Person(first_name="Jane", surname="Doe")
        assert app.legal_entity == LegalEntity(name="Doe Holdings", registration_number="2020/123456/07")
        assert len(app.products) == 2
        assert app.products[0].funds[0].amount == Decimal("100.00")
        assert app.products[1].funds[0].fees == Decimal("5")
        assert app.current_review is None

    def test_optional_parts_default_absent(self, record) -> None:
        for key in ("is_legal_entity", "legal_entity", "products"):
            record.pop(key)
        app = Application.model_validate(record)

        assert app.is_legal_entity is False
        assert app.legal_entity is None
        assert app.products == ()

    def test_in_review_without_review_is_constructible(self, record) -> None:
        """Missing reviews are reported by the in-review builder, not the model."""
        record["state"] = "InReview"
        app = Application.model_validate(record)
        assert app.current_review is None

    def test_review_record(self, record) -> None:
        record["state"] = "InReview"
        record["current_review"] = {"reason": "address mismatch"}
        app = Application.model_validate(record)
        assert app.current_review == Review(reason="address mismatch")

    def test_missing_person_rejected(self, record) -> None:
        del record["person"]
        with pytest.raises(ValidationError):
            Application.model_validate(record)

    def test_frozen(self, record) -> None:
        app = Application.model_validate(record)
        with pytest.raises(ValidationError):
            app.state = ApplicationState.CLOSED

    def test_products_are_tuples(self, record) -> None:
        app = Application.model_validate(record)
        assert isinstance(app.products, tuple)
        assert isinstance(app.products[0], Product)
        assert isinstance(app.products[0].funds, tuple)
