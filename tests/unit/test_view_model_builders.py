"""
Tests for the per-state view model builders

Covers:
- Pending fields (full name, state label, reference, date, settings)
- Legal entity present only for legal-entity applications
- Portfolio funds and total for activated / in-review
- In-review message and raw review record
- Data integrity errors for missing reviews and blank names
"""

import datetime
import uuid
from decimal import Decimal

import pytest
from pydantic import ValidationError

from appdocs.config import PresentationConfig
from appdocs.core.domain import (
    ActivatedApplicationViewModel,
    Application,
    ApplicationState,
    Fund,
    InReviewApplicationViewModel,
    LegalEntity,
    PendingApplicationViewModel,
    Person,
    Product,
    Review,
)
from appdocs.documents import (
    ActivatedViewModelBuilder,
    DataIntegrityError,
    InReviewViewModelBuilder,
    PendingViewModelBuilder,
    ReviewReasonClassifier,
    full_name,
)

APPLIED_ON = datetime.date(2024, 3, 1)


@pytest.fixture
def settings():
    return PresentationConfig(
        support_email="support@example.com",
        signature="The Investments Team",
        tax_rate=Decimal("0.2"),
    )


def make_application(**overrides) -> Application:
    fields = {
        "id": uuid.uuid4(),
        "reference_number": "REF1",
        "state": ApplicationState.PENDING,
        "person": Person(first_name="Jane", surname="Doe"),
        "date": APPLIED_ON,
        "products": (
            Product(funds=(Fund(amount=100, fees=10),)),
            Product(funds=(Fund(amount=50, fees=5),)),
        ),
    }
    fields.update(overrides)
    return Application(**fields)


# =============================================================================
# PENDING
# =============================================================================


class TestPendingBuilder:
    def test_fields(self, settings) -> None:
        vm = PendingViewModelBuilder(settings).build(make_application())

        assert isinstance(vm, PendingApplicationViewModel)
        assert vm.full_name == "Jane Doe"
        assert vm.state == ApplicationState.PENDING.description
        assert vm.reference_number == "REF1"
        assert vm.applied_on == APPLIED_ON
        assert vm.support_email == "support@example.com"
        assert vm.signature == "The Investments Team"

    def test_no_portfolio_fields(self, settings) -> None:
        vm = PendingViewModelBuilder(settings).build(make_application())
        assert not hasattr(vm, "portfolio_total_amount")
        assert not hasattr(vm, "legal_entity")

    def test_view_model_frozen(self, settings) -> None:
        vm = PendingViewModelBuilder(settings).build(make_application())
        with pytest.raises(ValidationError):
            vm.full_name = "Someone Else"

    def test_fresh_instance_per_build(self, settings) -> None:
        builder = PendingViewModelBuilder(settings)
        app = make_application()
        assert builder.build(app) is not builder.build(app)

    @pytest.mark.parametrize("first_name, surname", [("", "Doe"), ("Jane", "  ")])
    def test_blank_name_is_integrity_error(self, settings, first_name, surname) -> None:
        app = make_application(person=Person(first_name=first_name, surname=surname))

        with pytest.raises(DataIntegrityError) as exc_info:
            PendingViewModelBuilder(settings).build(app)

        assert exc_info.value.application_id == app.id
        assert exc_info.value.field.startswith("person.")


# =============================================================================
# ACTIVATED
# =============================================================================


class TestActivatedBuilder:
    def test_portfolio(self, settings) -> None:
        app = make_application(state=ApplicationState.ACTIVATED)
        vm = ActivatedViewModelBuilder(settings).build(app)

        assert isinstance(vm, ActivatedApplicationViewModel)
        assert vm.state == "Activated"
        assert vm.portfolio_funds == (Fund(amount=100, fees=10), Fund(amount=50, fees=5))
        assert vm.portfolio_total_amount == Decimal("27.0")

    def test_legal_entity_absent_when_flag_false(self, settings) -> None:
        app = make_application(
            state=ApplicationState.ACTIVATED,
            is_legal_entity=False,
            legal_entity=LegalEntity(name="Stale Entity"),
        )
        vm = ActivatedViewModelBuilder(settings).build(app)
        assert vm.legal_entity is None

    def test_legal_entity_present_when_flag_true(self, settings) -> None:
        entity = LegalEntity(name="Doe Holdings", registration_number="2020/123456/07")
        app = make_application(
            state=ApplicationState.ACTIVATED, is_legal_entity=True, legal_entity=entity
        )
        vm = ActivatedViewModelBuilder(settings).build(app)
        assert vm.legal_entity == entity

    def test_flag_without_entity_is_integrity_error(self, settings) -> None:
        app = make_application(
            state=ApplicationState.ACTIVATED, is_legal_entity=True, legal_entity=None
        )

        with pytest.raises(DataIntegrityError) as exc_info:
            ActivatedViewModelBuilder(settings).build(app)

        assert exc_info.value.field == "legal_entity"
        assert exc_info.value.application_id == app.id

    def test_no_products(self, settings) -> None:
        app = make_application(state=ApplicationState.ACTIVATED, products=())
        vm = ActivatedViewModelBuilder(settings).build(app)

        assert vm.portfolio_funds == ()
        assert vm.portfolio_total_amount == Decimal("0")


# =============================================================================
# IN REVIEW
# =============================================================================


class TestInReviewBuilder:
    @pytest.fixture
    def builder(self, settings):
        return InReviewViewModelBuilder(settings, ReviewReasonClassifier())

    def test_message_and_review(self, builder) -> None:
        review = Review(reason="bank details unclear")
        app = make_application(state=ApplicationState.IN_REVIEW, current_review=review)
        vm = builder.build(app)

        assert isinstance(vm, InReviewApplicationViewModel)
        assert vm.state == "In Review"
        assert vm.in_review_message == (
            "Your application has been placed in review"
            " pending outstanding bank account verification."
        )
        assert vm.in_review_information == review
        assert vm.portfolio_total_amount == Decimal("27.0")
        assert vm.legal_entity is None

    def test_missing_review_is_integrity_error(self, builder) -> None:
        app = make_application(state=ApplicationState.IN_REVIEW, current_review=None)

        with pytest.raises(DataIntegrityError) as exc_info:
            builder.build(app)

        assert exc_info.value.field == "current_review"
        assert exc_info.value.application_id == app.id

    def test_blank_reason_is_integrity_error(self, builder) -> None:
        app = make_application(state=ApplicationState.IN_REVIEW, current_review=Review(reason=" "))

        with pytest.raises(DataIntegrityError) as exc_info:
            builder.build(app)

        assert exc_info.value.field == "current_review.reason"

    def test_flag_without_entity_is_integrity_error(self, builder) -> None:
        app = make_application(
            state=ApplicationState.IN_REVIEW,
            current_review=Review(reason="bank details unclear"),
            is_legal_entity=True,
        )

        with pytest.raises(DataIntegrityError) as exc_info:
            builder.build(app)

        assert exc_info.value.field == "legal_entity"

    def test_case_insensitive_classifier(self, settings) -> None:
        builder = InReviewViewModelBuilder(settings, ReviewReasonClassifier(case_sensitive=False))
        app = make_application(
            state=ApplicationState.IN_REVIEW, current_review=Review(reason="ADDRESS outdated")
        )
        assert "address verification" in builder.build(app).in_review_message


def test_full_name() -> None:
    assert full_name(make_application(person=Person(first_name="Ann", surname="Lee"))) == "Ann Lee"
