"""
Review reason classification.

Maps the free-text reason an application is held in review to one of a fixed
set of applicant-facing explanations. Rules are tested in order and the first
keyword contained in the reason wins, so a reason mentioning both an address
and a bank resolves to the address explanation.

Casing is an explicit policy: case-sensitive by default, case-insensitive
matching compares casefolded text.
"""

from enum import Enum
from typing import Final


IN_REVIEW_MESSAGE_PREFIX: Final[str] = "Your application has been placed in review"


class ReviewExplanation(str, Enum):
    """Applicant-facing explanation for a review."""

    ADDRESS_VERIFICATION = "address_verification"
    BANK_ACCOUNT_VERIFICATION = "bank_account_verification"
    SUSPICIOUS_ACTIVITY = "suspicious_activity"

    @property
    def message(self) -> str:
        """Sentence suffix appended to IN_REVIEW_MESSAGE_PREFIX."""
        return _EXPLANATION_MESSAGES[self]


_EXPLANATION_MESSAGES = {
    ReviewExplanation.ADDRESS_VERIFICATION:
        " pending outstanding address verification for FICA purposes.",
    ReviewExplanation.BANK_ACCOUNT_VERIFICATION:
        " pending outstanding bank account verification.",
    ReviewExplanation.SUSPICIOUS_ACTIVITY:
        " because of suspicious account behaviour. Please contact support ASAP.",
}

# Order matters: first match wins.
REVIEW_REASON_RULES: Final[tuple[tuple[str, ReviewExplanation], ...]] = (
    ("address", ReviewExplanation.ADDRESS_VERIFICATION),
    ("bank", ReviewExplanation.BANK_ACCOUNT_VERIFICATION),
)


class ReviewReasonClassifier:
    """
    First-match-wins substring classifier for review reasons.

    Callers must pass a non-empty reason; the in-review builder enforces that
    before classifying.
    """

    def __init__(self, case_sensitive: bool = True):
        """
        Args:
            case_sensitive: match keywords exactly (default) or casefolded
        """
        self.case_sensitive = case_sensitive

    def classify(self, reason: str) -> ReviewExplanation:
        """
        Classify a review reason.

        Args:
            reason: Free-text review reason

        Returns:
            ReviewExplanation of the first matching rule, SUSPICIOUS_ACTIVITY otherwise
        """
        text = reason if self.case_sensitive else reason.casefold()

        for keyword, explanation in REVIEW_REASON_RULES:
            if keyword in text:
                return explanation

        return ReviewExplanation.SUSPICIOUS_ACTIVITY

    def in_review_message(self, reason: str) -> str:
        """Full in-review sentence for a reason."""
        return IN_REVIEW_MESSAGE_PREFIX + self.classify(reason).message
