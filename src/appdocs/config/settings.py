"""
Presentation configuration.

Type-safe settings with environment variable support (prefix APPDOCS_):

    APPDOCS_SUPPORT_EMAIL=support@example.com
    APPDOCS_SIGNATURE="The Investments Team"
    APPDOCS_TAX_RATE=0.15
    APPDOCS_REVIEW_REASON_CASE_SENSITIVE=true
"""

from decimal import Decimal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class PresentationConfig(BaseSettings):
    """
    Shared presentation fields and the portfolio tax rate.

    Read once at startup; the assembler only reads it.
    """

    support_email: str = Field(..., min_length=1, description="Support contact shown on documents")
    signature: str = Field(..., min_length=1, description="Signature block shown on documents")
    tax_rate: Decimal = Field(..., ge=0, le=1, description="Fractional tax rate, 0.15 = 15%")
    review_reason_case_sensitive: bool = Field(
        True, description="Match review reason keywords case-sensitively"
    )

    model_config = {"env_prefix": "APPDOCS_", "frozen": True}

    @field_validator("tax_rate", mode="before")
    @classmethod
    def float_through_str(cls, v):
        """0.15 must become Decimal('0.15'), not its binary expansion."""
        if isinstance(v, float):
            return str(v)
        return v
