"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import Optional


class DecisionRequest(BaseModel):
    """Request body for POST /v1/loan/decision"""

    identity_code: str = Field(..., min_length=1, description="Estonian personal identification code")
    loan_amount: int = Field(..., description="Requested loan amount in EUR")
    loan_period: int = Field(..., description="Requested loan period in months")
    country: str = Field(..., min_length=1, description="Applicant's country of residence")


class DecisionResponse(BaseModel):
    """Response for POST /v1/loan/decision"""

    approved_amount: Optional[int] = None
    approved_period: Optional[int] = None
    error_message: Optional[str] = None
