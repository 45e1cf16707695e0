"""Input validation - personal code, loan amount and loan period bounds"""

from loan_gateway.domain.constants import (
    MAXIMUM_LOAN_AMOUNT,
    MAXIMUM_LOAN_PERIOD,
    MINIMUM_LOAN_AMOUNT,
    MINIMUM_LOAN_PERIOD,
)
from loan_gateway.domain.exceptions import (
    InvalidIdentityCodeError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
)
from loan_gateway.domain.identity import is_valid_personal_code


def validate_inputs(code: str, loan_amount: int, loan_period: int) -> None:
    """
    Check all inputs against business bounds, first failure wins.

    Order: personal code, then amount, then period.

    Raises:
        InvalidIdentityCodeError: Code fails format or checksum
        InvalidLoanAmountError: Amount outside [2000, 10000]
        InvalidLoanPeriodError: Period outside [12, 48]
    """
    if not is_valid_personal_code(code):
        raise InvalidIdentityCodeError("Invalid personal ID code.")

    if loan_amount < MINIMUM_LOAN_AMOUNT or loan_amount > MAXIMUM_LOAN_AMOUNT:
        raise InvalidLoanAmountError(
            f"Loan amount must be between €{MINIMUM_LOAN_AMOUNT} and €{MAXIMUM_LOAN_AMOUNT}."
        )

    if loan_period < MINIMUM_LOAN_PERIOD or loan_period > MAXIMUM_LOAN_PERIOD:
        raise InvalidLoanPeriodError(
            f"Loan period must be between {MINIMUM_LOAN_PERIOD} and {MAXIMUM_LOAN_PERIOD} months."
        )
