"""Loan decision engine - core business logic for credit decisions"""

from datetime import date
from typing import Optional

from loan_gateway.domain.age import check_age
from loan_gateway.domain.constants import (
    CREDIT_SCORE_THRESHOLD,
    MAXIMUM_LOAN_AMOUNT,
    MAXIMUM_LOAN_PERIOD,
    MINIMUM_LOAN_AMOUNT,
)
from loan_gateway.domain.exceptions import DecisionFaultError, NoValidLoanError
from loan_gateway.domain.identity import birth_date, resolve_segment
from loan_gateway.domain.models import Decision, Segment
from loan_gateway.domain.validation import validate_inputs


def calculate_credit_score(credit_modifier: int, loan_amount: int, loan_period: int) -> float:
    """
    Credit score = (modifier / amount) * period / 10.

    A score of 0.1 or more means the terms are approvable.
    """
    return (credit_modifier / loan_amount) * loan_period / 10


def calculate_loan_amount(credit_modifier: int, loan_period: int) -> int:
    """Largest amount the modifier supports over the given period"""
    return credit_modifier * loan_period


def find_alternative_loan(credit_modifier: int, requested_period: int) -> Decision:
    """
    Search longer periods for the first one with a passing score.

    Periods are tried in ascending order from requested_period + 1 up to 48,
    so the shortest workable period wins. The amount here is not capped at
    the maximum loan amount.

    Raises:
        NoValidLoanError: No period in range qualifies
    """
    for period in range(requested_period + 1, MAXIMUM_LOAN_PERIOD + 1):
        amount = calculate_loan_amount(credit_modifier, period)
        if (
            amount >= MINIMUM_LOAN_AMOUNT
            and calculate_credit_score(credit_modifier, amount, period) >= CREDIT_SCORE_THRESHOLD
        ):
            return Decision(approved_amount=amount, approved_period=period, from_alternative_search=True)

    raise NoValidLoanError("No valid loan found within the allowed period.")


def decide_loan(segment: Segment, loan_amount: int, loan_period: int) -> Decision:
    """
    Approve the requested period or fall back to the alternative search.

    Requested period passes: approve min(10000, modifier * period) for it.
    """
    credit_modifier = segment.credit_modifier
    if credit_modifier == 0:
        raise NoValidLoanError("Loan denied due to existing debt.")

    score = calculate_credit_score(credit_modifier, loan_amount, loan_period)
    if score < CREDIT_SCORE_THRESHOLD:
        return find_alternative_loan(credit_modifier, loan_period)

    amount = min(MAXIMUM_LOAN_AMOUNT, calculate_loan_amount(credit_modifier, loan_period))
    return Decision(approved_amount=amount, approved_period=loan_period)


def evaluate(
    identity_code: str,
    loan_amount: int,
    loan_period: int,
    country: str,
    today: Optional[date] = None,
) -> Decision:
    """
    Main entry point: validate the request and calculate the approved loan.

    Flow (first error wins):
    1. Resolve segment from the last four digits, reject debtors
    2. Validate personal code, amount and period
    3. Check age against country life expectancy
    4. Score requested terms, search longer periods if needed

    Raises:
        InvalidIdentityCodeError, InvalidLoanAmountError, InvalidLoanPeriodError,
        InvalidAgeError, NoValidLoanError: Business rejections
        DecisionFaultError: Unexpected internal failure
    """
    if today is None:
        today = date.today()

    try:
        segment = resolve_segment(identity_code)
        if segment is Segment.DEBT:
            raise NoValidLoanError("Loan denied due to existing debt.")

        validate_inputs(identity_code, loan_amount, loan_period)
        check_age(birth_date(identity_code), loan_period, country, today)

        return decide_loan(segment, loan_amount, loan_period)

    except (ArithmeticError, ValueError, IndexError) as e:
        raise DecisionFaultError(f"Decision evaluation failed: {e}") from e
