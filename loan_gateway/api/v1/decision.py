"""POST /v1/loan/decision - loan eligibility decision endpoint"""

import time
import logging
from datetime import date
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from loan_gateway.api.v1.schemas import DecisionRequest, DecisionResponse
from loan_gateway.api.dependencies import get_request_id, get_today
from loan_gateway.domain.scoring import evaluate
from loan_gateway.domain.exceptions import (
    DecisionFaultError,
    InvalidAgeError,
    InvalidIdentityCodeError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    NoValidLoanError,
)
from loan_gateway.infrastructure.observability.metrics import record_decision
from loan_gateway.infrastructure.observability.logging import log_decision

router = APIRouter()

# Business rejection -> (HTTP status, metrics outcome)
ERROR_RESPONSES = {
    InvalidIdentityCodeError: (400, "invalid_identity_code"),
    InvalidLoanAmountError: (400, "invalid_loan_amount"),
    InvalidLoanPeriodError: (400, "invalid_loan_period"),
    InvalidAgeError: (400, "invalid_age"),
    NoValidLoanError: (404, "no_valid_loan"),
}

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


@router.post("/loan/decision", response_model=DecisionResponse)
def create_decision(
    request_body: DecisionRequest,
    request: Request,
    today: date = Depends(get_today),
):
    """
    Calculate the approved loan amount and period for a customer.

    Flow:
    1. Evaluate personal code, amount, period and country
    2. Map business rejections to 400 (invalid input/age) or 404 (no valid loan)
    3. Record metrics and logs
    4. Return decision response
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        decision = evaluate(
            request_body.identity_code,
            request_body.loan_amount,
            request_body.loan_period,
            request_body.country,
            today=today,
        )

    except (
        InvalidIdentityCodeError,
        InvalidLoanAmountError,
        InvalidLoanPeriodError,
        InvalidAgeError,
        NoValidLoanError,
    ) as e:
        status_code, outcome = ERROR_RESPONSES[type(e)]
        record_decision(outcome)
        duration_ms = (time.time() - start_time) * 1000
        log_decision(request_id, request_body.identity_code, outcome, duration_ms, level=logging.WARNING)
        return JSONResponse(
            status_code=status_code,
            content=DecisionResponse(error_message=str(e)).model_dump(),
        )

    except Exception as e:
        # DecisionFaultError and anything unanticipated end up here
        record_decision("internal_error")
        duration_ms = (time.time() - start_time) * 1000
        log_decision(request_id, request_body.identity_code, "internal_error", duration_ms, level=logging.ERROR)
        kind = "Decision fault" if isinstance(e, DecisionFaultError) else "Unexpected error"
        logging.error(f"{kind}: {e}", exc_info=True, extra={"request_id": request_id})
        return JSONResponse(
            status_code=500,
            content=DecisionResponse(error_message=INTERNAL_ERROR_MESSAGE).model_dump(),
        )

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_decision("approved", decision.approved_amount, decision.from_alternative_search)
    log_decision(
        request_id,
        request_body.identity_code,
        "approved",
        duration_ms,
        approved_amount=decision.approved_amount,
        approved_period=decision.approved_period,
    )

    return DecisionResponse(
        approved_amount=decision.approved_amount,
        approved_period=decision.approved_period,
    )
