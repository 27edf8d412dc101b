"""POST /v1/loans/simulate and /v1/loans/apply - loan evaluation endpoints"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from loan_gateway.api.v1.schemas import (
    ApplicationRequest,
    ApplicationResponse,
    EvaluationResponse,
    LoanApplicationSchema,
    SimulationRequest,
)
from loan_gateway.api.dependencies import get_application_store, get_request_id
from loan_gateway.domain.applications import ApplicationStore, submit_application
from loan_gateway.domain.exceptions import InvalidLoanInputError, PersistenceError
from loan_gateway.domain.models import ApplicantDetails, LoanRequest
from loan_gateway.domain.scoring import evaluate_request
from loan_gateway.infrastructure.observability.metrics import (
    application_created_counter,
    persistence_failure_counter,
    record_evaluation,
)
from loan_gateway.infrastructure.observability.logging import log_application_created, log_evaluation

router = APIRouter()


def _to_loan_request(body: SimulationRequest) -> LoanRequest:
    """Build the domain request; InvalidLoanInputError is mapped to 400 by the app"""
    return LoanRequest(
        amount=body.amount,
        term_months=body.term_months,
        monthly_income=body.monthly_income,
        employment_status=body.employment_status,
    )


@router.post("/loans/simulate", response_model=EvaluationResponse)
def simulate_loan(request_body: SimulationRequest, request: Request):
    """
    Evaluate a loan offer without storing anything.

    A rejected (HIGH risk) evaluation is a normal 200 response with
    `rejected: true` and no rates.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    loan_request = _to_loan_request(request_body)
    try:
        evaluation = evaluate_request(loan_request)
    except InvalidLoanInputError:
        raise
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_evaluation("simulate", evaluation)
    log_evaluation(request_id, "simulate", evaluation, duration_ms)

    return EvaluationResponse.from_domain(evaluation)


@router.post("/loans/apply", response_model=ApplicationResponse)
def apply_loan(
    request_body: ApplicationRequest,
    request: Request,
    store: ApplicationStore = Depends(get_application_store),
):
    """
    Apply for a loan.

    Flow:
    1. Evaluate the request
    2. If rejected, return the evaluation only (nothing is stored)
    3. Otherwise store the application and return it with the evaluation
    """
    start_time = time.time()
    request_id = get_request_id(request)

    loan_request = _to_loan_request(request_body)
    applicant = ApplicantDetails(
        identification=request_body.identification,
        full_name=request_body.full_name,
        email=request_body.email,
        phone=request_body.phone,
    )

    try:
        submission = submit_application(applicant, loan_request, store)
    except PersistenceError as e:
        persistence_failure_counter.inc()
        logging.error(f"Persistence error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Application store unavailable")
    except InvalidLoanInputError:
        raise
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_evaluation("apply", submission.evaluation)
    log_evaluation(request_id, "apply", submission.evaluation, duration_ms)

    application = None
    if submission.application is not None:
        application_created_counter.inc()
        log_application_created(request_id, submission.application)
        application = LoanApplicationSchema.from_domain(submission.application)

    return ApplicationResponse.from_domain(submission.evaluation, application=application)
