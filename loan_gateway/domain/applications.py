"""Application lifecycle: evaluate, then persist only accepted applications"""

import uuid
from datetime import datetime, timezone
from typing import Optional, Protocol

from loan_gateway.domain.models import (
    ApplicantDetails,
    EvaluationResult,
    LoanApplication,
    LoanRequest,
    Submission,
)
from loan_gateway.domain.scoring import evaluate_request


class ApplicationStore(Protocol):
    """Persistence collaborator for loan applications"""

    def create_application(self, application: LoanApplication) -> LoanApplication:
        ...

    def find_by_id(self, application_id: uuid.UUID) -> Optional[LoanApplication]:
        ...


def build_application(
    applicant: ApplicantDetails,
    request: LoanRequest,
    evaluation: EvaluationResult,
) -> LoanApplication:
    """Flatten applicant, request and evaluation into a new, unsigned record"""
    return LoanApplication(
        id=uuid.uuid4(),
        identification=applicant.identification,
        full_name=applicant.full_name,
        email=applicant.email,
        phone=applicant.phone,
        monthly_income=request.monthly_income,
        employment_status=request.employment_status,
        requested_amount=request.amount,
        requested_term_months=request.term_months,
        score=evaluation.score,
        risk=evaluation.risk,
        interest_rate_monthly=evaluation.interest_rate_monthly,
        interest_rate_annual=evaluation.interest_rate_annual,
        monthly_payment=evaluation.monthly_payment,
        rejected=evaluation.rejected,
        signed=False,
        created_at=datetime.now(timezone.utc),
    )


def submit_application(
    applicant: ApplicantDetails,
    request: LoanRequest,
    store: ApplicationStore,
) -> Submission:
    """
    Evaluate a loan application and persist it if accepted.

    Flow:
    1. Evaluate the request
    2. Rejected (HIGH risk): return the evaluation, nothing is stored
    3. Accepted: store one new record and return it with the evaluation

    Raises:
        PersistenceError: The store failed; propagated unchanged, no retry
    """
    evaluation = evaluate_request(request)
    if evaluation.rejected:
        return Submission(evaluation=evaluation)

    application = store.create_application(build_application(applicant, request, evaluation))
    return Submission(evaluation=evaluation, application=application)
