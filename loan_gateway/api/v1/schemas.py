"""Pydantic schemas for API request/response validation"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from loan_gateway.domain.models import (
    MAX_LOAN_AMOUNT,
    MAX_MONTHLY_INCOME,
    MAX_TERM_MONTHS,
    EvaluationResult,
    LoanApplication,
)


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case accepted on input"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SimulationRequest(CamelModel):
    """Request body for POST /v1/loans/simulate"""

    amount: float = Field(..., gt=0, le=MAX_LOAN_AMOUNT, allow_inf_nan=False, description="Requested principal")
    term_months: int = Field(..., gt=0, le=MAX_TERM_MONTHS, description="Number of monthly installments")
    monthly_income: float = Field(..., gt=0, le=MAX_MONTHLY_INCOME, allow_inf_nan=False, description="Declared monthly income")
    employment_status: str = Field(..., description="employed, self-employed, unemployed, ...")


class ApplicationRequest(SimulationRequest):
    """Request body for POST /v1/loans/apply"""

    identification: str = Field(..., min_length=1, description="National identification number (RUT)")
    full_name: str = Field(..., min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None


class ScoreBreakdownSchema(CamelModel):
    debt_load: int
    amount_income: int
    employment: int


class EvaluationResponse(CamelModel):
    """Response for POST /v1/loans/simulate"""

    score: int
    risk: str
    interest_rate_monthly: Optional[float] = None
    interest_rate_annual: Optional[float] = None
    rejected: bool
    monthly_payment: int
    breakdown: ScoreBreakdownSchema

    @classmethod
    def from_domain(cls, evaluation: EvaluationResult, **extra):
        return cls(
            score=evaluation.score,
            risk=evaluation.risk.value,
            interest_rate_monthly=evaluation.interest_rate_monthly,
            interest_rate_annual=evaluation.interest_rate_annual,
            rejected=evaluation.rejected,
            monthly_payment=evaluation.monthly_payment,
            breakdown=ScoreBreakdownSchema(
                debt_load=evaluation.breakdown.debt_load,
                amount_income=evaluation.breakdown.amount_income,
                employment=evaluation.breakdown.employment,
            ),
            **extra,
        )


class LoanApplicationSchema(CamelModel):
    """Persisted loan application"""

    id: str
    identification: str
    full_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    monthly_income: float
    employment_status: Optional[str] = None
    requested_amount: float
    requested_term_months: int
    score: int
    risk: str
    interest_rate_monthly: Optional[float] = None
    interest_rate_annual: Optional[float] = None
    monthly_payment: int
    rejected: bool
    signed: bool
    created_at: str

    @classmethod
    def from_domain(cls, application: LoanApplication) -> "LoanApplicationSchema":
        return cls(
            id=str(application.id),
            identification=application.identification,
            full_name=application.full_name,
            email=application.email,
            phone=application.phone,
            monthly_income=application.monthly_income,
            employment_status=application.employment_status,
            requested_amount=application.requested_amount,
            requested_term_months=application.requested_term_months,
            score=application.score,
            risk=application.risk.value,
            interest_rate_monthly=application.interest_rate_monthly,
            interest_rate_annual=application.interest_rate_annual,
            monthly_payment=application.monthly_payment,
            rejected=application.rejected,
            signed=application.signed,
            created_at=application.created_at.isoformat(),
        )


class ApplicationResponse(EvaluationResponse):
    """Response for POST /v1/loans/apply; application is null when rejected"""

    application: Optional[LoanApplicationSchema] = None
