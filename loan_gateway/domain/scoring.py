"""Credit scoring engine - core business logic for loan decisions"""

import math
from typing import Dict, Optional, Tuple

from loan_gateway.domain.amortization import calculate_monthly_payment
from loan_gateway.domain.exceptions import InvalidLoanInputError
from loan_gateway.domain.models import (
    EmploymentCategory,
    EvaluationResult,
    LoanRequest,
    RiskTier,
    ScoreBreakdown,
)
from loan_gateway.utils.rounding import round_half_up

# Score thresholds for the risk tiers (lower bound inclusive)
MIN_ACCEPTED_SCORE = 50
LOW_RISK_SCORE = 70

MEDIUM_RISK_MONTHLY_RATE = 0.02
LOW_RISK_MONTHLY_RATE = 0.015

EMPLOYMENT_LABELS: Dict[str, EmploymentCategory] = {
    "employed": EmploymentCategory.EMPLOYED,
    "empleado": EmploymentCategory.EMPLOYED,
    "empleado/a": EmploymentCategory.EMPLOYED,
    "self-employed": EmploymentCategory.SELF_EMPLOYED,
    "independiente": EmploymentCategory.SELF_EMPLOYED,
    "autonomo": EmploymentCategory.SELF_EMPLOYED,
    "autónomo": EmploymentCategory.SELF_EMPLOYED,
    "unemployed": EmploymentCategory.UNEMPLOYED,
    "cesante": EmploymentCategory.UNEMPLOYED,
    "desempleado": EmploymentCategory.UNEMPLOYED,
    "desempleado/a": EmploymentCategory.UNEMPLOYED,
}


def _ratio(numerator: float, denominator: float) -> float:
    """Plain division, with a zero denominator yielding NaN instead of raising"""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        return math.nan


def score_debt_load(monthly_payment: float, monthly_income: float) -> int:
    """
    Score the installment-to-income ratio (DTI), 0 to 50.

    Bands:
    - > 50% of income: 0
    - > 40%: 15
    - > 30%: 30
    - > 20%: 40
    - otherwise: 50

    A non-finite or non-positive ratio (e.g. zero income) scores 50.
    """
    ratio = _ratio(monthly_payment, monthly_income)
    if not math.isfinite(ratio) or ratio <= 0:
        return 50
    if ratio > 0.5:
        return 0
    if ratio > 0.4:
        return 15
    if ratio > 0.3:
        return 30
    if ratio > 0.2:
        return 40
    return 50


def score_amount_vs_income(amount: float, monthly_income: float) -> int:
    """
    Score the requested amount against annual income, 0 to 20.

    Bands: > 2x annual income: 0, > 1x: 5, > 0.5x: 10, otherwise 20.
    A non-finite or non-positive ratio scores 20.
    """
    ratio = _ratio(amount, monthly_income * 12)
    if not math.isfinite(ratio) or ratio <= 0:
        return 20
    if ratio > 2:
        return 0
    if ratio > 1:
        return 5
    if ratio > 0.5:
        return 10
    return 20


def classify_employment(employment_status: Optional[str]) -> EmploymentCategory:
    """Map a free-form status label (English or Spanish, any case) to a category"""
    status = (employment_status or "").lower()
    return EMPLOYMENT_LABELS.get(status, EmploymentCategory.UNKNOWN)


def score_employment(employment_status: Optional[str]) -> int:
    """Employment sub-score, 0 to 15; unknown labels get the neutral 10"""
    return classify_employment(employment_status).score


def compute_score(
    amount: float,
    term_months: int,
    monthly_income: float,
    employment_status: Optional[str],
) -> Tuple[int, ScoreBreakdown, float]:
    """
    Compute the total 0-100 score without applying any business threshold.

    Returns: (score, breakdown, unrounded monthly payment)
    """
    payment = calculate_monthly_payment(amount, term_months)
    breakdown = ScoreBreakdown(
        debt_load=score_debt_load(payment, monthly_income),
        amount_income=score_amount_vs_income(amount, monthly_income),
        employment=score_employment(employment_status),
    )
    return round_half_up(breakdown.total), breakdown, payment


def annual_rate(monthly_rate: float) -> float:
    """Effective annual rate from a monthly rate, compounded twelve times"""
    return (1 + monthly_rate) ** 12 - 1


def determine_risk_and_rate(score: int) -> Tuple[RiskTier, Optional[float], Optional[float], bool]:
    """
    Map a score to a risk tier and interest-rate offer.

    Score bands:
    - < 50:    HIGH, rejected, no rate offered
    - 50 - 69: MEDIUM, 2% monthly
    - 70+:     LOW, 1.5% monthly

    Returns: (risk, monthly_rate, annual_rate, rejected)
    """
    if score < MIN_ACCEPTED_SCORE:
        return RiskTier.HIGH, None, None, True
    elif score < LOW_RISK_SCORE:
        return RiskTier.MEDIUM, MEDIUM_RISK_MONTHLY_RATE, annual_rate(MEDIUM_RISK_MONTHLY_RATE), False
    else:
        return RiskTier.LOW, LOW_RISK_MONTHLY_RATE, annual_rate(LOW_RISK_MONTHLY_RATE), False


def evaluate_application(
    amount: float,
    term_months: int,
    monthly_income: float,
    employment_status: Optional[str],
) -> EvaluationResult:
    """
    Main entry point: score a loan request and derive the offer.

    Inputs are expected to be validated already (finite, strictly positive).
    Scoring uses the unrounded installment; the surfaced installment is
    rounded to a whole currency unit.

    Raises:
        InvalidLoanInputError: The installment is not a finite amount
    """
    score, breakdown, payment = compute_score(amount, term_months, monthly_income, employment_status)
    if not math.isfinite(payment):
        raise InvalidLoanInputError(f"Installment for amount {amount} over {term_months} months is not finite")
    risk, monthly_rate, yearly_rate, rejected = determine_risk_and_rate(score)

    return EvaluationResult(
        score=score,
        breakdown=breakdown,
        monthly_payment=round_half_up(payment),
        risk=risk,
        interest_rate_monthly=monthly_rate,
        interest_rate_annual=yearly_rate,
        rejected=rejected,
    )


def evaluate_request(request: LoanRequest) -> EvaluationResult:
    """Evaluate a validated LoanRequest"""
    return evaluate_application(
        request.amount,
        request.term_months,
        request.monthly_income,
        request.employment_status,
    )
