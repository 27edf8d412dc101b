"""Domain models - pure Python dataclasses representing business entities"""

import math
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from loan_gateway.domain.exceptions import InvalidLoanInputError


class EmploymentCategory(Enum):
    """Employment status bucket with its sub-score"""

    EMPLOYED = 15
    SELF_EMPLOYED = 8
    UNEMPLOYED = 0
    UNKNOWN = 10

    @property
    def score(self) -> int:
        return self.value


class RiskTier(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


# Upper bounds keep every derived value (installment, annual income) a finite float
MAX_LOAN_AMOUNT = 1_000_000_000_000
MAX_MONTHLY_INCOME = 1_000_000_000_000
MAX_TERM_MONTHS = 600

REQUEST_LIMITS = {
    "amount": MAX_LOAN_AMOUNT,
    "term_months": MAX_TERM_MONTHS,
    "monthly_income": MAX_MONTHLY_INCOME,
}


def _is_positive_number(value, upper: float) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value) and 0 < value <= upper
    except OverflowError:
        # int too large to convert to float
        return False


@dataclass(frozen=True)
class LoanRequest:
    """Requested loan terms plus the applicant's declared finances"""

    amount: float
    term_months: int
    monthly_income: float
    employment_status: Optional[str] = None

    def __post_init__(self) -> None:
        invalid = [
            name
            for name, upper in REQUEST_LIMITS.items()
            if not _is_positive_number(getattr(self, name), upper)
        ]
        if "term_months" not in invalid and not float(self.term_months).is_integer():
            invalid.append("term_months")
        if invalid:
            raise InvalidLoanInputError(
                f"{', '.join(invalid)} must be finite positive numbers within limits"
            )


@dataclass(frozen=True)
class ApplicantDetails:
    """Identity and contact data, already verified upstream (OCR, OTP)"""

    identification: str
    full_name: str
    email: Optional[str] = None
    phone: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.identification or not self.full_name:
            raise InvalidLoanInputError("identification and full_name are required")


@dataclass(frozen=True)
class ScoreBreakdown:
    """Sub-scores that add up to the total credit score"""

    debt_load: int
    amount_income: int
    employment: int

    @property
    def total(self) -> int:
        return self.debt_load + self.amount_income + self.employment


@dataclass(frozen=True)
class EvaluationResult:
    """Output of a single deterministic evaluation"""

    score: int
    breakdown: ScoreBreakdown
    monthly_payment: int
    risk: RiskTier
    interest_rate_monthly: Optional[float]
    interest_rate_annual: Optional[float]
    rejected: bool


@dataclass
class LoanApplication:
    """Accepted loan application as persisted by the application store"""

    identification: str
    full_name: str
    email: Optional[str]
    phone: Optional[str]
    monthly_income: float
    employment_status: Optional[str]
    requested_amount: float
    requested_term_months: int
    score: int
    risk: RiskTier
    interest_rate_monthly: Optional[float]
    interest_rate_annual: Optional[float]
    monthly_payment: int
    rejected: bool
    created_at: datetime
    signed: bool = False
    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass(frozen=True)
class Submission:
    """Result of submitting an application: evaluation, plus the record if accepted"""

    evaluation: EvaluationResult
    application: Optional[LoanApplication] = None
