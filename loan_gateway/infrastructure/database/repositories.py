"""Data access layer for loan applications"""

import logging
import uuid
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from loan_gateway.infrastructure.database.models import LoanApplicationRecord
from loan_gateway.domain.exceptions import PersistenceError
from loan_gateway.domain.models import LoanApplication, RiskTier

logger = logging.getLogger(__name__)


def _to_domain(record: LoanApplicationRecord) -> LoanApplication:
    return LoanApplication(
        id=record.id,
        identification=record.identification,
        full_name=record.full_name,
        email=record.email,
        phone=record.phone,
        monthly_income=record.monthly_income,
        employment_status=record.employment_status,
        requested_amount=record.requested_amount,
        requested_term_months=record.requested_term_months,
        score=record.score,
        risk=RiskTier(record.risk),
        interest_rate_monthly=record.interest_rate_monthly,
        interest_rate_annual=record.interest_rate_annual,
        monthly_payment=record.monthly_payment,
        rejected=record.rejected,
        signed=record.signed,
        created_at=record.created_at,
    )


class LoanApplicationRepository:
    """Repository for loan applications"""

    def __init__(self, db: Session):
        self.db = db

    def create_application(self, application: LoanApplication) -> LoanApplication:
        """
        Insert one application and commit it.

        The insert is its own transaction: on any database error it is rolled
        back, so either the full record exists or nothing does.

        Raises:
            PersistenceError: Database unreachable, timed out or rejected the row
        """
        db_application = LoanApplicationRecord(
            id=application.id,
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
            created_at=application.created_at,
        )
        try:
            self.db.add(db_application)
            self.db.commit()
            self.db.refresh(db_application)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Could not store loan application: {e}") from e

        logger.debug("Stored loan application", extra={"application_id": str(db_application.id)})
        return _to_domain(db_application)

    def find_by_id(self, application_id: uuid.UUID) -> Optional[LoanApplication]:
        """Fetch an application by id, None when it does not exist"""
        try:
            record = (
                self.db.query(LoanApplicationRecord)
                .filter(LoanApplicationRecord.id == application_id)
                .first()
            )
        except SQLAlchemyError as e:
            raise PersistenceError(f"Could not read loan application: {e}") from e

        return _to_domain(record) if record else None
