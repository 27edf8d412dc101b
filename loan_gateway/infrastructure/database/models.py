"""SQLAlchemy ORM models for persisted loan applications"""

import uuid
from sqlalchemy import Column, String, BigInteger, Boolean, Float, DateTime, Integer, Text, Uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class LoanApplicationRecord(Base):
    """Accepted loan application with its flattened evaluation"""

    __tablename__ = "loan_application"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    identification = Column(String(30), nullable=False, index=True)
    full_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    monthly_income = Column(Float, nullable=False)
    employment_status = Column(String(50), nullable=True)
    requested_amount = Column(Float, nullable=False)
    requested_term_months = Column(Integer, nullable=False)
    score = Column(Integer, nullable=True)
    risk = Column(Text, nullable=True)
    interest_rate_monthly = Column(Float, nullable=True)
    interest_rate_annual = Column(Float, nullable=True)
    monthly_payment = Column(BigInteger, nullable=True)
    rejected = Column(Boolean, nullable=False, default=False)
    signed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
