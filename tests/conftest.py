"""Pytest fixtures for testing"""

import uuid
import pytest
from typing import Generator, List, Optional
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from loan_gateway.api.main import create_app
from loan_gateway.infrastructure.database.models import Base
from loan_gateway.infrastructure.database.session import get_db
from loan_gateway.domain.exceptions import PersistenceError
from loan_gateway.domain.models import ApplicantDetails, LoanApplication, LoanRequest


# Test database: one shared in-memory connection across the TestClient threads
TEST_DATABASE_URL = "sqlite://"
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class InMemoryApplicationStore:
    """Application store double that records every insert"""

    def __init__(self):
        self.created: List[LoanApplication] = []

    def create_application(self, application: LoanApplication) -> LoanApplication:
        self.created.append(application)
        return application

    def find_by_id(self, application_id: uuid.UUID) -> Optional[LoanApplication]:
        return next((a for a in self.created if a.id == application_id), None)


class UnavailableApplicationStore:
    """Application store double whose database is down"""

    def create_application(self, application: LoanApplication) -> LoanApplication:
        raise PersistenceError("connection refused")

    def find_by_id(self, application_id: uuid.UUID) -> Optional[LoanApplication]:
        raise PersistenceError("connection refused")


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def store() -> InMemoryApplicationStore:
    return InMemoryApplicationStore()


@pytest.fixture
def unavailable_store() -> UnavailableApplicationStore:
    return UnavailableApplicationStore()


@pytest.fixture
def applicant() -> ApplicantDetails:
    return ApplicantDetails(
        identification="12345678-9",
        full_name="Juan Pérez",
        email="juan@example.com",
        phone="+56912345678",
    )


@pytest.fixture
def good_request() -> LoanRequest:
    """Small loan against a high income, scores 85 (LOW risk)"""
    return LoanRequest(amount=50000, term_months=60, monthly_income=1200000, employment_status="employed")


@pytest.fixture
def bad_request() -> LoanRequest:
    """Loan far above what the income can carry, scores 10 (HIGH risk)"""
    return LoanRequest(amount=4000000, term_months=12, monthly_income=400000, employment_status="unemployed")


@pytest.fixture
def application_payload() -> dict:
    """Request body for POST /v1/loans/apply"""
    return {
        "identification": "12345678-9",
        "fullName": "Juan Pérez",
        "email": "juan@example.com",
        "phone": "+56912345678",
        "monthlyIncome": 1200000,
        "employmentStatus": "employed",
        "amount": 50000,
        "termMonths": 60,
    }
