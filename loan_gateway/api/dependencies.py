"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from loan_gateway.domain.applications import ApplicationStore
from loan_gateway.infrastructure.database.repositories import LoanApplicationRepository
from loan_gateway.infrastructure.database.session import get_db


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_application_store(db: Session = Depends(get_db)) -> ApplicationStore:
    """Provide the loan application repository bound to the request session"""
    return LoanApplicationRepository(db)
