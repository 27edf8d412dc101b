"""GET /v1/applications/{application_id} - Fetch a stored loan application"""

import uuid
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from loan_gateway.api.v1.schemas import LoanApplicationSchema
from loan_gateway.api.dependencies import get_application_store, get_request_id
from loan_gateway.domain.applications import ApplicationStore
from loan_gateway.domain.exceptions import PersistenceError
from loan_gateway.infrastructure.observability.metrics import persistence_failure_counter

router = APIRouter()


@router.get("/applications/{application_id}", response_model=LoanApplicationSchema)
def get_application(
    application_id: str,
    request: Request,
    store: ApplicationStore = Depends(get_application_store),
):
    """
    Retrieve an accepted loan application by id.

    Rejected evaluations are never stored, so they are never found here.
    """
    try:
        application_uuid = uuid.UUID(application_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid application ID format")

    try:
        application = store.find_by_id(application_uuid)
    except PersistenceError as e:
        persistence_failure_counter.inc()
        logging.error(f"Persistence error: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=503, detail="Application store unavailable")

    if not application:
        raise HTTPException(status_code=404, detail="Application not found")

    return LoanApplicationSchema.from_domain(application)
