"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from loan_gateway.config import settings
from loan_gateway.domain.models import EvaluationResult, LoanApplication


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_evaluation(
    request_id: str,
    operation: str,
    evaluation: EvaluationResult,
    duration_ms: float,
) -> None:
    """Log structured evaluation outcome for analysis (no applicant identity)"""
    logging.info(
        "Evaluation completed",
        extra={
            "request_id": request_id,
            "operation": operation,
            "step": "evaluation_complete",
            "score": evaluation.score,
            "risk": evaluation.risk.value,
            "outcome": "rejected" if evaluation.rejected else "accepted",
            "monthly_payment": evaluation.monthly_payment,
            "duration_ms": duration_ms,
        },
    )


def log_application_created(request_id: str, application: LoanApplication) -> None:
    """Log the id of a newly persisted application"""
    logging.info(
        "Loan application stored",
        extra={
            "request_id": request_id,
            "step": "application_created",
            "application_id": str(application.id),
            "risk": application.risk.value,
        },
    )
