"""Prometheus metrics for monitoring scores, risk tiers and persistence health"""

from prometheus_client import Counter, Histogram

from loan_gateway.domain.models import EvaluationResult

# Evaluation metrics
evaluation_counter = Counter(
    "loan_evaluation_total",
    "Total loan evaluations",
    ["operation", "risk"],  # simulate | apply, LOW | MEDIUM | HIGH
)

score_histogram = Histogram(
    "loan_score",
    "Distribution of total credit scores",
    buckets=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)

# Persistence metrics
application_created_counter = Counter(
    "loan_application_created_total",
    "Accepted loan applications stored",
)

persistence_failure_counter = Counter(
    "loan_persistence_failures_total",
    "Failed application store operations",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_evaluation(operation: str, evaluation: EvaluationResult) -> None:
    """Record evaluation metrics for monitoring risk mix and score drift"""
    evaluation_counter.labels(operation=operation, risk=evaluation.risk.value).inc()
    score_histogram.observe(evaluation.score)
