"""Prometheus metrics for monitoring decision outcomes and request latency"""

from prometheus_client import Counter, Histogram

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | invalid_identity_code | ... | no_valid_loan | internal_error
)

alternative_period_counter = Counter(
    "loan_alternative_period_total",
    "Approvals found by searching a longer period than requested",
)

approved_amount_histogram = Histogram(
    "loan_approved_amount_eur",
    "Approved loan amounts",
    buckets=[2000, 3000, 4000, 5000, 7500, 10000, 15000, 25000, 50000],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(outcome: str, approved_amount: int | None = None, from_alternative_search: bool = False) -> None:
    """Record decision metrics for monitoring approval rates and amount distribution"""
    decision_counter.labels(outcome=outcome).inc()

    if approved_amount is not None:
        approved_amount_histogram.observe(approved_amount)

    if from_alternative_search:
        alternative_period_counter.inc()
