"""Prometheus metrics for the Loan Decision Gateway.

Metrics are organized into two categories:

Business Metrics (for Product/Finance):
- loan_decision_total: Decisions by outcome
- loan_rejection_total: Rejections by reason
- loan_period_adjusted_total: Approvals granted on an adjusted period
- loan_approved_amount_euros: Distribution of approved amounts

Technical Metrics (for Engineering/SRE):
- loan_decision_latency_seconds: Decision calculation latency
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST

from loan_gateway.service.scoring import Decision


# =============================================================================
# Business Metrics (Product/Finance dashboards)
# =============================================================================

decision_total = Counter(
    "loan_decision_total",
    "Total number of loan decisions made",
    ["outcome"],  # approved, rejected
)

rejection_total = Counter(
    "loan_rejection_total",
    "Rejected loan requests by reason",
    ["reason"],
)

period_adjusted_total = Counter(
    "loan_period_adjusted_total",
    "Approved loans whose period was adjusted for eligibility",
)

approved_amount = Histogram(
    "loan_approved_amount_euros",
    "Approved loan amounts in euros",
    buckets=[2000, 3000, 4000, 5000, 6000, 7000, 8000, 9000, 10000],
)


# =============================================================================
# Technical Metrics (Engineering/SRE dashboards)
# =============================================================================

decision_latency = Histogram(
    "loan_decision_latency_seconds",
    "Decision calculation latency in seconds",
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_decision(decision: Decision) -> None:
    """Record a decision in metrics."""
    if decision.approved:
        decision_total.labels(outcome="approved").inc()
        approved_amount.observe(decision.loan_amount)
        if decision.period_adjusted:
            period_adjusted_total.inc()
    else:
        decision_total.labels(outcome="rejected").inc()
        rejection_total.labels(reason=decision.reason.value).inc()


@contextmanager
def track_decision_latency() -> Generator[None, None, None]:
    """Context manager to track decision latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        decision_latency.observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
