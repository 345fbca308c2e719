"""Prometheus metrics for the Multifinance service.

Metrics are organized into two categories:

Business Metrics (for Product/Finance):
- multifinance_loan_originations_total: Origination attempts by outcome
- multifinance_loan_principal_cents: Originated principal distribution
- multifinance_payments_total: Payments by type and outcome
- multifinance_payment_amount_cents: Paid amount distribution
- multifinance_loans_finished_total: Loans settled

Technical Metrics (for Engineering/SRE):
- multifinance_payment_latency_seconds: Price-and-commit latency
- multifinance_payment_rollbacks_total: Rolled back payment writes
- multifinance_operation_timeouts_total: Use cases that hit their deadline
- multifinance_http_requests_total: HTTP requests by endpoint/status
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics (Product/Finance dashboards)
# =============================================================================

loan_originations_total = Counter(
    "multifinance_loan_originations_total",
    "Total number of loan origination attempts",
    ["outcome"],  # created, or the rejection code
)

loan_principal_cents = Histogram(
    "multifinance_loan_principal_cents",
    "Principal of originated loans in cents",
    buckets=[50_000, 100_000, 500_000, 1_000_000, 5_000_000, 10_000_000, 50_000_000],
)

payments_total = Counter(
    "multifinance_payments_total",
    "Total number of loan payments",
    ["payment_type", "outcome"],  # outcome: committed, rejected, failed
)

payment_amount_cents = Histogram(
    "multifinance_payment_amount_cents",
    "Amount of committed payments in cents",
    ["payment_type"],
    buckets=[10_000, 50_000, 100_000, 500_000, 1_000_000, 5_000_000, 10_000_000],
)

loans_finished_total = Counter(
    "multifinance_loans_finished_total",
    "Total number of loans that reached the finish status",
)


# =============================================================================
# Technical Metrics (Engineering/SRE dashboards)
# =============================================================================

payment_latency = Histogram(
    "multifinance_payment_latency_seconds",
    "Payment processing latency in seconds (lock wait included)",
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

payment_rollbacks = Counter(
    "multifinance_payment_rollbacks_total",
    "Total number of payment writes rolled back",
)

operation_timeouts = Counter(
    "multifinance_operation_timeouts_total",
    "Total number of use cases aborted by their deadline",
    ["operation"],
)

http_requests_total = Counter(
    "multifinance_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "multifinance_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_loan_created(principal: int) -> None:
    """Record a successful origination."""
    loan_originations_total.labels(outcome="created").inc()
    loan_principal_cents.observe(principal)


def record_loan_rejected(reason: str) -> None:
    """Record a rejected origination by error code."""
    loan_originations_total.labels(outcome=reason.lower()).inc()


def record_payment_committed(payment_type: str, amount: int, finished: bool) -> None:
    """Record a committed payment."""
    payments_total.labels(payment_type=payment_type, outcome="committed").inc()
    payment_amount_cents.labels(payment_type=payment_type).observe(amount)
    if finished:
        loans_finished_total.inc()


def record_payment_rejected(payment_type: str) -> None:
    """Record a payment refused before any write."""
    payments_total.labels(payment_type=payment_type, outcome="rejected").inc()


def record_payment_failed(payment_type: str) -> None:
    """Record a payment whose writes were rolled back."""
    payments_total.labels(payment_type=payment_type, outcome="failed").inc()
    payment_rollbacks.inc()


def record_operation_timeout(operation: str) -> None:
    """Record a use case aborted by its deadline."""
    operation_timeouts.labels(operation=operation).inc()


@contextmanager
def track_payment_latency() -> Generator[None, None, None]:
    """Context manager to track payment latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        payment_latency.observe(duration)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
