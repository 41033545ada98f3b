"""Prometheus metrics for the EOSB calculator service.

Metrics are organized into two categories:

Business Metrics (for Product/HR):
- eosb_calculation_total: Calculations by outcome
- eosb_termination_type_total: Calculations by termination and contract type
- eosb_resignation_penalty_total: Resignation penalties by multiplier
- eosb_gratuity_amount: Distribution of gratuity amounts

Technical Metrics (for Engineering/SRE):
- eosb_calculation_latency_seconds: Calculation latency
- eosb_validation_failures_total: Rejected calculation requests
- eosb_http_requests_total: HTTP requests by endpoint/status
- eosb_http_request_latency_seconds: HTTP latency by endpoint
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics (Product/HR dashboards)
# =============================================================================

calculation_total = Counter(
    "eosb_calculation_total",
    "Total number of EOSB calculations",
    ["outcome"],  # eligible, ineligible, failed
)

termination_type_total = Counter(
    "eosb_termination_type_total",
    "EOSB calculations by termination type and contract type",
    ["termination_type", "contract_type"],
)

resignation_penalty_total = Counter(
    "eosb_resignation_penalty_total",
    "Resignations from unlimited contracts by penalty multiplier",
    ["multiplier"],  # 0, 1/3, 2/3, 1
)

gratuity_amount = Histogram(
    "eosb_gratuity_amount",
    "Gratuity amount of eligible calculations",
    buckets=[1_000, 5_000, 10_000, 25_000, 50_000, 100_000, 250_000, 500_000, 1_000_000],
)


# =============================================================================
# Technical Metrics (Engineering/SRE dashboards)
# =============================================================================

calculation_latency = Histogram(
    "eosb_calculation_latency_seconds",
    "EOSB calculation latency in seconds",
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
)

validation_failures = Counter(
    "eosb_validation_failures_total",
    "Total number of calculation requests rejected by validation",
)

http_requests_total = Counter(
    "eosb_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "eosb_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_calculation(
    is_eligible: bool,
    termination_type: str,
    is_unlimited_contract: bool,
    amount: float,
) -> None:
    """Record a completed calculation in metrics."""
    outcome = "eligible" if is_eligible else "ineligible"
    calculation_total.labels(outcome=outcome).inc()

    contract_type = "unlimited" if is_unlimited_contract else "limited"
    termination_type_total.labels(
        termination_type=termination_type,
        contract_type=contract_type,
    ).inc()

    if is_eligible:
        gratuity_amount.observe(amount)


def record_resignation_penalty(multiplier: float) -> None:
    """Record the penalty applied to a resignation from an unlimited contract."""
    resignation_penalty_total.labels(multiplier=_get_multiplier_label(multiplier)).inc()


def _get_multiplier_label(multiplier: float) -> str:
    """Map a penalty multiplier to a label."""
    if multiplier == 0:
        return "0"
    elif multiplier < 0.5:
        return "1/3"
    elif multiplier < 1:
        return "2/3"
    else:
        return "1"


def record_calculation_failure() -> None:
    """Record a calculation that raised."""
    calculation_total.labels(outcome="failed").inc()


def record_validation_failure() -> None:
    """Record a rejected calculation request."""
    validation_failures.inc()


@contextmanager
def track_calculation_latency() -> Generator[None, None, None]:
    """Context manager to track calculation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        calculation_latency.observe(duration)


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
