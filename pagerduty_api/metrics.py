"""Prometheus metrics of the PagerDuty API client."""

from prometheus_client import Counter, Histogram

DEFAULT_BUCKETS_EXTERNAL_API = (0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0)

pagerduty_request = Counter(
    name="pagerduty_api_requests_total",
    documentation="Total number of PagerDuty API requests",
    labelnames=["method", "verb"],
)

pagerduty_request_duration = Histogram(
    name="pagerduty_api_request_duration_seconds",
    documentation="PagerDuty API request duration in seconds",
    labelnames=["method", "verb"],
    buckets=DEFAULT_BUCKETS_EXTERNAL_API,
)

pagerduty_request_errors = Counter(
    name="pagerduty_api_request_errors_total",
    documentation="Number of PagerDuty API requests that raised an error",
    labelnames=["method", "verb"],
)
