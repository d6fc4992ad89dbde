"""API call hooks.

Every request made by ``PagerDutyApi`` runs inside ``invoke_with_hooks``
with a ``PagerDutyApiCallContext``. Pre hooks run before the request, post
hooks always run afterwards and error hooks run when the call raised.
The built-in hooks record Prometheus metrics, log the request and measure
its latency; callers can append their own hooks.
"""

import contextlib
import contextvars
import time
from collections.abc import Callable, Generator
from dataclasses import dataclass
from typing import Any, TypeVar

import structlog

from pagerduty_api.metrics import (
    pagerduty_request,
    pagerduty_request_duration,
    pagerduty_request_errors,
)

logger = structlog.get_logger(__name__)

# tuple stack to support nested calls
_latency_tracker: contextvars.ContextVar[tuple[float, ...]] = contextvars.ContextVar(
    f"{__name__}.latency_tracker", default=()
)


@dataclass(frozen=True)
class PagerDutyApiCallContext:
    """Context passed to API call hooks.

    Attributes:
        method: API method name (e.g., "incidents.list")
        verb: HTTP verb (e.g., "GET")
        subdomain: PagerDuty account subdomain
    """

    method: str
    verb: str
    subdomain: str


Hook = Callable[[PagerDutyApiCallContext], None]

T = TypeVar("T")


@contextlib.contextmanager
def invoke_with_hooks(
    context: T,
    pre_hooks: list[Callable[[T], None]] | None = None,
    post_hooks: list[Callable[[T], None]] | None = None,
    error_hooks: list[Callable[[T], None]] | None = None,
) -> Generator[None, Any, None]:
    for hook in pre_hooks or []:
        hook(context)
    try:
        yield
    except Exception:
        for hook in error_hooks or []:
            hook(context)
        raise
    finally:
        for hook in post_hooks or []:
            hook(context)


def metrics_hook(context: PagerDutyApiCallContext) -> None:
    pagerduty_request.labels(context.method, context.verb).inc()


def request_log_hook(context: PagerDutyApiCallContext) -> None:
    logger.debug(
        "API request",
        method=context.method,
        verb=context.verb,
        subdomain=context.subdomain,
    )


def latency_start_hook(_context: PagerDutyApiCallContext) -> None:
    _latency_tracker.set((*_latency_tracker.get(), time.perf_counter()))


def latency_end_hook(context: PagerDutyApiCallContext) -> None:
    stack = _latency_tracker.get()
    start_time = stack[-1]
    _latency_tracker.set(stack[:-1])
    duration = time.perf_counter() - start_time
    pagerduty_request_duration.labels(context.method, context.verb).observe(duration)


def error_metrics_hook(context: PagerDutyApiCallContext) -> None:
    pagerduty_request_errors.labels(context.method, context.verb).inc()
    logger.debug(
        "API request failed",
        method=context.method,
        verb=context.verb,
        subdomain=context.subdomain,
    )
