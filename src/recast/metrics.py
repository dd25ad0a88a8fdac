"""Prometheus metrics definitions for the Recast client."""

import time
from functools import wraps

from prometheus_client import Counter, Histogram

requests_total = Counter(
    "recast_requests_total",
    "Total analysis requests sent",
    ["kind", "outcome"],  # kind: text, file; outcome: success or error class
)

request_duration = Histogram(
    "recast_request_duration_seconds",
    "Time for one analysis round trip",
    ["kind"],
)

parse_errors = Counter(
    "recast_parse_errors_total",
    "Total response bodies rejected as malformed",
)


def track_request(kind: str):
    """Decorator for timing a transport call and counting its outcome.

    Args:
        kind: Label for the request type (text, file)

    Example:
        @track_request("text")
        def _post_text(self, payload):
            ...
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                requests_total.labels(kind=kind, outcome=type(e).__name__).inc()
                raise
            finally:
                request_duration.labels(kind=kind).observe(time.perf_counter() - start)
            requests_total.labels(kind=kind, outcome="success").inc()
            return result

        return wrapper

    return decorator
