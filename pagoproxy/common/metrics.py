"""Prometheus metric definitions for the gateway."""

from fastapi.responses import Response
from prometheus_client import Counter, Histogram, generate_latest


http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["service", "route", "method", "status_code"],
)
http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration seconds",
    ["service", "route", "method"],
)
conversion_results_total = Counter(
    "conversion_results_total",
    "PagoPA <-> controller conversion outcomes",
    ["service", "operation", "outcome"],
)
pagopa_call_seconds = Histogram(
    "pagopa_call_seconds",
    "PagoPA node RPC latency seconds",
    ["service", "operation"],
)
pagopa_call_failures_total = Counter(
    "pagopa_call_failures_total",
    "PagoPA node RPC transport failures",
    ["service", "operation"],
)
backend_app_relays_total = Counter(
    "backend_app_relays_total",
    "Requests relayed to the app backend",
    ["service", "kind", "status"],
)


def metrics_response() -> Response:
    """Expose all registered Prometheus metrics in text format."""

    return Response(content=generate_latest(), media_type="text/plain")
