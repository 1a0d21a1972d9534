"""Optional OpenTelemetry spans for queries executed by this package.

Tracing follows ``InternationalizeSettings.trace_queries`` when it is set.
Otherwise spans are emitted whenever an OTLP traces endpoint is configured
and the OpenTelemetry SDK is not disabled.
"""

import hashlib
import os
from typing import Callable, Optional, TypeVar

from internationalize.config import get_settings

T = TypeVar("T")

OTLP_ENDPOINT_VARS = ("OTEL_EXPORTER_OTLP_TRACES_ENDPOINT", "OTEL_EXPORTER_OTLP_ENDPOINT")


def otlp_endpoint() -> Optional[str]:
    """Return the configured OTLP traces endpoint, if any."""
    if os.environ.get("OTEL_SDK_DISABLED", "").strip().lower() == "true":
        return None
    for var in OTLP_ENDPOINT_VARS:
        endpoint = os.environ.get(var, "").strip()
        if endpoint:
            return endpoint
    return None


def trace_enabled() -> bool:
    """Return True when executed queries should be wrapped in spans."""
    explicit = get_settings().trace_queries
    if explicit is not None:
        return explicit
    return otlp_endpoint() is not None


def _hash_sql(sql: str) -> str:
    return hashlib.sha256(sql.encode("utf-8")).hexdigest()


def trace_query_operation(
    name: str,
    provider: str,
    sql: Optional[str],
    operation: Callable[[], T],
) -> T:
    """Run ``operation`` inside an OTEL span when tracing is enabled."""
    if not trace_enabled():
        return operation()

    from opentelemetry import trace

    tracer = trace.get_tracer("internationalize")
    with tracer.start_as_current_span(name) as span:
        span.set_attribute("db.provider", provider)
        if sql:
            span.set_attribute("db.statement_hash", _hash_sql(sql))
        try:
            result = operation()
            span.set_attribute("db.status", "ok")
            return result
        except Exception:
            span.set_attribute("db.status", "error")
            raise
