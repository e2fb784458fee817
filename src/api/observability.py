import json
import logging
import os
import time
from contextvars import ContextVar
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Awaitable, Callable, Mapping
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from prometheus_fastapi_instrumentator import Instrumentator

from src.api.routers.payment_instructions_config import metrics_enabled, service_name

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")
request_id_var: ContextVar[str] = ContextVar("request_id", default="")
trace_id_var: ContextVar[str] = ContextVar("trace_id", default="")

_CONTEXT_FIELDS = (
    ("correlation_id", correlation_id_var),
    ("request_id", request_id_var),
    ("trace_id", trace_id_var),
)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "service": service_name(),
            "environment": os.getenv("ENVIRONMENT", "local"),
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, var in _CONTEXT_FIELDS:
            payload[key] = var.get() or None
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        extra_fields = getattr(record, "extra_fields", None)
        if isinstance(extra_fields, dict):
            payload.update(extra_fields)
        return json.dumps({k: v for k, v in payload.items() if v is not None}, default=str)


@dataclass(frozen=True)
class RequestIds:
    correlation_id: str
    request_id: str
    trace_id: str

    @property
    def traceparent(self) -> str:
        return f"00-{self.trace_id}-0000000000000001-01"


def _trace_id_from_traceparent(traceparent: str) -> str | None:
    parts = traceparent.split("-")
    if len(parts) >= 4 and len(parts[1]) == 32:
        return parts[1]
    return None


def resolve_request_ids(headers: Mapping[str, str]) -> RequestIds:
    """Inbound ids win; anything missing or malformed is generated."""
    return RequestIds(
        correlation_id=headers.get("X-Correlation-Id") or f"corr_{uuid4().hex[:12]}",
        request_id=headers.get("X-Request-Id") or f"req_{uuid4().hex[:12]}",
        trace_id=_trace_id_from_traceparent(headers.get("traceparent", "")) or uuid4().hex,
    )


def configure_json_logging() -> None:
    root_logger = logging.getLogger()
    if root_logger.hasHandlers():
        root_logger.handlers.clear()
    root_logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root_logger.addHandler(handler)


def setup_observability(app: FastAPI) -> None:
    configure_json_logging()

    if metrics_enabled():
        Instrumentator().instrument(app).expose(app)

    access_logger = logging.getLogger("http.access")

    @app.middleware("http")
    async def _request_observability_middleware(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        started = time.perf_counter()
        ids = resolve_request_ids(request.headers)
        tokens = [
            (correlation_id_var, correlation_id_var.set(ids.correlation_id)),
            (request_id_var, request_id_var.set(ids.request_id)),
            (trace_id_var, trace_id_var.set(ids.trace_id)),
        ]
        status_code = None
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
        finally:
            access_logger.info(
                "request.completed",
                extra={
                    "extra_fields": {
                        "http_method": request.method,
                        "endpoint": request.url.path,
                        "http_status": status_code,
                        "latency_ms": round((time.perf_counter() - started) * 1000, 2),
                    }
                },
            )
            for var, token in reversed(tokens):
                var.reset(token)

        response.headers["X-Correlation-Id"] = ids.correlation_id
        response.headers["X-Request-Id"] = ids.request_id
        response.headers["X-Trace-Id"] = ids.trace_id
        response.headers["traceparent"] = ids.traceparent
        return response
