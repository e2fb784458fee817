"""
FILE: src/api/main.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.observability import setup_observability
from src.api.routers.health import router as health_router
from src.api.routers.payment_instructions import router as payment_instructions_router
from src.api.runtime_profile import validate_runtime_profile_guardrails

# Starlette renamed the 422 constant; keep working on both sides of the rename.
HTTP_422_UNPROCESSABLE = getattr(
    status, "HTTP_422_UNPROCESSABLE_CONTENT", status.HTTP_422_UNPROCESSABLE_ENTITY
)


@asynccontextmanager
async def _app_lifespan(_app: FastAPI):
    validate_runtime_profile_guardrails()
    yield


app = FastAPI(
    title="Payment Instructions API",
    version="0.1.0",
    description=(
        "Deterministic payment instruction settlement service.\n\n"
        "Business outcomes are returned in the response body status: "
        "`successful`, `pending`, or `failed`, with a stable `status_code`."
    ),
    openapi_tags=[
        {
            "name": "Payment Instructions",
            "description": "Parse, validate and settle single-line transfer instructions.",
        },
        {"name": "Health", "description": "Liveness and readiness probes."},
    ],
    lifespan=_app_lifespan,
)

setup_observability(app)
logger = logging.getLogger(__name__)

app.include_router(health_router)
app.include_router(payment_instructions_router)


@app.exception_handler(RequestValidationError)
async def request_validation_to_problem_details(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=HTTP_422_UNPROCESSABLE,
        media_type="application/problem+json",
        content={
            "type": "about:blank",
            "title": "Unprocessable Content",
            "status": HTTP_422_UNPROCESSABLE,
            "detail": "Request body does not match the payment instruction schema.",
            "instance": str(request.url.path),
            "errors": jsonable_encoder(exc.errors()),
        },
    )


@app.exception_handler(Exception)
async def unhandled_exception_to_problem_details(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception while serving request", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        media_type="application/problem+json",
        content={
            "type": "about:blank",
            "title": "Internal Server Error",
            "status": 500,
            "detail": "An unexpected error occurred.",
            "instance": str(request.url.path),
        },
    )
