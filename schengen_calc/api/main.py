"""FastAPI 主应用: compliance endpoints over the service layer."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from schengen_calc.api.schemas import (
    HealthResponse,
    MemberResponse,
    MetricsResponse,
    SafeWindowRequest,
    SafeWindowResponse,
    StatusRequest,
    TripValidationRequest,
    ViolationsRequest,
    ViolationsResponse,
)
from schengen_calc.domain.exceptions import DomainError
from schengen_calc.domain.membership import resolve_country_code
from schengen_calc.domain.models import (
    ComplianceReport,
    ComplianceStatus,
    ErrorResponse,
    TripValidationResult,
)
from schengen_calc.observability.engine_metrics import get_engine_metrics
from schengen_calc.services import compliance_service

_api_logger = logging.getLogger("schengen-calc.api")

load_dotenv()  # 自动加载 .env 文件

app = FastAPI(
    title="schengen-calc",
    version="1.0.0",
    docs_url="/docs" if os.getenv("ENABLE_DOCS", "false").lower() == "true" else None,
    redoc_url=None,
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """注入安全响应头"""
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Cache-Control"] = "no-store"
        return response


app.add_middleware(SecurityHeadersMiddleware)


@app.exception_handler(DomainError)
async def _domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    _api_logger.info("rejected %s %s: %s", request.method, request.url.path, exc)
    body = ErrorResponse(code=exc.code, message=str(exc))
    return JSONResponse(status_code=400, content=body.model_dump())


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")


@app.get("/metrics", response_model=MetricsResponse)
def metrics():
    return MetricsResponse(**get_engine_metrics().snapshot())


@app.get("/members/{country}", response_model=MemberResponse)
def member(country: str):
    return MemberResponse(
        country=country,
        code=resolve_country_code(country),
        is_member=compliance_service.is_schengen_member(country),
    )


@app.post("/status", response_model=ComplianceStatus)
def status(req: StatusRequest):
    return compliance_service.compute_status(req.visits, req.reference_date)


@app.post("/report", response_model=ComplianceReport)
def report(req: StatusRequest):
    return compliance_service.compute_report(req.visits, req.reference_date)


@app.post("/violations", response_model=ViolationsResponse)
def violations(req: ViolationsRequest):
    periods = compliance_service.find_violations(
        req.visits,
        req.from_date,
        req.to_date,
        today=req.today,
    )
    return ViolationsResponse(violations=periods)


@app.post("/validate-trip", response_model=TripValidationResult)
def validate_trip(req: TripValidationRequest):
    return compliance_service.validate_future_trip(
        req.visits,
        req.entry_date,
        req.exit_date,
        req.country,
        today=req.today,
    )


@app.post("/safe-window", response_model=SafeWindowResponse)
def safe_window(req: SafeWindowRequest):
    window = compliance_service.find_safe_window(
        req.visits,
        req.duration_days,
        req.search_start,
        req.horizon_days,
        today=req.today,
    )
    return SafeWindowResponse(found=window is not None, window=window)
