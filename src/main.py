"""Products UI — payment pages backed by the products service."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request

from src.config import settings
from src.errors import MalformedResponseError, NotFoundError, UpstreamError
from src.routes.pay import router as pay_router
from src.schemas import HealthResponse
from src.views import render

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Products UI", version=settings.version)
app.include_router(pay_router)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return render(request, "error", {"message": "Page not found"}, status_code=404)


@app.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError):
    logger.error("Products service error on %s: %s", request.url.path, exc)
    return render(request, "error", {"message": "There is a problem with the service"}, status_code=500)


@app.exception_handler(MalformedResponseError)
async def malformed_response_handler(request: Request, exc: MalformedResponseError):
    logger.error("Unexpected products service response on %s: %s", request.url.path, exc)
    return render(request, "error", {"message": "There is a problem with the service"}, status_code=500)


@app.get("/health", response_model=HealthResponse)
def health_check():
    return HealthResponse(status="healthy", service=settings.service_name, version=settings.version)
