"""Application-level exceptions and FastAPI exception handlers."""


import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)

class NotFoundError(AppException):
    def __init__(self, entity: str, entity_id: int | str | None = None):
        msg = f"{entity} not found" if entity_id is None else f"{entity} '{entity_id}' not found"
        super().__init__(msg, status_code=404, code="NOT_FOUND")

class CarNotFoundError(AppException):
    """Raised when a car id has no row in the vehicle store."""

    def __init__(self, car_id: int):
        self.car_id = car_id
        super().__init__(f"Car {car_id} not found", status_code=404, code="CAR_NOT_FOUND")

class PriceNotFoundError(AppException):
    """Raised by the price client when the pricing service knows no price for a vehicle."""

    def __init__(self, vehicle_id: int):
        self.vehicle_id = vehicle_id
        super().__init__(
            f"No price found for vehicle {vehicle_id}",
            status_code=404,
            code="PRICE_NOT_FOUND",
        )

class UpstreamServiceError(AppException):
    """Raised when a downstream HTTP service fails (transport error or 5xx)."""

    def __init__(self, service: str, detail: str):
        self.service = service
        super().__init__(f"{service} service error: {detail}", status_code=502, code="UPSTREAM_ERROR")

# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def _error_body(code: str, message: str) -> dict:
    return {"error": {"code": code, "message": message}}

def register_exception_handlers(app: FastAPI) -> None:
    """Attach all custom exception handlers to the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.code, exc.message),
        )

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content=_error_body("NOT_FOUND", "Resource not found"),
        )

    @app.exception_handler(500)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content=_error_body("INTERNAL_ERROR", "An unexpected error occurred"),
        )
