# receipt_points/errors.py
"""
Error taxonomy for receipt scoring plus the FastAPI handler that renders it.

Every error carries the HTTP status it maps to and a human-readable detail,
so routes can simply let them propagate.
"""
from fastapi import Request
from fastapi.responses import JSONResponse

from .utils.logging import logger


class ReceiptError(Exception):
    status_code = 400
    detail = "Bad request"

    def __init__(self, detail: str | None = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class InvalidPayload(ReceiptError):
    detail = "Invalid JSON payload"


class PointsCalculationError(ReceiptError):
    """A receipt field needed for scoring could not be parsed."""
    cause = "invalid receipt"

    def __init__(self):
        super().__init__(f"Error calculating points: {self.cause}")


class InvalidTotal(PointsCalculationError):
    cause = "invalid total"


class InvalidItemPrice(PointsCalculationError):
    cause = "invalid item price"


class InvalidDate(PointsCalculationError):
    cause = "invalid purchaseDate"


class InvalidTime(PointsCalculationError):
    cause = "invalid purchaseTime"


class ReceiptNotFound(ReceiptError):
    status_code = 404
    detail = "Receipt not found"


def receipt_error_handler(request: Request, exc: ReceiptError):
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
