from typing import Any, Dict, List

import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = structlog.get_logger(__name__)

FIELD_MESSAGES = {
    "productName": "Product name is required",
    "productDescription": "Product description is required",
    "status": "Invalid status",
    "stock": "Stock must be a non-negative integer",
    "price": "Price must be a non-negative number",
    "discount_type": "Discount type must be valid value",
}

DEFAULT_MESSAGE = "Invalid value"


def format_validation_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    """Flatten pydantic errors into one entry per offending field."""
    errors = []
    for err in exc.errors():
        loc = err.get("loc", ())
        location = loc[0] if loc else "body"
        field = loc[-1] if len(loc) > 1 else None
        entry = {
            "type": "field",
            "location": location,
            "path": ".".join(str(part) for part in loc[1:]),
            "msg": FIELD_MESSAGES.get(field, DEFAULT_MESSAGE),
        }
        if err.get("type") != "missing":
            entry["value"] = err.get("input")
        errors.append(entry)
    return errors


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = format_validation_errors(exc)
    logger.info("validation_failed", method=request.method, path=request.url.path, errors=len(errors))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({"errors": errors}),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("unhandled_error", method=request.method, path=request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error."},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
