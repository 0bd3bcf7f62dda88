# app/middleware/access_log.py
import time
import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.core.logging import ACCESS_LOGGER_NAME

access_log = structlog.get_logger(ACCESS_LOGGER_NAME)


class AccessLogMiddleware(BaseHTTPMiddleware):
    """
    Writes one access-log entry per request:
      - method and path (with query string)
      - response status
      - response time (ms)
    """

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"

        access_log.info(
            "request",
            method=request.method,
            path=path,
            status_code=response.status_code,
            response_time_ms=round(elapsed_ms, 3),
        )
        return response
