import logging
import time
from fastapi import Request
from typing import Callable

logger = logging.getLogger("activity_tracker.requests")

def request_log_middleware(app):
    @app.middleware("http")
    async def log_request(request: Request, call_next: Callable):
        # health probes would drown out everything else
        if request.url.path == "/api/healthcheck":
            return await call_next(request)

        started = time.monotonic()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = int((time.monotonic() - started) * 1000)
            logger.info("%s %s -> %s (%d ms)", request.method, request.url.path, status_code, elapsed_ms)
