import logging
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)

class TimingMiddleware(BaseHTTPMiddleware):
    """Adds X-Latency-Ms to every response and logs each request at DEBUG."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        request.state.started_at = start
        response = await call_next(request)
        latency_ms = int((time.perf_counter() - start) * 1000)
        response.headers["X-Latency-Ms"] = str(latency_ms)
        logger.debug("%s %s -> %s (%d ms)", request.method, request.url.path, response.status_code, latency_ms)
        return response
