# app/core/rate_limit.py
# Ограничение частоты запросов по адресу клиента (фиксированное окно).
import logging
import time

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Считает запросы к путям с префиксом path_prefix для каждого IP.
    После max_requests в течение окна window_ms отвечает 429 до конца окна.
    """

    def __init__(self, app, window_ms: int, max_requests: int, path_prefix: str = "/api/"):
        super().__init__(app)
        self.window = window_ms / 1000.0
        self.max_requests = max_requests
        self.path_prefix = path_prefix
        # ip -> (начало окна, число запросов)
        self._hits: dict[str, tuple[float, int]] = {}

    def _client_key(self, request: Request) -> str:
        return request.client.host if request.client else "unknown"

    def _prune(self, now: float) -> None:
        expired = [key for key, (start, _) in self._hits.items() if now - start >= self.window]
        for key in expired:
            del self._hits[key]

    async def dispatch(self, request: Request, call_next):
        if not request.url.path.startswith(self.path_prefix):
            return await call_next(request)

        now = time.monotonic()
        self._prune(now)
        key = self._client_key(request)
        start, count = self._hits.get(key, (now, 0))
        if count >= self.max_requests:
            retry_after = max(int(self.window - (now - start)), 1)
            logger.warning(f"Rate limit exceeded for {key}")
            return JSONResponse(
                status_code=429,
                content={"detail": "Too many requests from this IP, please try again later."},
                headers={"Retry-After": str(retry_after)},
            )
        self._hits[key] = (start, count + 1)
        return await call_next(request)
