"""
Request body dump middleware.

Every incoming request body is written to the log before the request
is handled, which makes it easy to inspect what LINE (or any other
client) actually posted to the webhook.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


class BodyDumpMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        body = await request.body()
        if body:
            logger.info(
                "%s %s body=%s",
                request.method,
                request.url.path,
                body.decode("utf-8", errors="replace"),
            )
        response: Response = await call_next(request)
        return response
