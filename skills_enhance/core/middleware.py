"""Request tracing and CORS middleware."""

import logging
import time
import uuid

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("skills_enhance")

REQUEST_ID_HEADER = "X-Request-Id"
RESPONSE_TIME_HEADER = "X-Response-Time-Ms"


class RequestTraceMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id and log it against the acting user.

    An incoming ``X-Request-Id`` is reused as is. Refusals (4xx) log at
    WARNING, everything else at INFO.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        response: Response = await call_next(request)

        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[RESPONSE_TIME_HEADER] = str(elapsed_ms)

        store = getattr(request.app.state, "store", None)
        actor = store.current_user if store is not None else None
        level = logging.WARNING if 400 <= response.status_code < 500 else logging.INFO
        logger.log(
            level,
            "[%s] %s %s -> %s in %sms (actor=%s)",
            request_id[:8],
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            actor.id if actor else "-",
        )
        return response


def setup_middleware(app: FastAPI, cors_origins: list[str]) -> None:
    """Install CORS for the web client and request tracing."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER, RESPONSE_TIME_HEADER],
    )
    app.add_middleware(RequestTraceMiddleware)
