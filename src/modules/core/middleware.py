import uuid
from contextvars import ContextVar
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


class CorrelationIdMiddleware:
    """Tags every request with a correlation ID.

    Reads the X-Request-ID header, falling back to a fresh UUID4. The ID
    is bound into structlog's contextvars only while the request is being
    handled and is echoed back on the response. Both are reset afterwards
    so nothing leaks into work done outside a request on the same thread.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        token = correlation_id_var.set(cid)
        bound = structlog.contextvars.bind_contextvars(
            correlation_id=cid,
            method=request.method,
            path=request.get_full_path(),
        )

        try:
            logger.info("request.started")
            response = self.get_response(request)
            logger.info("request.finished", status_code=response.status_code)
        finally:
            structlog.contextvars.reset_contextvars(**bound)
            correlation_id_var.reset(token)

        response[REQUEST_ID_HEADER] = cid
        return response
