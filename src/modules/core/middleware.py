import uuid
from contextvars import ContextVar
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


class CorrelationIdMiddleware:
    """Binds a per-request logging context.

    The correlation ID comes from the X-Request-ID header, or a fresh
    UUID4 when the client sent none.  It is bound into structlog's
    contextvars together with the request method and path, so every
    event logged while the request is handled names the call it belongs
    to.  The ID is echoed back on the response.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        correlation_id_var.set(cid)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            correlation_id=cid,
            method=request.method,
            path=request.get_full_path(),
        )

        logger.info("request_started")
        response = self.get_response(request)
        logger.info("request_finished", status_code=response.status_code)

        response[REQUEST_ID_HEADER] = cid
        return response
