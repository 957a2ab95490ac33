"""Interceptor chain built on httpx event hooks.

An interceptor exposes two async hooks, ``on_request`` and ``on_response``.
``build_event_hooks`` turns a list of interceptors into the ``event_hooks``
mapping accepted by ``httpx.AsyncClient``; hooks run in registration order.
Subclasses override only the hooks they need.
"""

from __future__ import annotations

import logging
import time
import uuid
import weakref
from collections.abc import Sequence
from typing import Callable

import httpx

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class Interceptor:
    """Base interceptor; both hooks are no-ops."""

    async def on_request(self, request: httpx.Request) -> None:
        """Called before *request* is sent. May mutate its headers."""

    async def on_response(self, response: httpx.Response) -> None:
        """Called when *response* headers arrive, before the body is read.

        Raising here makes the request fail with that exception.
        """


def build_event_hooks(interceptors: Sequence[Interceptor]) -> dict[str, list]:
    """Return an ``event_hooks`` mapping for ``httpx.AsyncClient``."""
    return {
        "request": [interceptor.on_request for interceptor in interceptors],
        "response": [interceptor.on_response for interceptor in interceptors],
    }


class RequestIdInterceptor(Interceptor):
    """Tags each outgoing request with an ``X-Request-ID`` header.

    A caller-provided ID is kept; otherwise a new UUID4 is generated.
    """

    async def on_request(self, request: httpx.Request) -> None:
        if REQUEST_ID_HEADER not in request.headers:
            request.headers[REQUEST_ID_HEADER] = str(uuid.uuid4())


class LoggingInterceptor(Interceptor):
    """Logs every request and response with structured ``extra`` fields.

    Parameters
    ----------
    log_response_body:
        Also read and log the response body. Off by default since it forces
        the body to be buffered.
    level:
        Log level used for both entries.
    """

    def __init__(self, log_response_body: bool = False, level: int = logging.INFO) -> None:
        self._log_response_body = log_response_body
        self._level = level
        self._started: weakref.WeakKeyDictionary[httpx.Request, float] = (
            weakref.WeakKeyDictionary()
        )

    async def on_request(self, request: httpx.Request) -> None:
        self._started[request] = time.monotonic()
        logger.log(
            self._level,
            "--> %s %s",
            request.method,
            request.url,
            extra={
                "request_id": request.headers.get(REQUEST_ID_HEADER),
                "method": request.method,
                "url": str(request.url),
            },
        )

    async def on_response(self, response: httpx.Response) -> None:
        request = response.request
        started = self._started.pop(request, None)
        duration_ms = (
            round((time.monotonic() - started) * 1000, 2) if started is not None else None
        )
        extra: dict = {
            "request_id": request.headers.get(REQUEST_ID_HEADER),
            "method": request.method,
            "url": str(request.url),
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        }
        if self._log_response_body:
            await response.aread()
            extra["response_body"] = response.text

        logger.log(
            self._level,
            "<-- %d %s %s",
            response.status_code,
            request.method,
            request.url,
            extra=extra,
        )


class StatusValidationInterceptor(Interceptor):
    """Fails the request when the HTTP status code is rejected.

    Parameters
    ----------
    validate_status:
        Predicate on the status code; ``False`` raises
        ``httpx.HTTPStatusError`` from the transport call.
    """

    def __init__(self, validate_status: Callable[[int], bool]) -> None:
        self._validate_status = validate_status

    async def on_response(self, response: httpx.Response) -> None:
        if self._validate_status(response.status_code):
            return
        await response.aread()
        raise httpx.HTTPStatusError(
            f"Rejected status {response.status_code} for "
            f"{response.request.method} {response.request.url}",
            request=response.request,
            response=response,
        )
