"""Centralized API call handling.

``handle_api_call`` runs a request closure that yields an ``ApiResponse``,
asks the configured resolver whether its status means success, and returns
the payload or ``None``:

- success: the envelope's ``data`` (which may itself be ``None``)
- business failure: ``on_error(message)`` is called, ``None`` is returned
- operational failure (the closure raised): ``on_error`` receives a fixed
  generic message and the original exception is re-raised

Two entry points share this logic. ``ApiWrapper`` takes its ``ApiConfig``
explicitly. The module-level ``handle_api_call`` uses the process-wide
wrapper set by ``initialize()`` and raises ``ConfigurationMissingError`` if
there is none.

Example::

    initialize(ApiConfig(is_success=lambda status: status is True or status == 200))

    user = await handle_api_call(
        lambda: fetch_user(user_id),
        on_error=lambda message: print(message),
    )
"""

from __future__ import annotations

import inspect
import logging
from typing import Awaitable, Callable, Optional, TypeVar

from api_kit.config.api_config import ApiConfig
from api_kit.errors import ConfigurationMissingError
from api_kit.models.responses import ApiResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_ERROR_MESSAGE = "Something went wrong"

RequestFactory = Callable[[], Awaitable[ApiResponse[T]]]
ErrorCallback = Callable[[str], object]


async def _notify(on_error: Optional[ErrorCallback], message: str) -> None:
    if on_error is None:
        return
    result = on_error(message)
    if inspect.isawaitable(result):
        await result


class ApiWrapper:
    """Applies an ``ApiConfig`` to request closures.

    Holds no state besides the read-only config, so a single instance can
    serve any number of concurrent calls.
    """

    def __init__(self, config: ApiConfig) -> None:
        self._config = config

    @property
    def config(self) -> ApiConfig:
        return self._config

    def is_success(self, status: object) -> bool:
        """Delegate success evaluation to the configured resolver."""
        return self._config.is_success(status)

    async def handle_api_call(
        self,
        request: RequestFactory[T],
        on_error: Optional[ErrorCallback] = None,
    ) -> T | None:
        """Execute *request* and validate its envelope.

        Parameters
        ----------
        request:
            Zero-argument callable returning an awaitable ``ApiResponse[T]``.
        on_error:
            Optional callback receiving a human-readable message when the
            call fails. Called at most once per call and never on success.
            May be sync or async.

        Returns
        -------
        T | None
            The envelope's data if the resolver accepts its status, else None.

        Raises
        ------
        Exception
            Whatever *request* or the resolver raised, after ``on_error`` was
            notified with ``DEFAULT_ERROR_MESSAGE``.
        """
        try:
            response = await request()
            accepted = self.is_success(response.status)
        except Exception as exc:
            # Only the exception type is logged; the callback and log never
            # carry the original message.
            logger.error(
                "API call failed with %s",
                type(exc).__name__,
                extra={"error_type": type(exc).__name__},
            )
            await _notify(on_error, DEFAULT_ERROR_MESSAGE)
            raise

        if accepted:
            return response.data

        # An empty message is still a message
        message = response.message if response.message is not None else DEFAULT_ERROR_MESSAGE
        logger.warning("API call rejected with status %r: %s", response.status, message)
        await _notify(on_error, message)
        return None


# ---------------------------------------------------------------------------
# Process-wide wrapper
# ---------------------------------------------------------------------------

_default_wrapper: ApiWrapper | None = None


def initialize(config: ApiConfig) -> ApiWrapper:
    """Install *config* as the process-wide configuration.

    Must be called (typically at startup) before the module-level
    ``handle_api_call``. Calling it again replaces the previous config.
    """
    global _default_wrapper
    _default_wrapper = ApiWrapper(config)
    logger.debug("API wrapper initialized")
    return _default_wrapper


def is_initialized() -> bool:
    return _default_wrapper is not None


def reset() -> None:
    """Forget the process-wide configuration."""
    global _default_wrapper
    _default_wrapper = None


def get_wrapper() -> ApiWrapper:
    """Return the process-wide wrapper.

    Raises
    ------
    ConfigurationMissingError
        If ``initialize()`` has not been called.
    """
    if _default_wrapper is None:
        raise ConfigurationMissingError("API wrapper not initialized; call initialize() first")
    return _default_wrapper


async def handle_api_call(
    request: RequestFactory[T],
    on_error: Optional[ErrorCallback] = None,
) -> T | None:
    """``ApiWrapper.handle_api_call`` on the process-wide wrapper.

    Raises ``ConfigurationMissingError`` before running *request* if the
    wrapper was never initialized; *on_error* is not called in that case.
    """
    return await get_wrapper().handle_api_call(request, on_error=on_error)
