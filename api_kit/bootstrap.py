"""Central initializer for api_kit.

``initialize`` creates and configures the ``httpx.AsyncClient``, wraps it in
an ``ApiService``, installs the process-wide ``ApiWrapper`` and keeps both as
process-wide state. Call it once at startup; calling it again replaces the
state (the last call wins). The replaced client is not closed: ``await
shutdown()`` before re-initializing.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Callable

import httpx

from api_kit import wrapper as _wrapper
from api_kit.config.api_config import ApiConfig
from api_kit.config.settings import ApiKitSettings
from api_kit.errors import ConfigurationMissingError
from api_kit.logging_config import configure_logging
from api_kit.transport.interceptors import (
    Interceptor,
    StatusValidationInterceptor,
    build_event_hooks,
)
from api_kit.transport.service import ApiService
from api_kit.wrapper import ApiWrapper

logger = logging.getLogger(__name__)

# Process-wide state, populated by initialize()
_state: dict = {}


@dataclass(frozen=True)
class ApiKit:
    """The ready-to-use transport and dispatcher pair."""

    api: ApiService
    wrapper: ApiWrapper


def initialize(
    base_url: str,
    api_config: ApiConfig,
    *,
    interceptors: Sequence[Interceptor] | None = None,
    connect_timeout: float | None = 30.0,
    receive_timeout: float | None = 30.0,
    send_timeout: float | None = None,
    headers: Mapping[str, str] | None = None,
    query_params: Mapping[str, Any] | None = None,
    follow_redirects: bool = True,
    max_redirects: int = 20,
    validate_status: Callable[[int], bool] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ApiKit:
    """Initialize api_kit. Must be called before any API call.

    Parameters
    ----------
    base_url:
        Base URL every relative request path is resolved against.
    api_config:
        Success resolution config installed on the process-wide wrapper.
    interceptors:
        Request/response interceptors, run in the given order.
    connect_timeout, receive_timeout, send_timeout:
        Transport timeouts in seconds; ``None`` disables a limit.
    headers, query_params:
        Defaults sent with every request.
    follow_redirects, max_redirects:
        Redirect policy, passed through to httpx.
    validate_status:
        Optional predicate on the HTTP status code; a rejected code makes
        the transport call raise ``httpx.HTTPStatusError``. Runs after the
        given interceptors.
    transport:
        Optional httpx transport (e.g. ``httpx.MockTransport`` in tests).
    """
    chain: list[Interceptor] = list(interceptors or [])
    if validate_status is not None:
        chain.append(StatusValidationInterceptor(validate_status))

    client = httpx.AsyncClient(
        base_url=base_url,
        headers=dict(headers) if headers is not None else None,
        params=dict(query_params) if query_params is not None else None,
        timeout=httpx.Timeout(
            None,
            connect=connect_timeout,
            read=receive_timeout,
            write=send_timeout,
        ),
        follow_redirects=follow_redirects,
        max_redirects=max_redirects,
        event_hooks=build_event_hooks(chain),
        transport=transport,
    )

    previous = _state.get("kit")
    if previous is not None and not previous.api.client.is_closed:
        logger.warning(
            "Re-initializing api_kit without shutdown(); previous client is left open"
        )

    kit = ApiKit(api=ApiService(client), wrapper=_wrapper.initialize(api_config))
    _state["kit"] = kit

    logger.info(
        "api_kit initialized for %s with %d interceptor(s)",
        base_url,
        len(chain),
    )
    return kit


def initialize_from_settings(
    api_config: ApiConfig,
    settings: ApiKitSettings | None = None,
    *,
    setup_logging: bool = False,
    **kwargs: Any,
) -> ApiKit:
    """Initialize from ``ApiKitSettings`` (read from the environment if omitted).

    With *setup_logging*, the root logger is switched to JSON output at
    ``settings.log_level``. Extra keyword arguments are forwarded to
    :func:`initialize` and take precedence over the settings values.
    """
    if settings is None:
        settings = ApiKitSettings()  # type: ignore[call-arg]

    if setup_logging:
        configure_logging(settings.log_level)

    options: dict[str, Any] = {
        "connect_timeout": settings.connect_timeout_seconds,
        "receive_timeout": settings.receive_timeout_seconds,
        "send_timeout": settings.send_timeout_seconds,
        "headers": settings.headers or None,
        "follow_redirects": settings.follow_redirects,
        "max_redirects": settings.max_redirects,
    }
    options.update(kwargs)
    return initialize(settings.base_url, api_config, **options)


def get_kit() -> ApiKit:
    """Return the initialized pair.

    Raises
    ------
    ConfigurationMissingError
        If :func:`initialize` has not been called.
    """
    kit = _state.get("kit")
    if kit is None:
        raise ConfigurationMissingError()
    return kit


def get_api() -> ApiService:
    """Return the process-wide ``ApiService``."""
    return get_kit().api


async def shutdown() -> None:
    """Close the process-wide client and clear all state."""
    kit = _state.pop("kit", None)
    _state.clear()
    _wrapper.reset()
    if kit is not None:
        await kit.api.aclose()
        logger.info("api_kit shut down")
