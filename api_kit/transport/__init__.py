"""Transport layer — httpx verb wrapper and interceptors."""

from api_kit.transport.interceptors import (
    REQUEST_ID_HEADER,
    Interceptor,
    LoggingInterceptor,
    RequestIdInterceptor,
    StatusValidationInterceptor,
    build_event_hooks,
)
from api_kit.transport.service import ApiService, join_url

__all__ = [
    "ApiService",
    "Interceptor",
    "LoggingInterceptor",
    "REQUEST_ID_HEADER",
    "RequestIdInterceptor",
    "StatusValidationInterceptor",
    "build_event_hooks",
    "join_url",
]
