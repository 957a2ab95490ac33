"""Backend-agnostic response normalization for httpx clients."""

from api_kit.bootstrap import (
    ApiKit,
    get_api,
    get_kit,
    initialize,
    initialize_from_settings,
    shutdown,
)
from api_kit.config import ApiConfig, ApiKitSettings, SuccessResolver, default_success_resolver
from api_kit.errors import ApiKitError, ConfigurationMissingError, InvalidResponseError
from api_kit.logging_config import JsonFormatter, configure_logging
from api_kit.models import DATA_KEY, ApiResponse
from api_kit.transport import (
    ApiService,
    Interceptor,
    LoggingInterceptor,
    RequestIdInterceptor,
    StatusValidationInterceptor,
    join_url,
)
from api_kit.wrapper import DEFAULT_ERROR_MESSAGE, ApiWrapper, handle_api_call

__all__ = [
    "ApiConfig",
    "ApiKit",
    "ApiKitError",
    "ApiKitSettings",
    "ApiResponse",
    "ApiService",
    "ApiWrapper",
    "ConfigurationMissingError",
    "DATA_KEY",
    "DEFAULT_ERROR_MESSAGE",
    "Interceptor",
    "InvalidResponseError",
    "JsonFormatter",
    "LoggingInterceptor",
    "RequestIdInterceptor",
    "StatusValidationInterceptor",
    "SuccessResolver",
    "configure_logging",
    "default_success_resolver",
    "get_api",
    "get_kit",
    "handle_api_call",
    "initialize",
    "initialize_from_settings",
    "join_url",
    "shutdown",
]
