"""Configuration module — success resolution and transport settings."""

from api_kit.config.api_config import ApiConfig, SuccessResolver, default_success_resolver
from api_kit.config.settings import ApiKitSettings

__all__ = [
    "ApiConfig",
    "ApiKitSettings",
    "SuccessResolver",
    "default_success_resolver",
]
