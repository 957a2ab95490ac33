"""Public models for api_kit."""

from api_kit.models.responses import DATA_KEY, ApiResponse

__all__ = [
    "ApiResponse",
    "DATA_KEY",
]
