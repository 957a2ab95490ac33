"""Error hierarchy for api_kit.

All library-specific errors extend ApiKitError. Business failures (a backend
response the resolver rejects) are NOT errors here: they are reported through
the ``on_error`` callback of ``handle_api_call`` and surface as ``None``.
"""

from __future__ import annotations


class ApiKitError(Exception):
    """Base error for all api_kit errors."""

    message: str = "API kit error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class ConfigurationMissingError(ApiKitError):
    """The wrapper or transport was used before ``initialize()``."""

    message = "api_kit is not initialized; call initialize() first"


class InvalidResponseError(ApiKitError):
    """Response body does not have the shape the envelope factory needs."""

    message = "Response body is not a JSON object"
