"""Generic API response envelope model.

Every backend response is normalized into this envelope before the wrapper
looks at it:
{ status: Any, message: str | None, data: T | None }

The envelope never interprets ``status``; that is the resolver's job. It does
not assume a fixed body structure either: extractor and parser callbacks map
the raw JSON into it.

Example::

    response = ApiResponse[User].from_json(
        body,
        status_extractor=lambda raw: raw["status"],
        message_extractor=lambda raw: raw.get("message"),
        data_parser=User.model_validate,
    )
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Generic, Optional, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict

from api_kit.errors import InvalidResponseError

T = TypeVar("T")

# Key under which the payload is looked up by ``from_json``
DATA_KEY = "data"

StatusExtractor = Callable[[Mapping[str, Any]], Any]
MessageExtractor = Callable[[Mapping[str, Any]], Optional[str]]


class ApiResponse(BaseModel, Generic[T]):
    """Normalized envelope for a single backend response."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: Any = None
    message: str | None = None
    data: T | None = None

    @classmethod
    def from_json(
        cls,
        raw: Mapping[str, Any],
        *,
        status_extractor: StatusExtractor,
        data_parser: Callable[[Any], T],
        message_extractor: MessageExtractor | None = None,
    ) -> "ApiResponse[T]":
        """Build an envelope from a decoded JSON object.

        Parameters
        ----------
        raw:
            The decoded response body.
        status_extractor:
            Pulls the raw status value out of *raw*. Its result is stored
            untouched.
        data_parser:
            Converts ``raw["data"]`` into ``T``. Receives ``None`` when the
            key is absent. Exceptions it raises propagate to the caller. Its
            result is stored as returned, without re-validation against
            ``T``; direct construction still validates ``data``.
        message_extractor:
            Optional; pulls a human-readable message out of *raw*.
        """
        envelope = cls(
            status=status_extractor(raw),
            message=message_extractor(raw) if message_extractor is not None else None,
        )
        return envelope.model_copy(update={"data": data_parser(raw.get(DATA_KEY))})

    @classmethod
    def from_response(
        cls,
        response: httpx.Response,
        *,
        status_extractor: StatusExtractor,
        data_parser: Callable[[Any], T],
        message_extractor: MessageExtractor | None = None,
    ) -> "ApiResponse[T]":
        """Decode an httpx response body and delegate to :meth:`from_json`.

        Raises
        ------
        InvalidResponseError
            If the body decodes to something other than a JSON object.
        json.JSONDecodeError
            If the body is not valid JSON.
        """
        body = response.json()
        if not isinstance(body, Mapping):
            raise InvalidResponseError(
                status_code=response.status_code,
                body_type=type(body).__name__,
            )
        return cls.from_json(
            body,
            status_extractor=status_extractor,
            data_parser=data_parser,
            message_extractor=message_extractor,
        )
