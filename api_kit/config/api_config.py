"""Success resolution config.

Backends disagree on how they say "ok": some send ``true``/``false``, some an
HTTP-style code like ``200``, some a string such as ``"success"``. The
resolver is the single place where that convention is interpreted.

Example::

    config = ApiConfig(is_success=lambda status: status is True or status == 200)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

SuccessResolver = Callable[[Any], bool]


def default_success_resolver(status: Any) -> bool:
    """Canonical resolver.

    - ``bool``: used as-is
    - ``int``: success iff in ``[200, 300)``
    - ``str``: success iff equal to ``"success"``, ignoring case
    - anything else: failure
    """
    # bool is a subclass of int, so it must be checked first
    if isinstance(status, bool):
        return status
    if isinstance(status, int):
        return 200 <= status < 300
    if isinstance(status, str):
        return status.lower() == "success"
    return False


@dataclass(frozen=True)
class ApiConfig:
    """How API responses are interpreted across the application.

    Attributes
    ----------
    is_success:
        Resolver applied to the raw ``status`` of every envelope. Must not
        raise for shapes the backend is expected to send.
    """

    is_success: SuccessResolver = default_success_resolver
