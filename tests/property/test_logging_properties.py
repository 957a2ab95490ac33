"""Property tests for structured logging.

Every entry is valid JSON with request_id, level and timestamp; request
context fields pass through; secrets never reach the output.
"""

from __future__ import annotations

import json
import logging
import sys

from hypothesis import given, settings, strategies as st

from api_kit.logging_config import JsonFormatter, configure_logging


# --- Strategies ---

request_ids = st.uuids().map(str)
messages = st.text(min_size=1, max_size=100, alphabet="abcdefghijklmnopqrstuvwxyz0123456789 ._-/")
levels = st.sampled_from(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
methods = st.sampled_from(["GET", "POST", "PUT", "PATCH", "DELETE"])
urls = st.from_regex(r"https://[a-z]{3,10}\.[a-z]{2,4}/[a-z0-9]{1,10}", fullmatch=True)
status_codes = st.integers(min_value=100, max_value=599)
durations = st.floats(min_value=0.0, max_value=60000.0, allow_nan=False, allow_infinity=False)
secrets = st.text(min_size=4, max_size=30, alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZ")
secret_keys = st.sampled_from(["token", "api_key", "api-key", "secret", "password", "Authorization"])


def _make_record(
    message: str,
    level: str = "INFO",
    request_id: str | None = None,
    **extra: object,
) -> logging.LogRecord:
    """Create a LogRecord with optional extra attributes."""
    record = logging.LogRecord(
        name="test",
        level=getattr(logging, level),
        pathname="test.py",
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    if request_id is not None:
        record.request_id = request_id  # type: ignore[attr-defined]
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@settings(max_examples=100)
@given(message=messages, level=levels, request_id=request_ids)
def test_structured_log_format_basic(message: str, level: str, request_id: str) -> None:
    formatter = JsonFormatter()
    output = formatter.format(_make_record(message, level=level, request_id=request_id))

    parsed = json.loads(output)

    assert "timestamp" in parsed
    assert parsed["level"] == level
    assert parsed["request_id"] == request_id
    assert parsed["message"]


@settings(max_examples=100)
@given(
    message=messages,
    method=methods,
    url=urls,
    status_code=status_codes,
    duration_ms=durations,
)
def test_request_context_fields(
    message: str,
    method: str,
    url: str,
    status_code: int,
    duration_ms: float,
) -> None:
    formatter = JsonFormatter()
    record = _make_record(
        message,
        method=method,
        url=url,
        status_code=status_code,
        duration_ms=duration_ms,
    )
    parsed = json.loads(formatter.format(record))

    assert parsed["method"] == method
    assert parsed["url"] == url
    assert parsed["status_code"] == status_code
    assert parsed["duration_ms"] == duration_ms


@settings(max_examples=100)
@given(message=messages)
def test_absent_context_fields_are_omitted(message: str) -> None:
    parsed = json.loads(JsonFormatter().format(_make_record(message)))

    assert parsed["request_id"] is None
    for field in ("method", "url", "status_code", "duration_ms", "error_type", "response_body"):
        assert field not in parsed


@settings(max_examples=100)
@given(key=secret_keys, secret=secrets, prefix=messages)
def test_secrets_are_redacted_from_message(key: str, secret: str, prefix: str) -> None:
    output = JsonFormatter().format(_make_record(f"{prefix} {key}={secret}"))

    assert secret not in json.loads(output)["message"]
    assert "[REDACTED]" in output


@settings(max_examples=100)
@given(url=urls, secret=secrets)
def test_secrets_are_redacted_from_url_and_body(url: str, secret: str) -> None:
    record = _make_record(
        "request",
        url=f"{url}?token={secret}",
        response_body=f'{{"password": "{secret}"}}',
    )
    parsed = json.loads(JsonFormatter().format(record))

    assert secret not in parsed["url"]
    assert secret not in parsed["response_body"]


def test_exception_is_included() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _make_record("failed")
        record.exc_info = sys.exc_info()

    parsed = json.loads(JsonFormatter().format(record))

    assert "RuntimeError: boom" in parsed["exception"]


def test_configure_logging_installs_json_handler() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        configure_logging("debug")

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
