"""Unit tests for ApiKitSettings."""

import pytest
from pydantic import ValidationError

from api_kit.config.settings import ApiKitSettings


class TestApiKitSettings:
    def test_loads_with_required_env_vars(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("API_KIT_BASE_URL", "https://api.example.com/v1")

        settings = ApiKitSettings()

        assert settings.base_url == "https://api.example.com/v1"

    def test_defaults_are_correct(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("API_KIT_BASE_URL", "https://api.example.com/v1")

        settings = ApiKitSettings()

        assert settings.headers == {}
        assert settings.connect_timeout_seconds == 30.0
        assert settings.receive_timeout_seconds == 30.0
        assert settings.send_timeout_seconds is None
        assert settings.follow_redirects is True
        assert settings.max_redirects == 20
        assert settings.log_level == "INFO"

    def test_env_prefix_is_api_kit(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("API_KIT_BASE_URL", "https://api.example.com/v1")
        monkeypatch.setenv("API_KIT_RECEIVE_TIMEOUT_SECONDS", "12.5")
        monkeypatch.setenv("API_KIT_FOLLOW_REDIRECTS", "false")

        settings = ApiKitSettings()

        assert settings.receive_timeout_seconds == 12.5
        assert settings.follow_redirects is False

    def test_headers_parse_from_json(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("API_KIT_BASE_URL", "https://api.example.com/v1")
        monkeypatch.setenv("API_KIT_HEADERS", '{"Accept": "application/json"}')

        settings = ApiKitSettings()

        assert settings.headers == {"Accept": "application/json"}

    def test_missing_required_field_raises(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("API_KIT_BASE_URL", raising=False)

        with pytest.raises(ValidationError):
            ApiKitSettings()

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("connect_timeout_seconds", 0),
            ("receive_timeout_seconds", -1.0),
            ("send_timeout_seconds", 0),
            ("max_redirects", -1),
        ],
    )
    def test_out_of_range_values_rejected(self, field: str, value: float):
        with pytest.raises(ValidationError):
            ApiKitSettings(base_url="https://api.example.com", **{field: value})
