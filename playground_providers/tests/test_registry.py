"""ApiService: process default, lazy clients, invalidation."""

from __future__ import annotations

import pytest

from playground_providers.anthropic import AnthropicClient
from playground_providers.base.dto import ApiConfig
from playground_providers.base.errors import ApiError, ErrorKind
from playground_providers.openai import OpenAIClient
from playground_providers.registry import ApiService
from playground_providers.weather import WeatherClient


def test_get_instance_requires_config_first():
    with pytest.raises(ApiError) as info:
        ApiService.get_instance()
    assert info.value.kind is ErrorKind.CONFIGURATION
    assert info.value.message == "ApiService must be initialized with a config first"


def test_get_instance_reads_config_only_once():
    first = ApiService.get_instance({"openai": {"api_key": "sk-1"}})
    client = first.get_openai()
    assert ApiService.get_instance() is first
    assert ApiService.get_instance({"anthropic": "ak-1", "openai": "sk-2"}) is first
    assert first.config.api_key_for("openai") == "sk-1"
    assert first.config.api_key_for("anthropic") is None
    assert first.get_openai() is client


def test_constructor_accepts_bare_key_strings():
    service = ApiService({"openai": "sk-1", "anthropic": {"api_key": "ak-1"}, "news": None, "cohere": "x"})
    assert service.config.api_key_for("openai") == "sk-1"
    assert service.config.api_key_for("anthropic") == "ak-1"
    assert service.configured_providers() == ["openai", "anthropic", "weather"]
    assert service.get_openai().api_key == "sk-1"


def test_clients_are_built_once():
    service = ApiService({"openai": {"api_key": "sk-1"}})
    client = service.get_openai()
    assert isinstance(client, OpenAIClient)
    assert client.api_key == "sk-1"
    assert service.get_openai() is client


def test_unconfigured_provider_message():
    service = ApiService(ApiConfig())
    with pytest.raises(ApiError) as info:
        service.get_anthropic()
    assert info.value.kind is ErrorKind.CONFIGURATION
    assert info.value.message == "Anthropic API key is not configured"


def test_unknown_provider():
    with pytest.raises(ApiError) as info:
        ApiService().get_client("cohere")
    assert info.value.kind is ErrorKind.UNKNOWN_PROVIDER
    assert info.value.message == "Unknown provider: cohere"


def test_weather_needs_no_key():
    service = ApiService()
    assert isinstance(service.get_weather(), WeatherClient)
    assert service.configured_providers() == ["weather"]


def test_update_config_invalidates_only_touched_clients(log_events):
    service = ApiService({"openai": "sk-1", "anthropic": "ak-1"})
    openai = service.get_openai()
    anthropic = service.get_anthropic()
    service.update_config({"openai": {"api_key": "sk-2"}})
    assert service.get_anthropic() is anthropic
    rebuilt = service.get_openai()
    assert rebuilt is not openai
    assert rebuilt.api_key == "sk-2"
    invalidated = [e for e in log_events if e["event"] == "registry.invalidated"]
    assert [e["provider"] for e in invalidated] == ["openai"]


def test_update_config_with_api_config_and_removal():
    service = ApiService({"openai": "sk-1", "news": "nk-1"})
    service.update_config(ApiConfig(news=None))
    assert service.config.api_key_for("openai") == "sk-1"
    assert not service.is_configured("news")
    service.update_config({"openai": None})
    with pytest.raises(ApiError):
        service.get_openai()


def test_transport_is_passed_to_clients(recorder, json_reply):
    rec = recorder(json_reply({"id": "m"}))
    transport = rec.transport
    service = ApiService({"anthropic": "ak"}, transport=transport)
    client = service.get_client("Anthropic")
    assert isinstance(client, AnthropicClient)
    assert client._transport is transport
