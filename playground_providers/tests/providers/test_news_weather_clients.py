from __future__ import annotations

import asyncio

import httpx
import pytest

from playground_providers.base.errors import ApiError
from playground_providers.news import NewsClient
from playground_providers.weather import WeatherClient


def test_news_top_headlines_only_truthy_params(recorder, json_reply):
    rec = recorder(json_reply({"status": "ok", "articles": []}))
    client = NewsClient("nk", transport=rec.transport)
    asyncio.run(client.get_top_headlines(q="ai news", country="us", category=None, pageSize=5, page=0))
    assert rec.last.headers["x-api-key"] == "nk"
    assert str(rec.last.url) == "https://newsapi.org/v2/top-headlines?country=us&q=ai+news&pageSize=5"


def test_news_everything_and_sources(recorder, json_reply):
    rec = recorder(json_reply({"status": "ok", "articles": [{"title": "t"}], "sources": []}))
    client = NewsClient("nk", transport=rec.transport)
    assert asyncio.run(client.search_news("python")) == [{"title": "t"}]
    assert rec.last.url.params["sortBy"] == "publishedAt"
    assert rec.last.url.params["pageSize"] == "10"
    asyncio.run(client.get_everything(q="x", from_="2024-01-01"))
    assert rec.last.url.params["from"] == "2024-01-01"
    asyncio.run(client.get_sources())
    assert str(rec.last.url) == "https://newsapi.org/v2/sources?language=en"
    asyncio.run(client.get_sources(category="science"))
    assert str(rec.last.url) == "https://newsapi.org/v2/sources?category=science"


def test_news_test_connection_falls_back_to_headlines(recorder):
    def handler(request):
        if request.url.path.endswith("/sources"):
            return httpx.Response(500, json={"message": "down"})
        return httpx.Response(200, json={"status": "ok", "articles": []})

    rec = recorder(handler)
    assert asyncio.run(NewsClient("nk", transport=rec.transport).test_connection()) is True
    assert [r.url.path for r in rec.requests] == ["/v2/sources", "/v2/top-headlines"]


def test_weather_forecast_query(recorder, json_reply):
    rec = recorder(json_reply({"latitude": 52.5}))
    client = WeatherClient(transport=rec.transport)
    asyncio.run(client.get_forecast(52.52, 13.41, current_weather=True, timezone=None, past_days=0))
    assert "authorization" not in rec.last.headers
    assert str(rec.last.url) == (
        "https://api.open-meteo.com/v1/forecast?latitude=52.52&longitude=13.41&current_weather=true&past_days=0"
    )


def test_weather_helpers(recorder, json_reply):
    payload = {
        "current_weather": {"temperature": 21.0, "weathercode": 2},
        "hourly": {"time": ["a", "b", "c"], "temperature_2m": [1, 2, 3], "precipitation": [0, 0, 1], "weathercode": [0, 1, 2]},
        "hourly_units": {"temperature_2m": "°C"},
    }
    rec = recorder(json_reply(payload))
    client = WeatherClient(transport=rec.transport)
    assert asyncio.run(client.get_current_weather(1, 2))["temperature"] == 21.0
    hourly = asyncio.run(client.get_hourly_forecast(1, 2, hours=2))
    assert hourly["time"] == ["a", "b"]
    assert rec.last.url.params["forecast_days"] == "1"
    with pytest.raises(ApiError):
        asyncio.run(client.get_daily_forecast(1, 2))
    assert client.get_weather_description(95) == "Thunderstorm"
    assert client.get_weather_description(1234) == "Unknown"
