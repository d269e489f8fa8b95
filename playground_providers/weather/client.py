"""Open-Meteo (``https://api.open-meteo.com/v1``) client.

No authentication is required. ``None`` parameters are omitted from the query
string and booleans are rendered lowercase.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Optional

import httpx

from ..base.errors import ApiError, ErrorKind
from ..base.http import ApiClient, JSON, build_query
from ..config.defaults import WEATHER_DEFAULT_BASE_URL

GEOCODING_BASE_URL = "https://geocoding-api.open-meteo.com/v1"

FORECAST_PARAMS = (
    "latitude",
    "longitude",
    "current_weather",
    "temperature_unit",
    "windspeed_unit",
    "precipitation_unit",
    "timeformat",
    "timezone",
    "past_days",
    "forecast_days",
    "start_date",
    "end_date",
    "hourly",
    "daily",
)

WEATHER_CODES: Dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    71: "Slight snow fall",
    73: "Moderate snow fall",
    75: "Heavy snow fall",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}


def _missing(section: str) -> ApiError:
    return ApiError(
        kind=ErrorKind.UPSTREAM,
        message=f"{section} data not available",
        provider="weather",
    )


class WeatherClient(ApiClient):
    """Client for the Open-Meteo forecast and geocoding APIs."""

    provider_name = "weather"

    def __init__(self, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        super().__init__(WEATHER_DEFAULT_BASE_URL, transport=transport)

    async def get_forecast(self, latitude: float, longitude: float, **params: Any) -> JSON:
        query = build_query(
            {"latitude": latitude, "longitude": longitude, **params},
            FORECAST_PARAMS,
            keep="not_none",
        )
        return await self.get(f"/forecast{query}")

    async def get_current_weather(
        self,
        latitude: float,
        longitude: float,
        temperature_unit: str = "celsius",
        timezone: str = "auto",
    ) -> Dict[str, Any]:
        response = await self.get_forecast(
            latitude,
            longitude,
            current_weather=True,
            temperature_unit=temperature_unit,
            timezone=timezone,
        )
        if not response.get("current_weather"):
            raise _missing("Current weather")
        return response["current_weather"]

    async def get_daily_forecast(
        self,
        latitude: float,
        longitude: float,
        days: int = 7,
        temperature_unit: str = "celsius",
        timezone: str = "auto",
    ) -> Dict[str, Any]:
        response = await self.get_forecast(
            latitude,
            longitude,
            temperature_unit=temperature_unit,
            timezone=timezone,
            forecast_days=days,
            daily="weathercode,temperature_2m_max,temperature_2m_min,precipitation_sum",
        )
        daily = response.get("daily")
        if not daily:
            raise _missing("Daily forecast")
        return {
            "time": daily.get("time", []),
            "weathercode": daily.get("weathercode", []),
            "temperature_max": daily.get("temperature_2m_max", []),
            "temperature_min": daily.get("temperature_2m_min", []),
            "precipitation_sum": daily.get("precipitation_sum", []),
            "units": response.get("daily_units") or {},
        }

    async def get_hourly_forecast(
        self,
        latitude: float,
        longitude: float,
        hours: int = 24,
        temperature_unit: str = "celsius",
        timezone: str = "auto",
    ) -> Dict[str, Any]:
        """Hourly series trimmed to the first ``hours`` entries."""
        response = await self.get_forecast(
            latitude,
            longitude,
            temperature_unit=temperature_unit,
            timezone=timezone,
            forecast_days=math.ceil(hours / 24),
            hourly="temperature_2m,precipitation,weathercode",
        )
        hourly = response.get("hourly")
        if not hourly:
            raise _missing("Hourly forecast")
        return {
            "time": hourly.get("time", [])[:hours],
            "temperature": hourly.get("temperature_2m", [])[:hours],
            "precipitation": hourly.get("precipitation", [])[:hours],
            "weathercode": hourly.get("weathercode", [])[:hours],
            "units": response.get("hourly_units") or {},
        }

    async def search_location(self, query: str, count: int = 5) -> JSON:
        geocoder = ApiClient(GEOCODING_BASE_URL, transport=self._transport)
        return await geocoder.get(f"/search{build_query({'name': query, 'count': count}, ('name', 'count'))}")

    @staticmethod
    def get_weather_description(code: int) -> str:
        return WEATHER_CODES.get(code, "Unknown")


__all__ = ["WeatherClient", "WEATHER_CODES"]
