"""Open-Meteo weather provider package."""

from .client import WeatherClient

__all__ = ["WeatherClient"]
