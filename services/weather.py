"""
Weather lookup — current temperature for a city.

Uses the OpenWeatherMap current-weather API in metric units.
Requires WEATHER_API_KEY.
"""

import logging

import requests

from models import WeatherReport

log = logging.getLogger(__name__)

WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_TEMPERATURE = 11.0  # °C, reported when the lookup fails


def _fetch_weather(city: str, api_key: str, timeout: float = 10) -> WeatherReport:
    resp = requests.get(
        WEATHER_URL,
        params={
            "q": city,
            "units": "metric",
            "appid": api_key,
        },
        timeout=timeout,
    )
    if resp.status_code != 200:
        raise ValueError(f"OpenWeatherMap returned HTTP {resp.status_code} for {city}")
    return WeatherReport.from_json(resp.json())


def lookup_temperature(city: str, api_key: str, timeout: float = 10) -> float:
    """Current temperature in °C for `city`, or DEFAULT_TEMPERATURE on failure."""
    try:
        return _fetch_weather(city, api_key, timeout=timeout).temp
    except (requests.RequestException, ValueError) as e:
        log.warning(f"Weather lookup failed for {city}: {e}")
        return DEFAULT_TEMPERATURE
