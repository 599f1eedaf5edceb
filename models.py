"""
Data models for the hello response and the two upstream lookups.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict


@dataclass
class HelloResponse:
    client_ip: str
    location: str
    greeting: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class GeoLocation:
    city: str = ""

    @classmethod
    def from_json(cls, payload: dict) -> GeoLocation:
        if not isinstance(payload, dict):
            raise ValueError(f"Unexpected geolocation payload: {payload!r}")
        city = payload.get("city")
        if city is None:
            return cls()
        if not isinstance(city, str):
            raise ValueError(f"Non-string city: {city!r}")
        return cls(city=city.strip())


@dataclass
class WeatherReport:
    temp: float

    @classmethod
    def from_json(cls, payload: dict) -> WeatherReport:
        """Pull main.temp out of an OpenWeatherMap response."""
        try:
            temp = payload["main"]["temp"]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Missing main.temp in weather payload: {e}") from e
        if isinstance(temp, bool) or not isinstance(temp, (int, float)):
            raise ValueError(f"Non-numeric temperature: {temp!r}")
        return cls(temp=float(temp))
