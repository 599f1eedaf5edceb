"""
Geolocation lookup — maps an IP address to an approximate city.

Uses the ipinfo.io JSON API. A token is optional; without one ipinfo
applies its anonymous rate limit.
"""

import logging

import requests

from models import GeoLocation

log = logging.getLogger(__name__)

IPINFO_URL = "https://ipinfo.io/{ip}/json"
UNKNOWN_LOCATION = "Unknown"


def _fetch_location(ip: str, token: str = "", timeout: float = 10) -> GeoLocation:
    params = {"token": token} if token else None
    resp = requests.get(IPINFO_URL.format(ip=ip), params=params, timeout=timeout)
    if resp.status_code != 200:
        raise ValueError(f"ipinfo returned HTTP {resp.status_code} for {ip}")
    return GeoLocation.from_json(resp.json())


def lookup_city(ip: str, token: str = "", timeout: float = 10) -> str:
    """Return the city for `ip`, or "Unknown" if it can't be resolved."""
    try:
        geo = _fetch_location(ip, token=token, timeout=timeout)
    except (requests.RequestException, ValueError) as e:
        log.warning(f"Geolocation lookup failed for {ip}: {e}")
        return UNKNOWN_LOCATION

    if not geo.city:
        log.warning(f"Geolocation returned no city for {ip}")
        return UNKNOWN_LOCATION
    return geo.city
