"""Upstream lookups: IP geolocation and current weather."""
