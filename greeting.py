"""
Request helpers — who is calling, and what to say to them.
"""

import ipaddress
from typing import Optional

DEFAULT_VISITOR = "Guest"


def is_loopback(ip: str) -> bool:
    try:
        addr = ipaddress.ip_address(ip)
    except ValueError:
        return False
    mapped = getattr(addr, "ipv4_mapped", None)
    if mapped is not None:
        addr = mapped
    return addr.is_loopback


def _valid_ip(value: str) -> bool:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def client_ip(remote_addr: Optional[str], headers=None, trust_proxy: bool = False) -> str:
    """
    Best guess at the caller's address.

    With trust_proxy set, the first X-Forwarded-For hop (or X-Real-IP)
    wins over the socket peer address. Header values that don't parse
    as an IP address are ignored.
    """
    if trust_proxy and headers is not None:
        forwarded = headers.get("X-Forwarded-For", "")
        first = forwarded.split(",")[0].strip()
        if _valid_ip(first):
            return first
        real_ip = headers.get("X-Real-IP", "").strip()
        if _valid_ip(real_ip):
            return real_ip
    return remote_addr or ""


def public_ip(ip: str, fallback_ip: str) -> str:
    """Loopback can't be geolocated; swap in a known public address."""
    if not ip or is_loopback(ip):
        return fallback_ip
    return ip


def visitor_name(raw: Optional[str]) -> str:
    name = (raw or "").strip()
    return name or DEFAULT_VISITOR


def compose(visitor: str, temperature: float, location: str) -> str:
    return (
        f"Hello, {visitor}! The temperature is {temperature:.1f} "
        f"degrees Celsius in {location}"
    )
