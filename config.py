"""
Configuration — loads from .env, provides defaults.
"""

import os
from dotenv import find_dotenv, load_dotenv


def load_env() -> str:
    """Load .env from the working directory (or a parent). Returns its path, "" if none."""
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(path)
    return path


DOTENV_PATH = load_env()
DOTENV_LOADED = bool(DOTENV_PATH)  # an empty .env still counts

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT") or "3000")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Upstream services
WEATHER_API_KEY = os.getenv("WEATHER_API_KEY", "")
IPINFO_TOKEN = os.getenv("IPINFO_TOKEN", "")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))  # seconds

# Client IP handling
FALLBACK_IP = os.getenv("FALLBACK_IP", "8.8.8.8")  # used in place of loopback
TRUST_PROXY_HEADERS = os.getenv("TRUST_PROXY_HEADERS", "false").lower() in ("1", "true", "yes")


class ConfigError(RuntimeError):
    pass


def require():
    """Raise ConfigError if the process can't serve requests."""
    if not DOTENV_LOADED:
        raise ConfigError("Error loading .env file")
    if not WEATHER_API_KEY:
        raise ConfigError("WEATHER_API_KEY is not set")
