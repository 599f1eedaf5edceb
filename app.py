"""
Weather greeting API — Flask app.

Provides:
  - GET /api/hello?visitor_name=<name>
    Resolves the caller's city from their IP, looks up the current
    temperature there, and greets them. Always answers 200 with
    {client_ip, location, greeting}; upstream failures fall back to
    "Unknown" and 11.0 °C.
"""

import logging

from flask import Flask, request, jsonify

import config
import greeting
from models import HelloResponse
from services.geolocation import lookup_city, UNKNOWN_LOCATION
from services.weather import lookup_temperature, DEFAULT_TEMPERATURE

log = logging.getLogger(__name__)


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.update(
        WEATHER_API_KEY=config.WEATHER_API_KEY,
        IPINFO_TOKEN=config.IPINFO_TOKEN,
        FALLBACK_IP=config.FALLBACK_IP,
        TRUST_PROXY_HEADERS=config.TRUST_PROXY_HEADERS,
        REQUEST_TIMEOUT=config.REQUEST_TIMEOUT,
    )
    if overrides:
        app.config.update(overrides)

    # ── API endpoints ───────────────────────────────────────

    @app.route("/api/hello", methods=["GET"])
    def api_hello():
        cfg = app.config
        visitor = greeting.visitor_name(request.args.get("visitor_name"))
        caller = greeting.client_ip(
            request.remote_addr,
            request.headers,
            trust_proxy=cfg["TRUST_PROXY_HEADERS"],
        )
        ip = greeting.public_ip(caller, cfg["FALLBACK_IP"])

        location = lookup_city(
            ip, token=cfg["IPINFO_TOKEN"], timeout=cfg["REQUEST_TIMEOUT"]
        )
        if location == UNKNOWN_LOCATION:
            temperature = DEFAULT_TEMPERATURE
        else:
            temperature = lookup_temperature(
                location, cfg["WEATHER_API_KEY"], timeout=cfg["REQUEST_TIMEOUT"]
            )

        log.info(f"Hello {visitor} from {ip} ({location}, {temperature:.1f}°C)")
        resp = HelloResponse(
            client_ip=ip,
            location=location,
            greeting=greeting.compose(visitor, temperature, location),
        )
        return jsonify(resp.to_dict())

    # ── Errors ──────────────────────────────────────────────

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"error": "method not allowed"}), 405

    return app
