"""
Weather greeting API — process entry point.

Checks configuration, then serves the Flask app on HOST:PORT.

Usage:
  python server.py
"""

import logging
import sys

import config
from app import create_app

log = logging.getLogger("server")


def setup_logging():
    logging.basicConfig(
        format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    )
    # Suppress werkzeug's per-request lines; the handler logs its own
    logging.getLogger("werkzeug").setLevel(logging.WARNING)


def main():
    setup_logging()

    try:
        config.require()
    except config.ConfigError as e:
        log.critical(str(e))
        sys.exit(1)

    app = create_app()
    log.info(f"Server listening on port {config.PORT}")
    app.run(host=config.HOST, port=config.PORT, threaded=True, use_reloader=False)


if __name__ == "__main__":
    main()
