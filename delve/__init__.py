"""
project: Delve
module: __init__.py
License: MIT

Rooms-and-mazes dungeon generator with a small Flask preview service.

The generator itself lives in ``delve.dungeon``. ``create_app`` builds the
diagnostic HTTP app that renders freshly generated stages as text.
Configuration is sourced from environment variables (optionally via a .env
file) with defaults suitable for local use.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv
from flask import Flask, jsonify

__version__ = "0.2.0"


def create_app(config: dict | None = None) -> Flask:
    # Load .env if present so DELVE_* settings can be supplied without exporting them.
    load_dotenv()
    app = Flask(__name__)
    app.config.update(
        DELVE_MAX_DIMENSION=int(os.getenv("DELVE_MAX_DIMENSION", "401")),
        DELVE_DEFAULT_WIDTH=int(os.getenv("DELVE_WIDTH", "151")),
        DELVE_DEFAULT_HEIGHT=int(os.getenv("DELVE_HEIGHT", "35")),
    )
    if config:
        app.config.update(config)

    from delve.dungeon import DungeonError
    from delve.routes.dungeon_api import dungeon_api

    app.register_blueprint(dungeon_api)

    @app.errorhandler(DungeonError)
    def _dungeon_error(err):
        return jsonify({"error": str(err)}), 400

    return app


__all__ = ["create_app", "__version__"]
