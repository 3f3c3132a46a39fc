"""
project: Delve
module: dungeon_api.py
License: MIT

Diagnostic dungeon preview routes.

Each request generates a fresh stage from the query parameters and returns
either its text rendering or the generation metrics. Nothing is stored
between requests.
"""

from flask import Blueprint, Response, current_app, jsonify, request

from delve.dungeon import Dungeon, DungeonConfig, Stage
from delve.logging_utils import get_logger

dungeon_api = Blueprint("dungeon_api", __name__, url_prefix="/api/dungeon")
log = get_logger("delve.routes.dungeon_api")


class BadRequest(ValueError):
    pass


class ServerConfigError(RuntimeError):
    """DELVE_* settings on the server are unusable."""


def _int_arg(name: str, default):
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise BadRequest(f"{name} must be an integer")


def _build_dungeon() -> Dungeon:
    cfg = current_app.config
    width = _int_arg("width", cfg["DELVE_DEFAULT_WIDTH"])
    height = _int_arg("height", cfg["DELVE_DEFAULT_HEIGHT"])
    limit = cfg["DELVE_MAX_DIMENSION"]
    if width > limit or height > limit:
        raise BadRequest(f"width and height must not exceed {limit}")
    seed = _int_arg("seed", None)
    try:
        config = DungeonConfig.from_env(width=width, height=height, seed=seed)
        config.validate()
    except ValueError as exc:
        raise ServerConfigError(str(exc)) from exc
    dungeon = Dungeon(Stage(width, height), config)
    dungeon.generate()
    return dungeon


@dungeon_api.errorhandler(BadRequest)
def _bad_request(err):
    return jsonify({"error": str(err)}), 400


@dungeon_api.errorhandler(ServerConfigError)
def _server_config_error(err):
    log.error(event="bad_config", error=err)
    return jsonify({"error": f"server configuration: {err}"}), 500


@dungeon_api.route("/render")
def render():
    dungeon = _build_dungeon()
    log.debug(event="render", seed=dungeon.seed, width=dungeon.width, height=dungeon.height)
    resp = Response(dungeon.stage.render() + "\n", mimetype="text/plain")
    resp.headers["X-Dungeon-Seed"] = str(dungeon.seed)
    return resp


@dungeon_api.route("/metrics")
def metrics():
    dungeon = _build_dungeon()
    return jsonify(
        {
            "seed": dungeon.seed,
            "width": dungeon.width,
            "height": dungeon.height,
            "metrics": dungeon.metrics,
        }
    )
