import os
import sys

import pytest

# Ensure repository root importable early (run.py lives there)
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from delve import create_app  # noqa: E402
from delve.dungeon import Dungeon, DungeonConfig, Stage  # noqa: E402


@pytest.fixture(autouse=True)
def _quiet_logs(monkeypatch):
    monkeypatch.setenv("DELVE_LOG_LEVEL", "error")
    for key in ("DELVE_WIDTH", "DELVE_HEIGHT", "DELVE_SEED", "DELVE_ROOM_TRIES",
                "DELVE_ROOM_EXTRA_SIZE", "DELVE_WINDING_PERCENT", "DELVE_EXTRA_CONNECTOR_CHANCE"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def test_app():
    app = create_app({"TESTING": True, "DELVE_DEFAULT_WIDTH": 41, "DELVE_DEFAULT_HEIGHT": 21})
    return app


@pytest.fixture()
def client(test_app):
    return test_app.test_client()


@pytest.fixture()
def make_dungeon():
    """Factory: generate a dungeon of the given size and seed."""

    def _make(width=41, height=21, seed=1234, **overrides):
        cfg = DungeonConfig(width=width, height=height, seed=seed, **overrides)
        d = Dungeon(Stage(width, height), cfg)
        d.generate()
        return d

    return _make
