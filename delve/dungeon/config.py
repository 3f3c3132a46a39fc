import os
from dataclasses import dataclass, fields
from typing import Optional

# Environment variable -> DungeonConfig attribute
ENV_MAP = {
    "DELVE_WIDTH": "width",
    "DELVE_HEIGHT": "height",
    "DELVE_ROOM_TRIES": "room_tries",
    "DELVE_ROOM_EXTRA_SIZE": "room_extra_size",
    "DELVE_WINDING_PERCENT": "winding_percent",
    "DELVE_EXTRA_CONNECTOR_CHANCE": "extra_connector_chance",
    "DELVE_SEED": "seed",
}


@dataclass
class DungeonConfig:
    width: int = 151
    height: int = 35
    room_tries: int = 50
    room_extra_size: int = 0
    # Chance (0..100) that a corridor turns when it could go straight.
    winding_percent: int = 0
    # A redundant connector is opened with probability 1 / extra_connector_chance.
    extra_connector_chance: int = 20
    seed: Optional[int] = None

    @classmethod
    def from_env(cls, **overrides) -> "DungeonConfig":
        """Build a config from DELVE_* environment variables; keyword overrides win."""
        values = {}
        for env_key, attr in ENV_MAP.items():
            raw = os.environ.get(env_key)
            if raw is None or raw.strip() == "":
                continue
            try:
                values[attr] = int(raw)
            except ValueError as exc:
                raise ValueError(f"{env_key} must be an integer (got {raw!r})") from exc
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise TypeError(f"unknown DungeonConfig override(s): {', '.join(unknown)}")
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def validate(self) -> None:
        if self.room_tries < 0:
            raise ValueError("room_tries must be >= 0")
        if self.room_extra_size < 0:
            raise ValueError("room_extra_size must be >= 0")
        if not 0 <= self.winding_percent <= 100:
            raise ValueError("winding_percent must be within 0..100")
        if self.extra_connector_chance < 1:
            raise ValueError("extra_connector_chance must be >= 1")


__all__ = ["DungeonConfig", "ENV_MAP"]
