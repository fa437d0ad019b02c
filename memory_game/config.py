# memory_game/config.py
from __future__ import annotations
import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Config:
    pairs: int
    host: str
    port: int
    debug: bool


@lru_cache
def get_config() -> Config:
    return Config(
        pairs=int(os.environ.get("MEMORY_GAME_PAIRS", "4")),
        host=os.environ.get("MEMORY_GAME_HOST", "127.0.0.1"),
        port=int(os.environ.get("MEMORY_GAME_PORT", "5000")),
        debug=os.environ.get("DEBUG", "0").lower() in ("1", "true", "yes"),
    )
