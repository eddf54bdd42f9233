# tetris_stack/config.py
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

QUEUE_CAPACITY = 5

# níveis padrão do loguru
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def _int_env(name: str, default: int | None) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} precisa ser um inteiro, recebido {raw!r}") from None


@dataclass
class Settings:
    queue_capacity: int = QUEUE_CAPACITY
    rng_seed: int | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        capacity = _int_env("TETRIS_QUEUE_CAPACITY", QUEUE_CAPACITY)
        if capacity < 1:
            raise ValueError(f"TETRIS_QUEUE_CAPACITY precisa ser >= 1, recebido {capacity}")
        log_level = os.getenv("TETRIS_LOG_LEVEL", "").strip().upper() or "WARNING"
        if log_level not in LOG_LEVELS:
            raise ValueError(f"TETRIS_LOG_LEVEL desconhecido: {log_level!r}")
        return cls(
            queue_capacity=capacity,
            rng_seed=_int_env("TETRIS_RNG_SEED", None),
            log_level=log_level,
        )
