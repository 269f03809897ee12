from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional

EXECUTORS = ("thread", "process")

@dataclass(frozen=True)
class Settings:
    rounds: int = 16
    workers: int = os.cpu_count() or 1
    executor: str = "thread"
    seed: Optional[int] = None
    max_bits: int = 8192
    max_rounds: int = 1024

    def __post_init__(self):
        if self.rounds < 0:
            raise ValueError("rounds must be >= 0")
        if self.workers < 1:
            raise ValueError("workers must be >= 1")
        if self.executor not in EXECUTORS:
            raise ValueError(f"executor must be one of {EXECUTORS}, got {self.executor!r}")
        if self.max_bits < 2:
            raise ValueError("max_bits must be >= 2")
        if self.max_rounds < 0:
            raise ValueError("max_rounds must be >= 0")

def _env_int(env: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    raw = (env.get(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None

def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from MILLERRABIN_* environment variables."""
    if env is None:
        env = os.environ
    base = Settings()
    return Settings(
        rounds=_env_int(env, "MILLERRABIN_ROUNDS", base.rounds),
        workers=_env_int(env, "MILLERRABIN_WORKERS", base.workers),
        executor=(env.get("MILLERRABIN_EXECUTOR") or "").strip().lower() or base.executor,
        seed=_env_int(env, "MILLERRABIN_SEED", None),
        max_bits=_env_int(env, "MILLERRABIN_MAX_BITS", base.max_bits),
        max_rounds=_env_int(env, "MILLERRABIN_MAX_ROUNDS", base.max_rounds),
    )
