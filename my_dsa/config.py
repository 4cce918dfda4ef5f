import os
from functools import lru_cache
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "MY_DSA_"

PivotStrategy = Literal["median_of_three", "random", "last"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    """Library-wide defaults. Explicit arguments to a container or function win."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    hash_initial_capacity: int = Field(8, ge=1)
    hash_max_load_factor: float = Field(0.75, gt=0)
    quicksort_pivot: PivotStrategy = "median_of_three"
    rabin_karp_base: int = Field(256, ge=2)
    rabin_karp_modulus: int = Field(1_000_000_007, ge=2)
    log_level: LogLevel = "WARNING"
    log_json: bool = True


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from MY_DSA_* variables, e.g. MY_DSA_QUICKSORT_PIVOT=random."""
    environ = os.environ if environ is None else environ
    values = {}
    for name in Settings.model_fields:
        raw = environ.get(ENV_PREFIX + name.upper())
        if raw is None or not raw.strip():
            continue
        raw = raw.strip()
        values[name] = raw.upper() if name == "log_level" else raw
    return Settings.model_validate(values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


def reset_settings() -> None:
    get_settings.cache_clear()
