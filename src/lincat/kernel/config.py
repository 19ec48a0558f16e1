"""Settings for numeric comparisons."""

from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field


class Settings(BaseModel):
    """Tolerances used when comparing materialized matrices.

    Materialization itself is exact up to floating-point rounding;
    these only govern law checks such as ``matrices_equal``.
    """

    model_config = ConfigDict(frozen=True)

    atol: float = Field(default=1e-9, ge=0.0)
    rtol: float = Field(default=1e-7, ge=0.0)


@lru_cache(maxsize=1)
def default_settings() -> Settings:
    return Settings()
