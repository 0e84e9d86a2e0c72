"""Generator configuration via environment variables with HASHGEN_ prefix."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hash_generator.models.algorithm import HashAlgorithm


class Settings(BaseSettings):
    """Hash generator configuration.

    All settings are read from environment variables prefixed with ``HASHGEN_``.
    """

    model_config = SettingsConfigDict(env_prefix="HASHGEN_")

    # ── Hashing ────────────────────────────────────────────────────────────
    default_algorithm: HashAlgorithm = HashAlgorithm.SHA256
    # The per-process platform hash is not stable across runs
    enable_platform_hash: bool = True

    # ── Salt ───────────────────────────────────────────────────────────────
    default_salt_length: int = Field(default=16, ge=0)
    # Leave unset to derive a random pad character once per process
    salt_pad_character: str | None = Field(default=None, pattern=r"^[0-9a-f]$")

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: str = "INFO"

    @field_validator("default_algorithm")
    @classmethod
    def _reject_sentinel(cls, value: HashAlgorithm) -> HashAlgorithm:
        if value is HashAlgorithm.INVALID:
            raise ValueError("INVALID cannot be used as the default algorithm")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, read from the environment once."""
    return Settings()
