"""Configuration management for payrun."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

DATA_SOURCES = ("fixtures", "database")


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment."""

    database_url: str
    data_source: str
    fail_fast: bool
    disposition_seed: int | None
    log_level: str
    engine_version: str
    host: str
    port: int
    debug: bool

    @property
    def HOST(self) -> str:
        """Alias for host."""
        return self.host

    @property
    def PORT(self) -> int:
        """Alias for port."""
        return self.port

    @property
    def DEBUG(self) -> bool:
        """Alias for debug."""
        return self.debug

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        load_dotenv()

        data_source = os.getenv("DATA_SOURCE", "fixtures").lower()
        if data_source not in DATA_SOURCES:
            raise ValueError(
                f"DATA_SOURCE must be one of {', '.join(DATA_SOURCES)}, "
                f"got '{data_source}'"
            )

        seed = os.getenv("DISPOSITION_SEED")

        return cls(
            database_url=os.getenv("DATABASE_URL", "sqlite:///./payrun.db"),
            data_source=data_source,
            fail_fast=_env_bool("FAIL_FAST"),
            disposition_seed=int(seed) if seed else None,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            engine_version=os.getenv("ENGINE_VERSION", "1.0.0"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            debug=_env_bool("DEBUG"),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()


settings = get_settings()
