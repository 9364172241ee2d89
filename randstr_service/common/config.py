"""Configuration helpers shared by the service entrypoint and the backend."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

__all__ = [
    "DEFAULT_DATABASE_URL",
    "DEFAULT_PROVIDER_URL",
    "DEFAULT_PROVIDER_TIMEOUT",
    "DEFAULT_IO_WORKERS",
    "ServiceConfig",
]

DEFAULT_DATABASE_URL = "sqlite:///./random_strings.db"
DEFAULT_PROVIDER_URL = "http://localhost:8100"
DEFAULT_PROVIDER_TIMEOUT = 30.0
DEFAULT_IO_WORKERS = 4


@dataclass(frozen=True)
class ServiceConfig:
    database_url: str = DEFAULT_DATABASE_URL
    provider_url: str = DEFAULT_PROVIDER_URL
    provider_timeout: float = DEFAULT_PROVIDER_TIMEOUT
    io_workers: int = DEFAULT_IO_WORKERS
    commit: str = "unknown"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServiceConfig":
        """Build the config from environment variables, falling back to defaults."""

        env = os.environ if environ is None else environ
        return cls(
            database_url=env.get("DATABASE_URL") or DEFAULT_DATABASE_URL,
            provider_url=env.get("PROVIDER_URL") or DEFAULT_PROVIDER_URL,
            provider_timeout=float(env.get("PROVIDER_TIMEOUT") or DEFAULT_PROVIDER_TIMEOUT),
            io_workers=int(env.get("IO_WORKERS") or DEFAULT_IO_WORKERS),
            commit=env.get("GIT_COMMIT") or "unknown",
        )

    def with_overrides(self, **overrides: Optional[object]) -> "ServiceConfig":
        """Return a copy with the non-``None`` overrides applied (CLI flags win over env)."""

        return replace(self, **{key: value for key, value in overrides.items() if value is not None})
