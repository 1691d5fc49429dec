"""Settings loaded from environment variables.

Every variable uses the TASKTRACKER_ prefix, e.g. TASKTRACKER_DATABASE_URL.
Bad values fall back to the default instead of failing at startup.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

ENV_PREFIX = "TASKTRACKER"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.replace(",", " ").split() if p.strip()]


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass
class Settings:
    database_url: str = "sqlite:///./tasks.db"
    sql_echo: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    log_dir: Path | None = None
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    metrics_enabled: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=_env(_k("DATABASE_URL"), cls.database_url),
            sql_echo=_env_bool(_k("SQL_ECHO"), cls.sql_echo),
            host=_env(_k("HOST"), cls.host),
            port=_env_int(_k("PORT"), cls.port),
            log_level=_env(_k("LOG_LEVEL"), cls.log_level).upper(),
            log_dir=_env_path(_k("LOG_DIR")),
            cors_origins=_env_list(_k("CORS_ORIGINS"), ["*"]),
            metrics_enabled=_env_bool(_k("METRICS_ENABLED"), cls.metrics_enabled),
        )


def get_settings() -> Settings:
    return Settings.from_env()
