import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    env: str
    database_url: str
    port: str
    log_level: str
    seed_count: int


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def load_settings() -> Settings:
    env = _getenv("ENV", "development")
    # No SQLite fallback in production: the app refuses to boot instead.
    default_db = "" if env.lower() in ("prod", "production") else "sqlite:///customers.db"
    return Settings(
        env=env,
        database_url=_getenv("DATABASE_URL", default_db),
        port=_getenv("PORT", ""),
        log_level=_getenv("LOG_LEVEL", "INFO").upper(),
        seed_count=int(_getenv("SEED_COUNT", "10")),
    )


def load_config() -> dict:
    s = load_settings()
    return {
        "ENV": s.env,
        "DATABASE_URL": s.database_url,
        "PORT": s.port,
        "LOG_LEVEL": s.log_level,
        "SEED_COUNT": s.seed_count,
    }
