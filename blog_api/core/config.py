import os
from dataclasses import dataclass, field
from functools import lru_cache


def _split_origins(value: str) -> list[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    """Runtime configuration read from the environment"""
    app_env: str = "development"
    database_url: str | None = None
    redis_url: str | None = None
    cache_ttl: int = 3600
    allowed_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    """获取配置"""
    return Settings(
        app_env=os.getenv("APP_ENV", "development"),
        database_url=os.getenv("DATABASE_URL"),
        redis_url=os.getenv("REDIS_URL") or None,
        cache_ttl=int(os.getenv("CACHE_TTL", "3600")),
        allowed_origins=_split_origins(os.getenv("ALLOWED_ORIGINS", "*")) or ["*"],
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
