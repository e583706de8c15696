"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Backend choices and cache TTLs are validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DATABASE_BACKENDS = ("memory", "firestore")
CACHE_BACKENDS = ("memory", "redis")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Defaults run the whole app in one process (in-memory repositories and
    cache). Firestore needs service account credentials; Redis needs a
    reachable server.
    """

    # App
    app_name: str = "lifehacking"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database: "memory" (process-local) or "firestore" (Firestore REST)
    database_backend: str = "memory"

    # Firebase / Firestore: use key (env) or path (file).
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None  # Path to JSON file

    # Cache: "memory" (process-local TTL cache) or "redis"
    cache_backend: str = "memory"
    cache_max_entries: int = 1024
    cache_ttl_dashboard: int = 86400  # 24 hours
    cache_ttl_category_list: int = 3600
    cache_ttl_category: int = 3600
    # Remote cache socket timeout; a timeout surfaces as an infrastructure error.
    cache_operation_timeout_seconds: float = 5.0

    # Redis
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None

    # CORS
    allowed_origins: str = "http://localhost:3000"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_backends_and_cache(self) -> "Settings":
        """Validate backend names, Firestore credentials, and cache limits.

        - Firestore: FIREBASE_SERVICE_ACCOUNT_KEY or FIREBASE_SERVICE_ACCOUNT_PATH required.
        - TTLs, capacity and timeout must be positive.
        """
        if self.database_backend not in DATABASE_BACKENDS:
            raise ValueError(
                f"database_backend must be one of {DATABASE_BACKENDS}, got: {self.database_backend!r}"
            )
        if self.database_backend == "firestore":
            has_key = (
                self.firebase_service_account_key
                and self.firebase_service_account_key.get_secret_value()
            )
            if not has_key and not self.firebase_service_account_path:
                raise ValueError(
                    "When database_backend is 'firestore', set FIREBASE_SERVICE_ACCOUNT_KEY (full JSON string) "
                    "or FIREBASE_SERVICE_ACCOUNT_PATH (path to JSON file)."
                )
        if self.cache_backend not in CACHE_BACKENDS:
            raise ValueError(
                f"cache_backend must be one of {CACHE_BACKENDS}, got: {self.cache_backend!r}"
            )
        for name in (
            "cache_max_entries",
            "cache_ttl_dashboard",
            "cache_ttl_category_list",
            "cache_ttl_category",
            "cache_operation_timeout_seconds",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        return self

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
