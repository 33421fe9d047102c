from __future__ import annotations

from dataclasses import dataclass, field
from types import ModuleType

from .core.constants import DEFAULT_APPROVER_EMAIL, DEFAULT_TOKEN_TTL_SECONDS
from .core.exceptions import ConfigurationError

_PLACEHOLDER_SECRETS = {"", "please-set-SECRET_KEY", "change-me"}


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, built and validated once at boot."""

    secret_key: str
    db_config: dict = field(default_factory=dict)
    debug: bool = False
    testing: bool = False
    token_ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS
    api_prefix: str = "/api"
    port: int = 5000
    log_level: str = "INFO"
    approver_email: str = DEFAULT_APPROVER_EMAIL
    admin_email: str = ""
    admin_password: str = ""
    admin_name: str = "Administrator"
    auto_init_db: bool = False
    auto_seed_db: bool = False

    @classmethod
    def from_module(cls, settings: ModuleType) -> "Settings":
        built = cls(
            secret_key=str(getattr(settings, "SECRET_KEY", "") or ""),
            db_config=dict(getattr(settings, "DB_CONFIG", {}) or {}),
            debug=bool(getattr(settings, "DEBUG", False)),
            testing=bool(getattr(settings, "TESTING", False)),
            token_ttl_seconds=int(getattr(settings, "TOKEN_TTL_SECONDS", DEFAULT_TOKEN_TTL_SECONDS)),
            api_prefix=str(getattr(settings, "API_PREFIX", "/api")),
            port=int(getattr(settings, "PORT", 5000)),
            log_level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
            approver_email=str(getattr(settings, "DEFAULT_APPROVER_EMAIL", DEFAULT_APPROVER_EMAIL)),
            admin_email=str(getattr(settings, "ADMIN_EMAIL", "") or ""),
            admin_password=str(getattr(settings, "ADMIN_PASSWORD", "") or ""),
            admin_name=str(getattr(settings, "ADMIN_NAME", "Administrator")),
            auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
            auto_seed_db=bool(getattr(settings, "AUTO_SEED_DB", False)),
        )
        built.validate()
        return built

    def validate(self) -> None:
        if not self.secret_key:
            raise ConfigurationError("SECRET_KEY is not set")
        if self.secret_key in _PLACEHOLDER_SECRETS and not (self.debug or self.testing):
            raise ConfigurationError("SECRET_KEY still has its placeholder value")
        if self.token_ttl_seconds <= 0:
            raise ConfigurationError("TOKEN_TTL_SECONDS must be positive")
        if self.api_prefix and not self.api_prefix.startswith("/"):
            raise ConfigurationError("API_PREFIX must start with '/'")
        for key in ("host", "user", "database"):
            if not self.db_config.get(key):
                raise ConfigurationError(f"DB_CONFIG['{key}'] is not set")
        if self.auto_seed_db and not (self.admin_email and self.admin_password):
            raise ConfigurationError("AUTO_SEED_DB needs ADMIN_EMAIL and ADMIN_PASSWORD")
