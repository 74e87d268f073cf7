"""
Food Circle Backend — Application Configuration
================================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time; checked again during startup.

Environment names follow the deployment that already exists for the web
client (PORT, DB_USER, DB_PASS, SECRET_KEY, NODE_ENV), so an existing `.env`
keeps working.
"""

from typing import List, Optional
from urllib.parse import quote_plus

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have development defaults except the secrets, which must be
    provided for a working deployment (see `validate_required_for_production`).
    """

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    port: int = Field(default=5000, ge=1, le=65535)

    # What: Deployment environment; "production" switches the session cookie
    # to Secure + SameSite=None so the hosted frontend can send it cross-site.
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("ENVIRONMENT", "NODE_ENV"),
    )

    # ── MongoDB ───────────────────────────────────────────────────────────
    # Credentials for the Atlas cluster. MONGODB_URI, when set, wins over
    # the assembled SRV URL (useful for a local mongod).
    db_user: str = Field(default="")
    db_pass: str = Field(default="")
    mongodb_cluster_host: str = Field(default="cluster0.euk0j.mongodb.net")
    mongodb_app_name: str = Field(default="Cluster0")
    mongodb_uri: Optional[str] = Field(default=None)

    db_name: str = Field(default="foodCircleDB")
    foods_collection: str = Field(default="foods")
    requests_collection: str = Field(default="foodRequest")

    # ── Session Token ─────────────────────────────────────────────────────
    secret_key: str = Field(default="", description="HMAC secret for session tokens")
    jwt_algorithm: str = Field(default="HS256")
    token_expire_days: int = Field(default=365, ge=1)
    session_cookie_name: str = Field(default="token")

    # ── Catalog ───────────────────────────────────────────────────────────
    featured_limit: int = Field(default=6, ge=1, le=100)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs (parsed by cors_origins_list below)
    cors_origins: str = Field(
        default=(
            "http://localhost:5173,"
            "https://food-circle-a626f.web.app,"
            "https://food-circle-a626f.firebaseapp.com"
        )
    )

    # ── Logging ───────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "production"

    @property
    def cookie_samesite(self) -> str:
        return "none" if self.is_production else "strict"

    @property
    def mongodb_url(self) -> str:
        """
        Connection string handed to the Motor client.

        Credentials are percent-escaped.
        """
        if self.mongodb_uri:
            return self.mongodb_uri
        return (
            f"mongodb+srv://{quote_plus(self.db_user)}:{quote_plus(self.db_pass)}"
            f"@{self.mongodb_cluster_host}/"
            f"?retryWrites=true&w=majority&appName={self.mongodb_app_name}"
        )

    def validate_required_for_production(self) -> None:
        """
        Checks that the secrets needed to serve traffic are configured.

        Called during app startup (lifespan). Raises ValueError listing every
        missing value at once.
        """
        errors = []
        if not self.secret_key:
            errors.append("SECRET_KEY is not set. Session tokens cannot be signed.")
        if not self.mongodb_uri and not (self.db_user and self.db_pass):
            errors.append(
                "DB_USER / DB_PASS are not set (or provide MONGODB_URI). "
                "The MongoDB cluster will reject connections."
            )
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


# Singleton instance, imported throughout the application
settings = Settings()
