"""Centralized configuration — all env vars in one place."""

import os


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")

        # Listen mode
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(os.getenv("PORT", "3000"))

        # Unsplash
        self.unsplash_access_key: str | None = os.getenv("UNSPLASH_ACCESS_KEY_COLLECTION")
        self.unsplash_api_url: str = os.getenv("UNSPLASH_API_URL", "https://api.unsplash.com").rstrip("/")
        self.digilens_username: str = os.getenv("DIGILENS_USERNAME", "digilens")
        # Outbound calls are bounded; without this a hung Unsplash call hangs the request.
        self.upstream_timeout: float = float(os.getenv("UPSTREAM_TIMEOUT", "10"))

        self.cache_ttl_seconds: float = float(os.getenv("CACHE_TTL_SECONDS", "600"))

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return list of missing required env vars for upstream calls."""
        required = ["UNSPLASH_ACCESS_KEY_COLLECTION"]
        return [var for var in required if not getattr(self, _attr_for(var))]


settings = Settings()


def _attr_for(env_var: str) -> str:
    """Map env var name to Settings attribute name."""
    mapping = {
        "UNSPLASH_ACCESS_KEY_COLLECTION": "unsplash_access_key",
    }
    return mapping.get(env_var, env_var.lower())
