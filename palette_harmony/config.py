"""
Palette Harmony Configuration
Manages environment variables and defaults for the library and HTTP service.
"""
import os
from typing import List


class Config:
    """Configuration class for Palette Harmony services."""

    # Service identity
    SERVICE_NAME: str = os.environ.get("PALETTE_SERVICE_NAME", "palette-harmony")
    VERSION: str = "1.0.0"

    # Logging
    LOG_LEVEL: str = os.environ.get("PALETTE_LOG_LEVEL", "INFO")

    # Request limits for the HTTP layer
    MAX_COLLECTION_SIZE: int = int(os.environ.get("PALETTE_MAX_COLLECTION_SIZE", "500"))
    MAX_RESULT_COUNT: int = int(os.environ.get("PALETTE_MAX_RESULT_COUNT", "50"))

    # CORS settings
    ALLOWED_ORIGINS: str = os.environ.get("PALETTE_ALLOWED_ORIGINS", "")

    # Observability
    METRICS_ENABLED: bool = bool(int(os.environ.get("PALETTE_METRICS_ENABLED", "1")))

    @classmethod
    def allowed_origins(cls) -> List[str]:
        """Parse comma-separated CORS origins."""
        return [origin.strip() for origin in cls.ALLOWED_ORIGINS.split(",") if origin.strip()]

    @classmethod
    def validate_count(cls, count: int) -> bool:
        """Validate a requested result count."""
        return 0 <= count <= cls.MAX_RESULT_COUNT

    @classmethod
    def validate_collection_size(cls, size: int) -> bool:
        """Validate the size of a submitted color collection."""
        return 0 <= size <= cls.MAX_COLLECTION_SIZE


# Global config instance
config = Config()
