"""Configuration management using environment variables"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Settings:
    """Application settings - only what the job domain services need"""

    def __init__(self):
        # Environment
        self.environment = os.getenv("ENVIRONMENT", "development")

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid LOG_LEVEL: {self.log_level}. "
                f"Must be one of {', '.join(VALID_LOG_LEVELS)}."
            )
        self.log_format = os.getenv("LOG_FORMAT", DEFAULT_LOG_FORMAT)

        # Event delivery: when true, a failing event handler aborts publishing
        self.event_handler_fail_fast = self._get_bool("EVENT_HANDLER_FAIL_FAST", False)

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable ('true'/'false', '1'/'0', 'yes'/'no')."""
        value = os.getenv(key, "").strip().lower()
        if not value:
            return default
        if value in ("true", "1", "yes"):
            return True
        if value in ("false", "0", "no"):
            return False
        raise ValueError(
            f"Invalid boolean for {key}: {value}. "
            f"Use true/false."
        )


# Global settings instance
settings = Settings()
