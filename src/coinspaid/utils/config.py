"""Configuration management."""

import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Configuration for the CoinsPaid processing API."""

    # Environment: ['live', 'sandbox']
    ENVIRONMENT: str = os.getenv("COINSPAID_ENVIRONMENT", "sandbox")

    # API credentials
    API_KEY: str = os.getenv("COINSPAID_API_KEY", "")
    API_SECRET: str = os.getenv("COINSPAID_API_SECRET", "")

    # Explicit endpoint, wins over ENVIRONMENT when set
    BASE_URL: str = os.getenv("COINSPAID_BASE_URL", "")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOGGER_NAME: str = os.getenv("COINSPAID_LOGGER_NAME", "coinspaid")

    # REST API URLs
    REST_LIVE_URL = "https://app.coinspaid.com/api/v2/"
    REST_SANDBOX_URL = "https://app.sandbox.cryptoprocessing.com/api/v2/"

    # Connection settings
    REST_TIMEOUT = 10  # seconds

    @classmethod
    def get_rest_url(cls) -> str:
        """Get REST API URL based on environment."""
        if cls.BASE_URL:
            return cls.BASE_URL
        return cls.REST_SANDBOX_URL if cls.is_sandbox() else cls.REST_LIVE_URL

    @classmethod
    def is_sandbox(cls) -> bool:
        """Check if running against the sandbox."""
        return cls.ENVIRONMENT != "live"

    @classmethod
    def validate(cls) -> bool:
        """Validate configuration."""
        if not cls.API_KEY or not cls.API_SECRET:
            return False
        return True
