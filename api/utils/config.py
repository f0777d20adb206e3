# api/utils/config.py
import os
import logging

logger = logging.getLogger("floorplan_drafter.api")

class Config:
    """Application configuration loaded from environment variables"""

    # API authentication
    API_KEY = os.environ.get("API_KEY", "dev_key")

    # Layout generator gateway (OpenAI-compatible chat completions)
    LAYOUT_GATEWAY_URL = os.environ.get("LAYOUT_GATEWAY_URL")
    LAYOUT_GATEWAY_API_KEY = os.environ.get("LAYOUT_GATEWAY_API_KEY")
    LAYOUT_MODEL = os.environ.get("LAYOUT_MODEL", "google/gemini-2.5-flash")
    LAYOUT_TIMEOUT = float(os.environ.get("LAYOUT_TIMEOUT", "120"))

    # Application settings
    DEBUG = os.environ.get("DEBUG", "false").lower() == "true"

    @classmethod
    def generator_configured(cls) -> bool:
        return bool(cls.LAYOUT_GATEWAY_URL and cls.LAYOUT_GATEWAY_API_KEY)

    @classmethod
    def validate(cls):
        """Validate critical configuration values"""
        if not cls.API_KEY or cls.API_KEY == "dev_key":
            logger.warning("Using development API key - not secure for production!")

        if not cls.LAYOUT_GATEWAY_URL:
            logger.warning("LAYOUT_GATEWAY_URL not set; generation endpoints are disabled")

        if not cls.LAYOUT_GATEWAY_API_KEY:
            logger.warning("LAYOUT_GATEWAY_API_KEY not set; generation endpoints are disabled")
