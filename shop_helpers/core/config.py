import logging
import os
from dataclasses import dataclass
from urllib.parse import urlparse

from dotenv import load_dotenv

from ..services.slugs import Slugifier, resolve_slugifier


load_dotenv()


@dataclass(frozen=True)
class Config:
    """Application configuration loaded from environment variables.

    Values are read once at import time, after ``.env`` is loaded.
    """

    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")
    ROOT_URL: str = os.getenv("ROOT_URL", "http://localhost:3000/")
    SHOP_LANGUAGE: str = os.getenv("SHOP_LANGUAGE", "en")

    @classmethod
    def log_level(cls) -> int:
        level = logging.getLevelName(cls.LOG_LEVEL.strip().upper())
        if not isinstance(level, int):
            raise ValueError(f"LOG_LEVEL {cls.LOG_LEVEL!r} is not a valid logging level")
        return level

    @classmethod
    def default_slugifier(cls) -> Slugifier:
        return resolve_slugifier(cls.SHOP_LANGUAGE)

    @classmethod
    def validate(cls) -> None:
        cls.log_level()
        parsed = urlparse(cls.ROOT_URL)
        if not parsed.scheme or not parsed.hostname:
            raise ValueError("ROOT_URL environment variable must be an absolute URL")
