import logging
import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv


load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    """Application configuration loaded from environment variables.

    Values are read once at import time, after ``.env`` has been loaded.
    """

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: str = os.getenv("PORT", "4045")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    VIEW_NAME: str = os.getenv("VIEW_NAME", "result")

    @staticmethod
    def allowed_origins(extra_origins: List[str] | None = None) -> List[str]:
        merged = [o.strip() for o in os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000").split(",") if o.strip()]
        if extra_origins:
            merged.extend(extra_origins)
        # Deduplicate while preserving order
        seen = set()
        result: List[str] = []
        for origin in merged:
            if origin not in seen:
                seen.add(origin)
                result.append(origin)
        return result

    @classmethod
    def port(cls) -> int:
        return int(cls.PORT)

    @classmethod
    def log_level(cls) -> int:
        return getattr(logging, cls.LOG_LEVEL)

    @classmethod
    def validate(cls) -> None:
        if not cls.PORT.isdigit() or not 0 < int(cls.PORT) < 65536:
            raise ValueError(f"PORT must be an integer between 1 and 65535, got {cls.PORT!r}")
        if cls.LOG_LEVEL not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {cls.LOG_LEVEL!r}")
        if not cls.VIEW_NAME:
            raise ValueError("VIEW_NAME environment variable must not be empty")
