"""
Configuration module for the itinerary search engine.

Centralizes environment-driven settings and defaults so os.getenv calls
are not scattered around the codebase.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


@dataclass(frozen=True)
class SearchConfig:
    """Per-request search limits."""

    request_timeout_seconds: float = field(
        default_factory=lambda: _env_float("ITINERARY_REQUEST_TIMEOUT", 30.0)
    )
    default_min_seats: int = 1

    def __post_init__(self) -> None:
        if self.request_timeout_seconds <= 0:
            raise ValueError(
                f"request_timeout_seconds must be > 0, got {self.request_timeout_seconds}"
            )


@dataclass(frozen=True)
class StorageConfig:
    """Inventory storage location."""

    database_path: str = field(
        default_factory=lambda: os.getenv("ITINERARY_DB_PATH", "data/segments.db")
    )
    table_name: str = "segments"


@dataclass(frozen=True)
class Settings:
    """Main configuration container providing access to all config sections."""

    search: SearchConfig = field(default_factory=SearchConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
