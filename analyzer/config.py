"""
Centralized configuration for the HTML analyzer.
All settings loaded from environment variables with sensible defaults.
"""

import os
import logging
from dotenv import load_dotenv

from analyzer import __version__
from analyzer.depth import DepthPolicy

load_dotenv()

DEFAULT_LOG_LEVEL = "WARNING"


def _log_level(name: str) -> str:
    """Normalize a level name, falling back to DEFAULT_LOG_LEVEL if logging does not know it."""
    level = name.strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return DEFAULT_LOG_LEVEL


_requested_level = os.environ.get("ANALYZER_LOG_LEVEL", DEFAULT_LOG_LEVEL)

# Logging setup (stderr only; stdout carries the result)
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=_log_level(_requested_level),
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger("html-analyzer")

if _log_level(_requested_level) != _requested_level.strip().upper():
    logger.warning(f"Unknown ANALYZER_LOG_LEVEL {_requested_level!r}, using {DEFAULT_LOG_LEVEL}")


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Central configuration."""

    # Fetch
    TIMEOUT: float = float(os.environ.get("ANALYZER_TIMEOUT", "30"))
    USER_AGENT: str = os.environ.get("ANALYZER_USER_AGENT", f"html-analyzer/{__version__}")

    # Analysis
    DEPTH_POLICY: str = os.environ.get("ANALYZER_DEPTH_POLICY", "counter")
    VALIDATE: bool = _env_flag("ANALYZER_VALIDATE", "true")

    # Exit codes
    EXIT_OK: int = 0
    EXIT_FAILURE: int = 1
    EXIT_USAGE: int = 2

    @classmethod
    def depth_policy(cls) -> DepthPolicy:
        """Parse DEPTH_POLICY into a DepthPolicy. Raises ValueError on unknown names."""
        return DepthPolicy.parse(cls.DEPTH_POLICY)
