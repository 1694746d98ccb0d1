"""
Runtime configuration from environment variables.

Load order: .env.local (local dev, highest priority), then .env, then the
process environment. CLI flags override anything set here.

Variables:
    MINISEARCH_MAX_RESULTS     Default result limit (10)
    MINISEARCH_SNIPPET_WINDOW  Snippet length in characters (150)
    MINISEARCH_SNIPPET_LEAD    Characters shown before the match (75)
    MINISEARCH_DATA_FILE       Pipe-delimited corpus loaded on start-up (unset)
    LOG_LEVEL                  Console log level (INFO)
    MINISEARCH_LOG_FILE        Detailed log file (unset = console only)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent


def load_environment(root: Path = PROJECT_ROOT) -> Optional[Path]:
    """
    Load .env.local or .env from root into os.environ.

    Returns:
        Path of the file that was loaded, or None
    """
    env_local = root / ".env.local"
    env_file = root / ".env"

    for candidate in (env_local, env_file):
        if candidate.exists():
            load_dotenv(candidate, override=True)
            logger.debug(f"Loaded environment from {candidate}")
            return candidate
    return None


def _get_int(name: str, default: int, minimum: Optional[int] = None) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if minimum is not None and value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")
    return value


@dataclass(frozen=True)
class Settings:
    """Resolved configuration"""
    max_results: int = 10
    snippet_window: int = 150
    snippet_lead: int = 75
    data_file: Optional[str] = None
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from os.environ.

        Raises:
            ValueError: If a numeric variable is not an integer, or the
                snippet window is below 1 or the snippet lead below 0
        """
        return cls(
            max_results=_get_int("MINISEARCH_MAX_RESULTS", cls.max_results),
            snippet_window=_get_int("MINISEARCH_SNIPPET_WINDOW", cls.snippet_window, minimum=1),
            snippet_lead=_get_int("MINISEARCH_SNIPPET_LEAD", cls.snippet_lead, minimum=0),
            data_file=os.getenv("MINISEARCH_DATA_FILE") or None,
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            log_file=os.getenv("MINISEARCH_LOG_FILE") or None,
        )

    @property
    def console_level(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)
