"""Load converter settings from the environment. Uses python-dotenv.

Values are read from `.env` in the project root (if present) and then from
the process environment. Callers should use the accessors below rather than
reading `os.environ` directly.
"""

import json
import logging
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from HijriCalendar import AdjustmentRule


def _project_root() -> Path:
    """Resolve project root (directory holding this module)."""
    return Path(__file__).resolve().parent


def load_config() -> None:
    """Load .env from project root. Idempotent; existing variables win."""
    load_dotenv(_project_root() / ".env", override=False)


def get_optional(key: str, default: str = "") -> str:
    """Get optional env var; return default if missing or empty."""
    load_config()
    val = os.getenv(key, "").strip()
    return val if val else default


def log_level() -> int:
    """Optional: logging level name for the command line. Default WARNING."""
    name = get_optional("HIJRI_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def log_file() -> Optional[Path]:
    """Optional: file to copy log output to."""
    val = get_optional("HIJRI_LOG_FILE")
    return Path(val) if val else None


def adjustments_file() -> Optional[Path]:
    """Optional: JSON file of month-length adjustments to register at startup."""
    val = get_optional("HIJRI_ADJUSTMENTS_FILE")
    return Path(val) if val else None


def load_adjustments(path: Path) -> List[AdjustmentRule]:
    """
    Read adjustment rules from a JSON array such as
    ``[{"year": 1444, "month": 8, "days": 1}]``.

    Raises:
        ValueError: If the file cannot be read or an entry is not a valid rule.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ValueError(f"Cannot read adjustments from {path}: {e}") from e

    if not isinstance(data, list):
        raise ValueError(f"Adjustments file {path} must contain a JSON array")

    rules = []
    for entry in data:
        if not isinstance(entry, dict) or not set(entry) <= set(AdjustmentRule._fields):
            raise ValueError(f"Invalid adjustment in {path}: {entry!r}")
        rules.append(AdjustmentRule(**entry))
    return rules
