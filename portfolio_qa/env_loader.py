"""portfolio_qa.env_loader

.env support (python-dotenv) for the API, the Streamlit demo and the scripts.

Each of them starts from its own working directory, so the file is searched upward from CWD.
Variables already set in the process environment win unless `override=True`.
`env_file_keys` reports which service settings a file sets, which build_service logs at startup
so a misspelled key (STORAGE_BACKED=sqlite) is visible instead of silently ignored.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from dotenv import dotenv_values, load_dotenv

# Keys read by config.Settings.load()
ENV_KEYS = (
    "STORAGE_BACKEND",
    "SQLITE_PATH",
    "CATALOG_PATH",
    "API_PREFIX",
    "CORS_ORIGINS",
    "UI_DEFAULT_DEBUG",
    "UI_SUGGESTED_QUESTIONS",
    "LOG_DIR",
    "LOG_LEVEL",
)


def find_env_file(start: Path, filename: str = ".env", max_levels: int = 6) -> Optional[Path]:
    cur = start.resolve()
    for _ in range(max_levels + 1):
        candidate = cur / filename
        if candidate.is_file():
            return candidate
        if cur.parent == cur:
            break
        cur = cur.parent
    return None


def load_env(dotenv_path: str | None = None, override: bool = False) -> str | None:
    """Load settings from `dotenv_path`, or the nearest .env above CWD.

    Returns the file used, or None when there is none.
    """
    path = Path(dotenv_path).expanduser() if dotenv_path else find_env_file(Path.cwd())
    if path is None or not path.is_file():
        return None
    load_dotenv(dotenv_path=str(path), override=override)
    return str(path)


def env_file_keys(dotenv_path: str) -> tuple[list[str], list[str]]:
    """Split the keys set in a .env file into (service settings, everything else)."""
    keys = list(dotenv_values(dotenv_path).keys())
    known = [k for k in keys if k in ENV_KEYS]
    other = [k for k in keys if k not in ENV_KEYS]
    return known, other
