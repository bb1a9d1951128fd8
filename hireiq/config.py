# hireiq/config.py
from __future__ import annotations

import os
from pathlib import Path

# --- Local data (read-only; the scoring core never writes) ---

# Directory searched for profile.json / jobs.json when no path is given.
HIREIQ_HOME: str = os.environ.get("HIREIQ_HOME", "").strip() or ".hireiq"

PROFILE_FILENAME = "profile.json"
JOBS_FILENAME = "jobs.json"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# --- Guardrails ---

# Matches the upload limit of the resume critique screen.
HIREIQ_MAX_RESUME_MB: int = _env_int("HIREIQ_MAX_RESUME_MB", 10)

# Rows per job card in `hireiq compare`.
HIREIQ_DISPLAY_LIMIT: int = _env_int("HIREIQ_DISPLAY_LIMIT", 8)


def default_profile_path() -> Path:
    return Path(HIREIQ_HOME) / PROFILE_FILENAME


def default_jobs_path() -> Path:
    return Path(HIREIQ_HOME) / JOBS_FILENAME


def max_resume_bytes() -> int:
    return max(1, HIREIQ_MAX_RESUME_MB) * 1024 * 1024
