from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


def load_env(*, override: bool = False) -> Path | None:
    repo_root = Path(__file__).resolve().parents[2]
    candidates = [
        repo_root / ".env",
        Path.cwd() / ".env",
    ]
    for path in candidates:
        if path.is_file():
            load_dotenv(dotenv_path=path, override=override)
            return path
    return None


def resolve_api_key(api_key: str | None = None) -> str | None:
    """
    Return the explicit key, or `TMDB_API_KEY` from the environment (after `.env` loading).
    """

    if api_key and api_key.strip():
        return api_key.strip()
    load_env()
    resolved = (os.getenv("TMDB_API_KEY") or "").strip()
    return resolved or None


def require_api_key(api_key: str | None = None) -> str:
    resolved = resolve_api_key(api_key)
    if not resolved:
        raise RuntimeError("TMDB_API_KEY is not set.")
    return resolved


def resolve_base_url(default: str) -> str:
    return (os.getenv("TMDB_API_BASE_URL") or "").strip() or default
