from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]  # .../package root
load_dotenv(dotenv_path=ROOT_DIR / ".env")


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int | None = None) -> int | None:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    try:
        return int(v)
    except ValueError:
        raise RuntimeError(f"{keys[0]} must be an integer, got {v!r}") from None


@dataclass(frozen=True)
class Settings:
    site_name: str
    currency: str
    currency_symbol: str
    decimals: int
    host: str
    port: int
    log_level: str
    playlist_1: str
    playlist_2: str
    contact_email: str
    max_sessions: int = 10000


def load_settings() -> Settings:
    s = Settings(
        site_name=_get_env("SITE_NAME", default="EnableMeNow") or "EnableMeNow",
        currency=_get_env("CURRENCY", default="USD") or "USD",
        currency_symbol=_get_env("CURRENCY_SYMBOL", default="$") or "$",
        decimals=_get_int("DECIMALS", default=2),
        host=_get_env("HOST", "WEB_HOST", default="127.0.0.1") or "127.0.0.1",
        port=_get_int("PORT", "WEB_PORT", default=8000),
        log_level=(_get_env("LOG_LEVEL", default="INFO") or "INFO").upper(),
        playlist_1=_get_env("PLAYLIST_1", default="PL9tY0mSamplePlaylistIdAAAA") or "",
        playlist_2=_get_env("PLAYLIST_2", default="PL9tY0mSamplePlaylistIdBBBB") or "",
        contact_email=_get_env("CONTACT_EMAIL", default="hello@enablemenow.example") or "",
        max_sessions=_get_int("MAX_SESSIONS", default=10000),
    )

    if s.decimals < 0:
        raise RuntimeError("DECIMALS must be >= 0")
    if s.max_sessions < 1:
        raise RuntimeError("MAX_SESSIONS must be >= 1")
    if not 1 <= s.port <= 65535:
        raise RuntimeError("PORT must be between 1 and 65535")
    return s


settings = load_settings()
