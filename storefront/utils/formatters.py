from __future__ import annotations

from decimal import Decimal
from urllib.parse import quote

from storefront.config import settings

EMBED_BASE = "https://www.youtube.com/embed/videoseries?list="


def money(v: Decimal | float | int, symbol: str | None = None, decimals: int | None = None) -> str:
    sym = settings.currency_symbol if symbol is None else symbol
    d = settings.decimals if decimals is None else decimals
    return f"{sym}{Decimal(v):.{d}f}"


def playlist_embed_url(playlist_id: str) -> str:
    return EMBED_BASE + quote((playlist_id or "").strip(), safe="")
