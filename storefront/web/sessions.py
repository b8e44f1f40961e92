from __future__ import annotations

import logging
import secrets
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Optional

from storefront.services.checkout import Receipt
from storefront.shop.cart import Cart
from storefront.shop.catalog import Catalog

log = logging.getLogger(__name__)

COOKIE_NAME = "storefront_sid"
DEFAULT_MAX_SESSIONS = 10000


@dataclass
class ShopSession:
    sid: str
    cart: Cart
    theme: str = "light"
    last_receipt: Optional[Receipt] = None
    subscribed: bool = False


@dataclass
class SessionStore:
    """
    In-memory sessions, one cart each. Nothing survives a restart.

    Holds at most `max_sessions`; creating one more drops the least
    recently used session.
    """

    catalog: Catalog
    max_sessions: int = DEFAULT_MAX_SESSIONS
    sessions: "OrderedDict[str, ShopSession]" = field(default_factory=OrderedDict)

    def get(self, sid: Optional[str]) -> Optional[ShopSession]:
        if not sid:
            return None
        s = self.sessions.get(sid)
        if s is not None:
            self.sessions.move_to_end(sid)
        return s

    def transient(self) -> ShopSession:
        # read-only visitors get an empty, unstored session
        return ShopSession(sid="", cart=Cart(self.catalog))

    def create(self) -> ShopSession:
        while len(self.sessions) >= max(self.max_sessions, 1):
            oldest = next(iter(self.sessions))
            log.info("session store full, dropping %s", oldest)
            self.drop(oldest)
        sid = secrets.token_urlsafe(16)
        s = ShopSession(sid=sid, cart=Cart(self.catalog))
        self.sessions[sid] = s
        return s

    def drop(self, sid: str) -> None:
        self.sessions.pop(sid, None)
