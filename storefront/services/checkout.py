from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Iterator, List, Optional, Tuple

from storefront.config import settings
from storefront.constants import MSG_CART_EMPTY, MSG_CHECKOUT_OK
from storefront.shop.cart import Cart, DerivedLineItem

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Receipt:
    number: str
    created_at: datetime
    lines: List[DerivedLineItem]
    total: Decimal
    currency: str


class ReceiptNumbers:
    """Sequential receipt numbers: R-000001, R-000002, ..."""

    def __init__(self, start: int = 1):
        self._seq: Iterator[int] = itertools.count(start)

    def next(self) -> str:
        return f"R-{next(self._seq):06d}"


def checkout(
    cart: Cart,
    numbers: ReceiptNumbers,
    currency: str | None = None,
) -> Tuple[bool, str, Optional[Receipt]]:
    """
    Snapshot the cart into a receipt and clear it.

    An empty cart (no lines that resolve in the catalog) is refused and
    left untouched. There is no payment step, so a non-empty cart always
    succeeds.
    """
    lines = cart.derive_lines()
    if not lines:
        log.info("checkout rejected: cart is empty")
        return False, MSG_CART_EMPTY, None

    receipt = Receipt(
        number=numbers.next(),
        created_at=datetime.now(),
        lines=lines,
        total=cart.total(),
        currency=currency or settings.currency,
    )
    cart.clear()

    log.info("checkout %s: %d lines, total=%s", receipt.number, len(lines), receipt.total)
    return True, MSG_CHECKOUT_OK, receipt
