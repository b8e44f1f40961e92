from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from storefront.shop.catalog import Catalog, CatalogEntry
from storefront.utils.validators import clamp_quantity, coerce_quantity

log = logging.getLogger(__name__)

ZERO = Decimal("0.00")


@dataclass(frozen=True)
class CartLine:
    product_id: str
    quantity: int


@dataclass(frozen=True)
class DerivedLineItem:
    entry: CatalogEntry
    quantity: int
    line_subtotal: Decimal

    # shortcuts used by templates and the receipt
    @property
    def id(self) -> str:
        return self.entry.id

    @property
    def title(self) -> str:
        return self.entry.title

    @property
    def unit_price(self) -> Decimal:
        return self.entry.unit_price


class Cart:
    """
    Quantity-keyed cart for one session.

    Raw state is an insertion-ordered mapping product_id -> quantity.
    Every stored quantity is within 1..MAX_QUANTITY: inputs are coerced
    before they are stored, so none of the mutators raise.

    Ids are not checked against the catalog when added. Lines whose id
    the catalog does not know are kept in raw state but left out of
    `derive_lines()` and `total()`.
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog
        self._qty: Dict[str, int] = {}

    # ---------------- mutators ----------------

    def add(self, product_id: str, quantity: Any = 1) -> None:
        q = coerce_quantity(quantity)
        self._qty[product_id] = clamp_quantity(self._qty.get(product_id, 0) + q)
        log.debug("cart add %s +%s -> %s", product_id, q, self._qty[product_id])

    def update(self, product_id: str, quantity: Any) -> None:
        if product_id not in self._qty:
            log.debug("cart update ignored, %s not in cart", product_id)
            return
        self._qty[product_id] = coerce_quantity(quantity)
        log.debug("cart update %s = %s", product_id, self._qty[product_id])

    def remove(self, product_id: str) -> None:
        if self._qty.pop(product_id, None) is not None:
            log.debug("cart remove %s", product_id)

    def clear(self) -> None:
        self._qty.clear()
        log.debug("cart cleared")

    # ---------------- reads ----------------

    @property
    def items(self) -> Tuple[CartLine, ...]:
        return tuple(CartLine(pid, q) for pid, q in self._qty.items())

    def quantity_of(self, product_id: str) -> Optional[int]:
        return self._qty.get(product_id)

    def derive_lines(self) -> List[DerivedLineItem]:
        lines: List[DerivedLineItem] = []
        for pid, q in self._qty.items():
            entry = self.catalog.lookup(pid)
            if entry is None:
                continue
            lines.append(DerivedLineItem(entry=entry, quantity=q, line_subtotal=entry.unit_price * q))
        return lines

    def total(self) -> Decimal:
        return sum((line.line_subtotal for line in self.derive_lines()), ZERO)

    def line_count(self) -> int:
        return len(self.derive_lines())

    def is_empty(self) -> bool:
        return self.line_count() == 0
