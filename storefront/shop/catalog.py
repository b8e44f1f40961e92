from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Iterable, Iterator, List, Optional

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class CatalogEntry:
    id: str
    title: str
    unit_price: Decimal
    description: str = ""
    badge: Optional[str] = None
    category: str = ""

    def __post_init__(self) -> None:
        price = Decimal(str(self.unit_price)).quantize(CENTS)
        if price < 0:
            raise ValueError(f"unit_price must be >= 0 ({self.id})")
        object.__setattr__(self, "unit_price", price)


class Catalog:
    """
    Read-only product reference data, keyed by product id.

    Built once at startup. A "changed" catalog is a new Catalog object
    (see `extended`), never an in-place edit.
    """

    def __init__(self, entries: Iterable[CatalogEntry] = ()):
        by_id: Dict[str, CatalogEntry] = {}
        for e in entries:
            if e.id in by_id:
                raise ValueError(f"duplicate catalog id: {e.id}")
            by_id[e.id] = e
        self._by_id = by_id

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> "Catalog":
        return cls(
            CatalogEntry(
                id=str(r["id"]),
                title=str(r["title"]),
                unit_price=Decimal(str(r["price"])),
                description=str(r.get("description", "")),
                badge=r.get("badge") or None,
                category=str(r.get("category", "")),
            )
            for r in records
        )

    def lookup(self, product_id: str) -> Optional[CatalogEntry]:
        return self._by_id.get(product_id)

    def extended(self, entries: Iterable[CatalogEntry]) -> "Catalog":
        return Catalog([*self._by_id.values(), *entries])

    def entries(self) -> List[CatalogEntry]:
        return list(self._by_id.values())

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._by_id

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)


def default_catalog() -> Catalog:
    from storefront.constants import PRODUCTS

    return Catalog.from_records(PRODUCTS)
