from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Tuple

from storefront.constants import DEFAULT_PLAN_ID, MEMBERSHIP_PREFIX, MSG_INVALID_EMAIL, PLANS
from storefront.shop.cart import Cart
from storefront.utils.validators import is_valid_email

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Plan:
    id: str
    name: str
    price_monthly: Decimal
    blurb: str = ""
    features: List[str] = field(default_factory=list)
    popular: bool = False

    @property
    def cart_id(self) -> str:
        return f"{MEMBERSHIP_PREFIX}{self.id}"


def load_plans() -> List[Plan]:
    return [
        Plan(
            id=p["id"],
            name=p["name"],
            price_monthly=Decimal(p["price_monthly"]),
            blurb=p.get("blurb", ""),
            features=list(p.get("features", [])),
            popular=bool(p.get("popular", False)),
        )
        for p in PLANS
    ]


def find_plan(plans: List[Plan], plan_id: Optional[str]) -> Plan:
    # unknown ids fall back to the default plan, like the plan picker
    for p in plans:
        if p.id == plan_id:
            return p
    for p in plans:
        if p.id == DEFAULT_PLAN_ID:
            return p
    return plans[0]


def join_membership(cart: Cart, email: Optional[str], plan: Plan) -> Tuple[bool, str]:
    """
    Sign `email` up for `plan`.

    A join is recorded as one `membership-<plan id>` line in the cart.
    That id is not a catalog product, so the line stays out of the
    derived lines and the total.
    """
    email = (email or "").strip()
    if not is_valid_email(email):
        log.info("membership join rejected: invalid email %r", email)
        return False, MSG_INVALID_EMAIL

    cart.add(plan.cart_id, 1)
    log.info("membership join: plan=%s email=%s", plan.id, email)
    return True, f"Welcome to {plan.name}, {email}!"
