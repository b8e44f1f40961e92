from __future__ import annotations

import math
import re
from typing import Any

MIN_QUANTITY = 1
MAX_QUANTITY = 9999

# plain decimal notation only: no exponents, no inf/nan
_QTY_RE = re.compile(r"\+?(\d+)(?:\.\d*)?")


def clamp_quantity(n: int, minimum: int = MIN_QUANTITY, maximum: int = MAX_QUANTITY) -> int:
    return max(minimum, min(n, maximum))


def coerce_quantity(v: Any, minimum: int = MIN_QUANTITY, maximum: int = MAX_QUANTITY) -> int:
    """
    Parse a raw quantity (form field text, int, float, None) and clamp it
    to `minimum`..`maximum`. Anything that is not a plain number becomes
    `minimum`; fractions are truncated. Never raises.
    """
    if isinstance(v, bool):
        return minimum
    if isinstance(v, int):
        return clamp_quantity(v, minimum, maximum)
    if isinstance(v, float):
        if not math.isfinite(v):
            return minimum
        return clamp_quantity(int(v), minimum, maximum)

    text = str(v).strip().replace(",", ".") if v is not None else ""
    m = _QTY_RE.fullmatch(text)
    if not m:
        return minimum
    digits = m.group(1).lstrip("0") or "0"
    if len(digits) > len(str(maximum)):
        return maximum
    return clamp_quantity(int(digits), minimum, maximum)


def is_valid_email(email: str | None) -> bool:
    # same rule as the sign-up form: must contain "@"
    return bool(email) and "@" in email
