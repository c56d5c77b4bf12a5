from __future__ import annotations

import math
from typing import Any, Optional

from storefront.config import settings


def to_number(v: Any) -> float:
    """Lenient numeric coercion: anything that is not a finite number counts as 0."""
    if isinstance(v, bool) or v is None:
        return 0.0
    try:
        n = float(v)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if math.isnan(n) or math.isinf(n):
        return 0.0
    return n


def parse_id(v: Any) -> Optional[int]:
    """Coerce a product id; ``None`` when it is missing, not numeric or out of float range."""
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, str):
        v = v.strip()
        if v == "":
            return None
    try:
        n = float(v)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(n) or math.isinf(n) or n != int(n):
        return None
    return int(n)


def fixed(v: Any, decimals: int | None = None) -> str:
    d = settings.decimals if decimals is None else decimals
    return f"{to_number(v):.{d}f}"


def money(v: Any) -> str:
    return f"{settings.currency}{fixed(v)}"
