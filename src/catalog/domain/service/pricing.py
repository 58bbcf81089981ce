"""Domain service: discount pricing.

Discounts do not stack. When several are active at once the deepest one
(lowest modifier) wins, and with none active the price is unchanged.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

from catalog.domain.model.product import Product

NO_DISCOUNT = Decimal("1")


def effective_price_modifier(product: Product, now: datetime | None = None) -> Decimal:
    """Return the multiplier to apply to ``product.price`` at ``now``."""
    if now is None:
        now = datetime.now(timezone.utc)
    active = [d.price_modifier for d in product.discounts if d.is_active(now)]
    return min(active, default=NO_DISCOUNT)
