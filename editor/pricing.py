"""Accessory sale prices.

The pricing service is a pure function of its inputs. Unit prices come from a
PriceSource: a plain dict for tests and headless use, or the accessory_prices
table in the database.
"""

import logging
from typing import Dict, Mapping, Optional, Sequence, Tuple

from .errors import PricingError
from .models import AccessoryKind, LineItem

logger = logging.getLogger(__name__)


class PriceSource:
    """Lookup of unit sale prices."""

    def unit_price(self, product_type: str, kind: AccessoryKind) -> float:
        """Return the unit price or raise PricingError."""
        raise NotImplementedError


class StaticPriceSource(PriceSource):
    """Unit prices held in memory: {product_type: {kind: price}}."""

    def __init__(self, table: Mapping[str, Mapping]):
        self._table = {
            product: {_as_kind(kind): float(price) for kind, price in prices.items()}
            for product, prices in table.items()
        }

    def unit_price(self, product_type, kind):
        try:
            return self._table[product_type][kind]
        except KeyError:
            raise PricingError(f"No unit price for {product_type}/{kind.value}") from None


class DatabasePriceSource(PriceSource):
    """Unit prices read from the accessory_prices table, cached until reload()."""

    def __init__(self):
        self._cache: Optional[Dict[Tuple[str, AccessoryKind], float]] = None

    def reload(self):
        from database import AccessoryPrice, session_scope

        cache = {}
        with session_scope() as session:
            for row in session.query(AccessoryPrice).all():
                try:
                    kind = AccessoryKind(row.kind)
                except ValueError:
                    logger.warning("Ignoring price row with unknown kind %r", row.kind)
                    continue
                cache[(row.product_type, kind)] = row.unit_price
        self._cache = cache
        logger.debug("Loaded %d accessory prices", len(cache))

    def unit_price(self, product_type, kind):
        if self._cache is None:
            self.reload()
        try:
            return self._cache[(product_type, kind)]
        except KeyError:
            raise PricingError(f"No unit price for {product_type}/{kind.value}") from None


def _as_kind(kind) -> AccessoryKind:
    if isinstance(kind, AccessoryKind):
        return kind
    try:
        return AccessoryKind(kind)
    except ValueError:
        raise PricingError(f"Unknown accessory kind: {kind!r}") from None


def count_paired(items: Sequence[LineItem]) -> int:
    return sum(1 for item in items if item.is_paired)


class PricingService:
    """Computes accessory sale prices from counts and unit prices."""

    def __init__(self, source: PriceSource):
        self.source = source

    def price_accessory(self, product_type: str, kind, params: Optional[Mapping] = None) -> float:
        """Price one accessory kind.

        Args:
            product_type: Product key in the price tables (e.g. "rollerBlind")
            kind: AccessoryKind or its string value
            params: {"count": int} for the drive kinds; the dual kind also
                accepts {"items": [...]} and counts paired rows itself

        Returns:
            Total price rounded to cents

        Raises:
            PricingError: unknown kind or product, or a negative count
        """
        kind = _as_kind(kind)
        params = params or {}

        if kind == AccessoryKind.DUAL and params.get("items") is not None:
            count = count_paired(params["items"])
        else:
            count = params.get("count") or 0

        if not isinstance(count, int) or count < 0:
            raise PricingError(f"Invalid count for {kind.value}: {count!r}")

        unit_price = self.source.unit_price(product_type, kind)

        # Dual brackets are sold per pair of blinds
        quantity = count // 2 if kind == AccessoryKind.DUAL else count
        return round(quantity * unit_price, 2)
