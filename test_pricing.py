"""Tests for the pricing service and the price sources."""

import pytest

from database import init_db, seed_database, session_scope, AccessoryPrice
from editor import AccessoryKind, DualMarker, LineItem, PricingError
from editor.pricing import DatabasePriceSource, PricingService, StaticPriceSource

PRODUCT = "rollerBlind"


def test_drive_kinds_price_by_count(pricing):
    assert pricing.price_accessory(PRODUCT, AccessoryKind.MOTOR, {"count": 3}) == 750.0
    assert pricing.price_accessory(PRODUCT, AccessoryKind.REMOTE, {"count": 1}) == 100.0
    assert pricing.price_accessory(PRODUCT, "cord", {"count": 2}) == 60.0


def test_missing_count_prices_zero(pricing):
    assert pricing.price_accessory(PRODUCT, AccessoryKind.WINDER, {}) == 0.0
    assert pricing.price_accessory(PRODUCT, AccessoryKind.CHARGER, {"count": None}) == 0.0


def test_dual_is_priced_per_pair(pricing):
    items = [LineItem(dual=DualMarker.PAIRED) for _ in range(4)] + [LineItem()]
    assert pricing.price_accessory(PRODUCT, AccessoryKind.DUAL, {"items": items}) == 20.0
    # An unpaired leftover bracket is not charged
    assert pricing.price_accessory(PRODUCT, AccessoryKind.DUAL, {"count": 3}) == 10.0


def test_pricing_is_deterministic(pricing):
    first = pricing.price_accessory(PRODUCT, AccessoryKind.MOTOR, {"count": 2})
    second = pricing.price_accessory(PRODUCT, AccessoryKind.MOTOR, {"count": 2})
    assert first == second


def test_negative_count_is_an_error(pricing):
    with pytest.raises(PricingError):
        pricing.price_accessory(PRODUCT, AccessoryKind.CORD, {"count": -1})


def test_unknown_product_is_an_error(pricing):
    with pytest.raises(PricingError):
        pricing.price_accessory("venetian", AccessoryKind.MOTOR, {"count": 1})


def test_unknown_kind_is_an_error(pricing):
    with pytest.raises(PricingError):
        pricing.price_accessory(PRODUCT, "pelmet", {"count": 1})


def test_static_source_rejects_unknown_kind_names():
    with pytest.raises(PricingError):
        StaticPriceSource({PRODUCT: {"pelmet": 5}})


def test_database_seed_and_lookup(tmp_path):
    init_db(f"sqlite:///{tmp_path / 'prices.db'}")

    assert seed_database() == 6
    assert seed_database() == 0  # Already seeded

    source = DatabasePriceSource()
    assert source.unit_price(PRODUCT, AccessoryKind.MOTOR) == 250.0
    assert source.unit_price(PRODUCT, AccessoryKind.DUAL) == 10.0

    service = PricingService(source)
    assert service.price_accessory(PRODUCT, AccessoryKind.WINDER, {"count": 2}) == 60.0


def test_database_source_reload_picks_up_changes(tmp_path):
    init_db(f"sqlite:///{tmp_path / 'prices.db'}")
    seed_database()

    source = DatabasePriceSource()
    assert source.unit_price(PRODUCT, AccessoryKind.REMOTE) == 100.0

    with session_scope() as session:
        row = session.query(AccessoryPrice).filter_by(product_type=PRODUCT, kind="remote").one()
        row.unit_price = 120.0

    assert source.unit_price(PRODUCT, AccessoryKind.REMOTE) == 100.0  # Cached
    source.reload()
    assert source.unit_price(PRODUCT, AccessoryKind.REMOTE) == 120.0

    with pytest.raises(PricingError):
        source.unit_price("venetian", AccessoryKind.REMOTE)
