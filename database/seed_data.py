"""Seed database with the preset accessory price list."""

import json
import logging

from config import SEED_DATA_PATH
from .models import AccessoryPrice
from .connection import session_scope

logger = logging.getLogger(__name__)


def load_accessory_prices():
    """Load accessory prices from JSON seed file."""
    prices_file = SEED_DATA_PATH / 'accessory_prices.json'
    if prices_file.exists():
        with open(prices_file, 'r', encoding='utf-8') as f:
            return json.load(f)
    logger.warning("Seed file %s not found, price table left empty", prices_file)
    return []


def seed_accessory_prices(session, prices_data=None):
    """Seed accessory price table if no preset rows exist."""
    existing_count = session.query(AccessoryPrice).filter(AccessoryPrice.is_preset == True).count()
    if existing_count > 0:
        return 0  # Already seeded

    if prices_data is None:
        prices_data = load_accessory_prices()
    count = 0
    for price_data in prices_data:
        price = AccessoryPrice(
            product_type=price_data['product_type'],
            kind=price_data['kind'],
            unit_price=float(price_data['unit_price']),
            description=price_data.get('description'),
            notes=price_data.get('notes'),
            is_preset=True
        )
        session.add(price)
        count += 1

    return count


def seed_database(prices_data=None):
    """Seed all preset data.

    Returns:
        Number of price rows added
    """
    with session_scope() as session:
        prices_added = seed_accessory_prices(session, prices_data)
    if prices_added:
        logger.info("Seeded %d accessory prices", prices_added)
    return prices_added
