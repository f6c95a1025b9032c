"""Shared fixtures for the editor tests."""

import pytest

from editor import DetailEditor, PricingService, QuoteItemStore, RecordingHost, StaticPriceSource

UNIT_PRICES = {
    "rollerBlind": {
        "winder": 30.0,
        "motor": 250.0,
        "remote": 100.0,
        "charger": 50.0,
        "cord": 30.0,
        "dual": 10.0,
    }
}


@pytest.fixture
def pricing():
    return PricingService(StaticPriceSource(UNIT_PRICES))


@pytest.fixture
def host():
    return RecordingHost()


@pytest.fixture
def make_editor(pricing, host):
    """Build an editor over the given items (default: 8 blank rows plus the sentinel)."""
    def _make(items=None):
        if items is None:
            items = QuoteItemStore(row_count=8)
        return DetailEditor(items, pricing, host)
    return _make
