"""Tests for dual bracket pairing and chain entry on the dual/chain tab."""

import sys

import pytest

from editor import (
    AccessoryKind, DualChainKind, DualChainMode, DualMarker, FocusTarget, LineItem, MotorMarker,
    NoticeLevel, QuoteItemStore, Tab, TargetCell, IDLE
)
from editor.validation import CHAIN_INVALID_MESSAGE, DUAL_NOT_ADJACENT_MESSAGE, DUAL_ODD_COUNT_MESSAGE

DUAL_CHAIN = Tab.DUAL_CHAIN


@pytest.fixture
def items():
    return QuoteItemStore(row_count=8)


@pytest.fixture
def editor(make_editor, items):
    editor = make_editor(items)
    editor.activate_tab(DUAL_CHAIN)
    return editor


def _mark_dual(editor, *rows):
    for row in rows:
        editor.handle_cell_click(row, 'dual')


def test_activate_shows_dual_and_chain_columns(editor):
    assert editor.state.visible_columns == ('sequence', 'fabric', 'location', 'dual', 'chain')


def test_adjacent_pairs_allow_exit(editor, items):
    editor.handle_mode_toggle(DUAL_CHAIN, DualChainKind.DUAL)
    _mark_dual(editor, 2, 3, 5, 6)

    editor.handle_mode_toggle(DUAL_CHAIN, DualChainKind.DUAL)

    assert editor.session.mode == IDLE
    assert items.paired_indices() == [2, 3, 5, 6]


@pytest.mark.parametrize("rows, message", [
    ((2, 3, 5), DUAL_ODD_COUNT_MESSAGE),
    ((2, 4), DUAL_NOT_ADJACENT_MESSAGE),
])
def test_invalid_pairs_block_exit(editor, items, host, rows, message):
    editor.handle_mode_toggle(DUAL_CHAIN, DualChainKind.DUAL)
    _mark_dual(editor, *rows)

    editor.handle_mode_toggle(DUAL_CHAIN, DualChainKind.DUAL)

    assert editor.session.mode == DualChainMode(DualChainKind.DUAL)
    assert items.paired_indices() == list(rows)
    assert host.notices[-1].message == message
    assert host.notices[-1].level == NoticeLevel.ERROR


def test_invalid_pairs_block_switch_to_chain(editor, host):
    editor.handle_mode_toggle(DUAL_CHAIN, DualChainKind.DUAL)
    _mark_dual(editor, 0)

    editor.handle_mode_toggle(DUAL_CHAIN, DualChainKind.CHAIN)

    assert editor.session.mode == DualChainMode(DualChainKind.DUAL)
    assert host.errors == [DUAL_ODD_COUNT_MESSAGE]


def test_tab_switch_goes_through_with_invalid_pairs(editor, items):
    editor.handle_mode_toggle(DUAL_CHAIN, DualChainKind.DUAL)
    _mark_dual(editor, 1, 3)

    editor.activate_tab(Tab.LOCATION)

    assert editor.session.active_tab == Tab.LOCATION
    assert editor.session.mode == IDLE
    assert editor.session.target_cell is None
    assert items.paired_indices() == [1, 3]


def test_dual_click_toggles_and_prices_immediately(editor, items):
    editor.handle_mode_toggle(DUAL_CHAIN, DualChainKind.DUAL)

    _mark_dual(editor, 0, 1)
    assert editor.state.dual.count == 2
    assert editor.state.dual.price == 10.0
    assert editor.state.accessories_total == 10.0

    _mark_dual(editor, 1)
    assert items.get_item(1).dual == DualMarker.NONE
    assert editor.state.dual.price == 0.0


def test_dual_click_on_sentinel_is_ignored(editor, items):
    editor.handle_mode_toggle(DUAL_CHAIN, DualChainKind.DUAL)
    _mark_dual(editor, items.last_index, 50)
    assert items.paired_indices() == []


def test_chain_mode_starts_without_target(editor):
    editor.handle_mode_toggle(DUAL_CHAIN, DualChainKind.CHAIN)
    assert editor.session.mode == DualChainMode(DualChainKind.CHAIN)
    assert editor.session.target_cell is None


def test_chain_click_targets_row_and_focuses_input(editor, host):
    editor.handle_mode_toggle(DUAL_CHAIN, DualChainKind.CHAIN)

    editor.handle_cell_click(1, 'chain')

    assert editor.session.target_cell == TargetCell(1, 'chain')
    assert host.focus_requests[-1].target == FocusTarget.CHAIN_INPUT


def test_chain_click_on_sentinel_is_ignored(editor, items):
    editor.handle_mode_toggle(DUAL_CHAIN, DualChainKind.CHAIN)
    editor.handle_cell_click(items.last_index, 'chain')
    assert editor.session.target_cell is None


def test_chain_confirm_stores_positive_integer(editor, items):
    editor.handle_mode_toggle(DUAL_CHAIN, DualChainKind.CHAIN)
    editor.handle_cell_click(1, 'chain')

    editor.handle_text_confirm("4")

    assert items.get_item(1).chain == 4
    assert editor.session.target_cell is None
    assert editor.session.pending_text == ""
    assert editor.session.mode == DualChainMode(DualChainKind.CHAIN)


def test_chain_confirm_empty_clears_value(editor, items):
    items.update_item_property(2, 'chain', 7)
    editor.handle_mode_toggle(DUAL_CHAIN, DualChainKind.CHAIN)
    editor.handle_cell_click(2, 'chain')
    assert editor.session.pending_text == "7"

    editor.handle_text_confirm("")

    assert items.get_item(2).chain is None


@pytest.mark.parametrize("text", ["0", "-1", "3.5", "abc"])
def test_chain_confirm_rejects_bad_input(editor, items, host, text):
    items.update_item_property(0, 'chain', 5)
    editor.handle_mode_toggle(DUAL_CHAIN, DualChainKind.CHAIN)
    editor.handle_cell_click(0, 'chain')

    editor.handle_text_confirm(text)

    assert items.get_item(0).chain == 5
    assert editor.session.target_cell == TargetCell(0, 'chain')
    assert host.errors == [CHAIN_INVALID_MESSAGE]


def test_chain_confirm_without_target_is_ignored(editor, items):
    editor.handle_mode_toggle(DUAL_CHAIN, DualChainKind.CHAIN)
    editor.handle_text_confirm("4")
    assert all(item.chain is None for item in items.get_items())


def test_leaving_chain_clears_target(editor):
    editor.handle_mode_toggle(DUAL_CHAIN, DualChainKind.CHAIN)
    editor.handle_cell_click(0, 'chain')
    editor.handle_text_edited("12")

    editor.handle_mode_toggle(DUAL_CHAIN, DualChainKind.CHAIN)

    assert editor.session.mode == IDLE
    assert editor.session.target_cell is None
    assert editor.session.pending_text == ""


def test_activation_picks_up_drive_prices(make_editor, items):
    items.update_item_property(0, 'motor', MotorMarker.SET)
    editor = make_editor(items)

    editor.activate_tab(Tab.DRIVE_ACCESSORIES)
    editor.handle_mode_toggle(Tab.DRIVE_ACCESSORIES, AccessoryKind.REMOTE)  # remote -> 1
    editor.activate_tab(DUAL_CHAIN)

    assert editor.state.summary_prices[AccessoryKind.MOTOR] == 250.0
    assert editor.state.summary_prices[AccessoryKind.REMOTE] == 100.0
    assert editor.state.accessories_total == 350.0

    editor.handle_mode_toggle(DUAL_CHAIN, DualChainKind.DUAL)
    _mark_dual(editor, 3, 4)
    assert editor.state.accessories_total == 360.0


def test_activation_prices_preloaded_pairs(make_editor):
    items = QuoteItemStore([LineItem(dual=DualMarker.PAIRED), LineItem(dual=DualMarker.PAIRED)])
    editor = make_editor(items)

    editor.activate_tab(DUAL_CHAIN)

    assert editor.state.dual.count == 2
    assert editor.state.dual.price == 10.0
    assert editor.state.accessories_total == 10.0


def test_chain_confirm_rejects_overlong_number(editor, items, host):
    limit = getattr(sys, "get_int_max_str_digits", lambda: 0)()
    if not limit:
        pytest.skip("interpreter has no int string conversion limit")
    editor.handle_mode_toggle(DUAL_CHAIN, DualChainKind.CHAIN)
    editor.handle_cell_click(0, 'chain')

    editor.handle_text_confirm("9" * (limit + 1))

    assert items.get_item(0).chain is None
    assert editor.session.target_cell == TargetCell(0, 'chain')
    assert host.errors == [CHAIN_INVALID_MESSAGE]
