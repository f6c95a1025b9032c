"""Tests for the options tab."""

from editor import OptionsEdit, QuoteItemStore, Tab, IDLE
from editor.options import next_option


def test_next_option_cycles_and_wraps():
    assert next_option('oi', '') == 'IN'
    assert next_option('oi', 'IN') == 'OUT'
    assert next_option('oi', 'OUT') == ''
    assert next_option('over', 'O') == ''
    # Unknown values restart the cycle
    assert next_option('lr', '?') == ''


def test_option_click_cycles_value(make_editor):
    items = QuoteItemStore(row_count=3)
    editor = make_editor(items)
    editor.activate_tab(Tab.OPTIONS)
    editor.handle_mode_toggle(Tab.OPTIONS)

    assert editor.session.mode == OptionsEdit()
    editor.handle_cell_click(1, 'lr')
    editor.handle_cell_click(1, 'lr')

    assert items.get_item(1).lr == 'R'


def test_option_clicks_need_edit_mode(make_editor):
    items = QuoteItemStore(row_count=3)
    editor = make_editor(items)
    editor.activate_tab(Tab.OPTIONS)

    editor.handle_cell_click(0, 'over')

    assert items.get_item(0).over == ''


def test_option_click_ignores_other_columns_and_sentinel(make_editor):
    items = QuoteItemStore(row_count=2)
    editor = make_editor(items)
    editor.activate_tab(Tab.OPTIONS)
    editor.handle_mode_toggle(Tab.OPTIONS)

    editor.handle_cell_click(0, 'location')
    editor.handle_cell_click(items.last_index, 'oi')

    assert items.get_item(0).location == ''
    assert items.get_item(items.last_index).oi == ''


def test_batch_cycle_sets_all_rows(make_editor):
    items = QuoteItemStore(row_count=3)
    editor = make_editor(items)
    editor.activate_tab(Tab.OPTIONS)
    editor.handle_mode_toggle(Tab.OPTIONS)

    editor.handle_batch_cycle('oi')

    assert [item.oi for item in items.get_items()] == ['IN', 'IN', 'IN', '']


def test_toggle_off(make_editor):
    editor = make_editor()
    editor.activate_tab(Tab.OPTIONS)
    editor.handle_mode_toggle(Tab.OPTIONS)
    editor.handle_mode_toggle(Tab.OPTIONS)
    assert editor.session.mode == IDLE
