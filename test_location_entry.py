"""Tests for sequential location entry on the location tab."""

from editor import FocusTarget, LineItem, LocationEntry, QuoteItemStore, Tab, TargetCell, IDLE


def _items():
    # Three filled rows; the store appends the blank sentinel as row 3
    return QuoteItemStore([LineItem(location=loc) for loc in ("Kitchen", "Bed 1", "Bed 2")])


def test_toggle_on_targets_first_row(make_editor, host):
    editor = make_editor(_items())

    editor.handle_mode_toggle(Tab.LOCATION)

    session = editor.session
    assert session.mode == LocationEntry()
    assert session.target_cell == TargetCell(0, 'location')
    assert session.pending_text == "Kitchen"
    assert host.focus_requests[-1].target == FocusTarget.LOCATION_INPUT
    assert host.focus_requests[-1].delay_ms == 50


def test_confirm_commits_and_advances(make_editor):
    items = _items()
    editor = make_editor(items)
    editor.handle_mode_toggle(Tab.LOCATION)

    editor.handle_text_confirm("Lounge")

    assert items.get_item(0).location == "Lounge"
    assert editor.session.target_cell == TargetCell(1, 'location')
    assert editor.session.pending_text == "Bed 1"


def test_confirm_on_last_editable_row_exits(make_editor):
    items = _items()
    editor = make_editor(items)
    editor.handle_mode_toggle(Tab.LOCATION)

    editor.handle_text_confirm("A")
    editor.handle_text_confirm("B")
    editor.handle_text_confirm("C")

    assert [item.location for item in items.get_items()] == ["A", "B", "C", ""]
    assert editor.session.mode == IDLE
    assert editor.session.target_cell is None
    assert editor.session.pending_text == ""


def test_click_retargets_without_committing(make_editor):
    items = _items()
    editor = make_editor(items)
    editor.handle_mode_toggle(Tab.LOCATION)
    editor.handle_text_edited("Half typed")

    editor.handle_cell_click(2, 'fabric')

    assert items.get_item(0).location == "Kitchen"
    assert editor.session.target_cell == TargetCell(2, 'location')
    assert editor.session.pending_text == "Bed 2"


def test_sentinel_row_is_never_targeted(make_editor):
    editor = make_editor(_items())
    editor.handle_mode_toggle(Tab.LOCATION)

    editor.handle_cell_click(3, 'location')
    editor.handle_cell_click(42, 'location')

    assert editor.session.target_cell == TargetCell(0, 'location')


def test_confirm_without_value_uses_pending_text(make_editor):
    items = _items()
    editor = make_editor(items)
    editor.handle_mode_toggle(Tab.LOCATION)
    editor.handle_text_edited("Study")

    editor.handle_text_confirm()

    assert items.get_item(0).location == "Study"


def test_toggle_off_clears_target_and_keeps_items(make_editor):
    items = _items()
    editor = make_editor(items)
    editor.handle_mode_toggle(Tab.LOCATION)
    editor.handle_text_edited("Not saved")

    editor.handle_mode_toggle(Tab.LOCATION)

    assert editor.session.mode == IDLE
    assert editor.session.target_cell is None
    assert editor.session.pending_text == ""
    assert items.get_item(0).location == "Kitchen"


def test_no_editable_rows_does_not_start(make_editor):
    editor = make_editor(QuoteItemStore())

    editor.handle_mode_toggle(Tab.LOCATION)

    assert editor.session.mode == IDLE
