"""Location tab: sequential entry of room locations, one row after another."""

import logging

from config import SELECT_DELAY_MS
from .host import FocusTarget
from .mode import TabController
from .models import Tab
from .state import LocationEntry, TargetCell

logger = logging.getLogger(__name__)

LOCATION_COLUMN = 'location'


class LocationEntryController(TabController):
    """Drives a cursor down the location column.

    Confirming a value commits it and moves to the next row; confirming on
    the last editable row ends the mode. The sentinel row is never targeted.
    """

    tab = Tab.LOCATION
    visible_columns = ('sequence', 'fabric', 'location')
    mode = LocationEntry()

    @property
    def is_active(self) -> bool:
        return self.session.mode == self.mode

    def toggle(self):
        """Turn location entry on (cursor on the first row) or off."""
        if self.is_active:
            self.modes.exit()
            return

        if not self.items.is_editable(0):
            logger.debug("No editable rows, location entry not started")
            return

        self.modes.enter(self.mode, self._target(0), self._current_value(0))
        self._focus(FocusTarget.LOCATION_INPUT)

    def handle_cell_click(self, row_index: int, column: str):
        """Move the cursor to the clicked row. Pending text is not committed."""
        if not self.items.is_editable(row_index):
            return
        self.modes.retarget(self._target(row_index), self._current_value(row_index))
        self._focus(FocusTarget.LOCATION_INPUT)

    def handle_text_confirm(self, value: str):
        target = self.session.target_cell
        if target is None:
            return

        self.items.update_item_property(target.row_index, LOCATION_COLUMN, value)

        next_row = target.row_index + 1
        if self.items.is_editable(next_row):
            self.modes.retarget(self._target(next_row), self._current_value(next_row))
            self._focus(FocusTarget.LOCATION_INPUT, SELECT_DELAY_MS)
        else:
            logger.debug("Location entered on last row %s, leaving entry mode", target.row_index)
            self.modes.exit()

    def _target(self, row_index: int) -> TargetCell:
        return TargetCell(row_index, LOCATION_COLUMN)

    def _current_value(self, row_index: int) -> str:
        item = self.items.get_item(row_index)
        return item.location if item is not None else ""
