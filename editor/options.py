"""Fabric and options tabs."""

import logging

from .mode import TabController
from .models import Tab
from .state import OptionsEdit

logger = logging.getLogger(__name__)

# Values each option column cycles through, blank first
OPTION_CYCLES = {
    'over': ('', 'O'),
    'oi': ('', 'IN', 'OUT'),
    'lr': ('', 'L', 'R'),
}


def next_option(column: str, value: str) -> str:
    cycle = OPTION_CYCLES[column]
    try:
        position = cycle.index(value)
    except ValueError:
        position = -1
    return cycle[(position + 1) % len(cycle)]


class FabricController(TabController):
    """Fabric tab; only sets its visible columns here."""

    tab = Tab.FABRIC
    visible_columns = ('sequence', 'fabric', 'location')


class OptionsController(TabController):
    """Options tab: click an option cell to cycle its value."""

    tab = Tab.OPTIONS
    visible_columns = ('sequence', 'location', 'over', 'oi', 'lr')
    mode = OptionsEdit()

    @property
    def is_active(self) -> bool:
        return self.session.mode == self.mode

    def toggle(self):
        if self.is_active:
            self.modes.exit()
        else:
            self.modes.enter(self.mode)

    def handle_cell_click(self, row_index: int, column: str):
        if column not in OPTION_CYCLES or not self.items.is_editable(row_index):
            return
        item = self.items.get_item(row_index)
        self.items.update_item_property(row_index, column, next_option(column, getattr(item, column)))

    def batch_cycle(self, column: str):
        """Set every editable row to the value after the first row's value."""
        if column not in OPTION_CYCLES:
            raise ValueError(f"{column} is not an option column")
        first = self.items.get_item(0)
        if first is None or not self.items.is_editable(0):
            return
        value = next_option(column, getattr(first, column))
        for row_index in self.items.editable_rows():
            self.items.update_item_property(row_index, column, value)
        logger.debug("Set %s to %r on all rows", column, value)
