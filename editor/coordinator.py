"""Routes editor input to the controller that owns the live mode."""

import logging
from typing import Optional

from . import actions
from .drive_accessories import DriveAccessoriesController
from .dual_chain import DualChainController
from .host import EditorHost
from .location import LocationEntryController
from .mode import ModeController, TabController
from .models import CounterDirection, QuoteItemStore, Tab
from .options import FabricController, OptionsController
from .pricing import PricingService
from .state import DriveMode, DualChainMode, EditSession, EditorState, LocationEntry, OptionsEdit
from .store import StateStore

logger = logging.getLogger(__name__)

# Lookup order when routing an event to the owner of the live mode. Only one
# mode can be live, so the order never changes the outcome.
ROUTING_ORDER = (DriveMode, LocationEntry, OptionsEdit, DualChainMode)


class DetailEditor:
    """The multi-tab product detail editor.

    Entry points take plain values (tab ids, row indices, column keys) and
    return nothing; results are read back from the StateStore and the
    QuoteItemStore.
    """

    def __init__(self, items: QuoteItemStore, pricing: PricingService, host: EditorHost,
                 store: Optional[StateStore] = None, initial_tab: Tab = Tab.LOCATION):
        self.items = items
        self.pricing = pricing
        self.host = host
        self.store = store if store is not None else StateStore()
        self.modes = ModeController(self.store)

        deps = (self.store, self.modes, self.items, self.host, self.pricing)
        self.location = LocationEntryController(*deps)
        self.fabric = FabricController(*deps)
        self.options = OptionsController(*deps)
        self.drive = DriveAccessoriesController(*deps)
        self.dual_chain = DualChainController(*deps)

        self.controllers = {
            Tab.LOCATION: self.location,
            Tab.FABRIC: self.fabric,
            Tab.OPTIONS: self.options,
            Tab.DRIVE_ACCESSORIES: self.drive,
            Tab.DUAL_CHAIN: self.dual_chain,
        }
        self._mode_owners = {
            DriveMode: self.drive,
            LocationEntry: self.location,
            OptionsEdit: self.options,
            DualChainMode: self.dual_chain,
        }

        # Prices for items loaded with markers already set
        self.drive.recalculate()
        self.modes.switch_tab(initial_tab)
        self.controllers[initial_tab].activate()

    @property
    def state(self) -> EditorState:
        return self.store.get_state()

    @property
    def session(self) -> EditSession:
        return self.state.session

    def activate_tab(self, tab):
        """Switch tabs, leaving the current tab's mode through its own exit path."""
        tab = Tab(tab)
        self.controllers[self.session.active_tab].leave()
        self.modes.switch_tab(tab)
        self.controllers[tab].activate()
        logger.debug("Tab %s activated", tab.value)

    def handle_cell_click(self, row_index: int, column: str):
        owner = self._mode_owner()
        if owner is None:
            logger.debug("Click on row %s/%s outside any mode ignored", row_index, column)
            return
        owner.handle_cell_click(row_index, column)

    def handle_mode_toggle(self, tab, sub_mode=None):
        """A mode button was pressed on the given tab."""
        tab = Tab(tab)
        if tab != self.session.active_tab:
            logger.debug("Mode button of inactive tab %s ignored", tab.value)
            return

        if tab == Tab.LOCATION:
            self.location.toggle()
        elif tab == Tab.OPTIONS:
            self.options.toggle()
        elif tab == Tab.DRIVE_ACCESSORIES:
            self.drive.toggle(sub_mode)
        elif tab == Tab.DUAL_CHAIN:
            self.dual_chain.toggle(sub_mode)

    def handle_counter_change(self, kind, direction):
        if not isinstance(self.session.mode, DriveMode):
            logger.debug("Counter change outside drive/accessories mode ignored")
            return
        self.drive.handle_counter_change(kind, CounterDirection(direction))

    def handle_text_confirm(self, value: Optional[str] = None):
        """Enter pressed in the active input box; defaults to the pending text."""
        if value is None:
            value = self.session.pending_text
        owner = self._mode_owner()
        if owner is None:
            return
        owner.handle_text_confirm(value)

    def handle_text_edited(self, value: str):
        """Keep the pending text in step with the input box while a cell is targeted."""
        if self.session.target_cell is not None and value != self.session.pending_text:
            self.store.dispatch(actions.set_pending_text(value))

    def handle_batch_cycle(self, column: str):
        if isinstance(self.session.mode, OptionsEdit):
            self.options.batch_cycle(column)

    def _mode_owner(self) -> Optional[TabController]:
        mode = self.session.mode
        for mode_type in ROUTING_ORDER:
            if isinstance(mode, mode_type):
                return self._mode_owners[mode_type]
        return None
