"""Session ownership and the base class shared by the per-tab controllers."""

import logging
from typing import Optional, Tuple

from config import FOCUS_DELAY_MS
from . import actions
from .host import EditorHost, FocusTarget
from .models import QuoteItemStore, Tab
from .state import ActiveMode, EditSession, EditorState, TargetCell
from .store import StateStore

logger = logging.getLogger(__name__)


class ModeController:
    """Owns the active tab, the active mode and the target cell.

    Only one mode is live across the whole editor. Every way out of a mode
    goes through exit(), which clears the target cell and pending text.
    """

    def __init__(self, store: StateStore):
        self.store = store

    @property
    def session(self) -> EditSession:
        return self.store.get_state().session

    def enter(self, mode: ActiveMode, target: Optional[TargetCell] = None, pending_text: str = ""):
        logger.debug("Entering %s on %s (target=%s)", mode, self.session.active_tab.value, target)
        self.store.dispatch(actions.set_mode(mode, target, pending_text))

    def exit(self):
        if not self.session.is_idle:
            logger.debug("Leaving %s", self.session.mode)
        self.store.dispatch(actions.exit_mode())

    def retarget(self, target: Optional[TargetCell], pending_text: str = ""):
        self.store.dispatch(actions.set_target_cell(target, pending_text))

    def switch_tab(self, tab: Tab):
        """Install a fresh session on the given tab."""
        logger.debug("Switching to tab %s", tab.value)
        self.store.dispatch(actions.start_session(tab))


class TabController:
    """Base class for the controllers behind each tab.

    Subclasses override the hooks they need. The coordinator only calls a
    controller for events its own mode claims.
    """

    tab: Tab = None
    visible_columns: Tuple[str, ...] = ('sequence', 'fabric', 'location')

    def __init__(self, store: StateStore, modes: ModeController, items: QuoteItemStore,
                 host: EditorHost, pricing=None):
        self.store = store
        self.modes = modes
        self.items = items
        self.host = host
        self.pricing = pricing

    @property
    def state(self) -> EditorState:
        return self.store.get_state()

    @property
    def session(self) -> EditSession:
        return self.state.session

    def activate(self):
        """Called when the tab becomes active."""
        self.store.dispatch(actions.set_visible_columns(self.visible_columns))

    def leave(self):
        """Exit this tab's mode before a tab switch."""
        self.modes.exit()

    def handle_cell_click(self, row_index: int, column: str):
        pass

    def handle_text_confirm(self, value: str):
        pass

    def _focus(self, target: FocusTarget, delay_ms: int = FOCUS_DELAY_MS, select: bool = True):
        self.host.schedule_focus(target, delay_ms, select)

