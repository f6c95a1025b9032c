"""Dual/chain tab: dual bracket pairing, chain lengths, and the accessories summary."""

import logging
from typing import Optional

from . import actions
from .host import FocusTarget, NoticeLevel
from .mode import TabController
from .models import AccessoryKind, DRIVE_KINDS, DualChainKind, DualMarker, Tab
from .state import AccessoryLine, DualChainMode, TargetCell
from .validation import check_dual_pairs, parse_chain_value

logger = logging.getLogger(__name__)

DUAL_COLUMN = 'dual'
CHAIN_COLUMN = 'chain'


class DualChainController(TabController):
    """Dual and chain sub-modes, mutually exclusive.

    Pressing a button to leave dual mode is refused until the marked rows
    form adjacent pairs; a tab switch always goes through.
    The dual price is recomputed on every marker change, and with it the
    accessories total that also covers the drive/accessory prices.
    """

    tab = Tab.DUAL_CHAIN
    visible_columns = ('sequence', 'fabric', 'location', 'dual', 'chain')

    @property
    def active_kind(self) -> Optional[DualChainKind]:
        mode = self.session.mode
        return mode.kind if isinstance(mode, DualChainMode) else None

    def activate(self):
        super().activate()
        # Pick up drive/accessory prices computed while this tab was inactive
        self.store.dispatch(actions.set_summary_prices(self.state.drive_summary.prices()))
        self.recalculate_dual()

    def toggle(self, kind):
        """Press the dual or chain button."""
        kind = DualChainKind(kind)
        current = self.active_kind
        new_kind = None if current == kind else kind

        if current == DualChainKind.DUAL and not self.validate_dual_selection():
            return

        if new_kind is None:
            self.modes.exit()
            return

        self.modes.enter(DualChainMode(new_kind))
        if new_kind == DualChainKind.DUAL:
            self.recalculate_dual()

    def validate_dual_selection(self) -> bool:
        """Check dual pairing, telling the user what is wrong if it fails."""
        result = check_dual_pairs(self.items.paired_indices())
        if not result.valid:
            logger.info("Dual selection rejected: %s", result.message)
            self.host.notify(result.message, NoticeLevel.ERROR)
        return result.valid

    def handle_cell_click(self, row_index: int, column: str):
        item = self.items.get_item(row_index)
        if item is None or self.items.is_sentinel(row_index):
            return

        kind = self.active_kind
        if kind == DualChainKind.DUAL and column == DUAL_COLUMN:
            new_value = DualMarker.NONE if item.is_paired else DualMarker.PAIRED
            self.items.update_item_property(row_index, DUAL_COLUMN, new_value)
            self.recalculate_dual()
        elif kind == DualChainKind.CHAIN and column == CHAIN_COLUMN:
            current = '' if item.chain is None else str(item.chain)
            self.modes.retarget(TargetCell(row_index, CHAIN_COLUMN), current)
            self._focus(FocusTarget.CHAIN_INPUT)

    def handle_text_confirm(self, value: str):
        target = self.session.target_cell
        if self.active_kind != DualChainKind.CHAIN or target is None:
            return

        result = parse_chain_value(value)
        if not result.valid:
            logger.info("Chain value %r rejected for row %s", value, target.row_index)
            self.host.notify(result.message, NoticeLevel.ERROR)
            return

        self.items.update_item_property(target.row_index, CHAIN_COLUMN, result.value)
        self.modes.retarget(None)

    def recalculate_dual(self) -> AccessoryLine:
        items = self.items.get_items()
        price = self.pricing.price_accessory(
            self.state.product_type, AccessoryKind.DUAL, {'items': items})
        line = AccessoryLine(count=sum(1 for item in items if item.is_paired), price=price)
        self.store.dispatch(actions.set_dual_line(line))
        self._update_accessories_total()
        return line

    def _update_accessories_total(self):
        state = self.state
        total = state.dual.price + sum(state.summary_prices.get(kind, 0.0) for kind in DRIVE_KINDS)
        self.store.dispatch(actions.set_accessories_total(round(total, 2)))
