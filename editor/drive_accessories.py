"""Drive/accessories tab: winder and motor markers, accessory counters, prices."""

import logging
from typing import Dict, Optional

from . import actions
from .mode import TabController
from .models import (
    AccessoryKind, COUNTER_KINDS, CounterDirection, DRIVE_KINDS, MARKER_KINDS,
    MotorMarker, Tab, WinderMarker,
)
from .state import AccessoryLine, AccessorySummary, DriveMode

logger = logging.getLogger(__name__)

HINT_MESSAGES = {
    AccessoryKind.WINDER: 'Click a cell under the Winder column to set HD.',
    AccessoryKind.MOTOR: 'Click a cell under the Motor column to set Motor.',
    AccessoryKind.REMOTE: 'Click + or - to increase or decrease the quantity of remotes.',
    AccessoryKind.CHARGER: 'Click + or - to increase or decrease the quantity of chargers.',
    AccessoryKind.CORD: 'Click + or - to increase or decrease the quantity of extension cords.',
}

WINDER_OVER_MOTOR_MESSAGE = (
    'This blind is set to Motor. Are you sure you want to change it to HD Winder?'
)
MOTOR_OVER_WINDER_MESSAGE = (
    'This blind is set to HD Winder. Are you sure you want to change it to Motor?'
)
ZERO_WITH_MOTORS_MESSAGE = (
    'Motors are present in the quote. Are you sure you want to set the {name} quantity to 0?'
)

# Counters that motors depend on; they default to 1 and warn before hitting 0
MOTOR_SUPPORT_KINDS = (AccessoryKind.REMOTE, AccessoryKind.CHARGER)


class DriveAccessoriesController(TabController):
    """Five independent sub-modes, one live at a time.

    Winder and motor are per-row markers set by clicking cells; remote,
    charger and cord are global counters. Leaving any sub-mode recomputes
    every price and the grand total.
    """

    tab = Tab.DRIVE_ACCESSORIES
    visible_columns = ('sequence', 'fabric', 'location', 'winder', 'motor')

    @property
    def active_kind(self) -> Optional[AccessoryKind]:
        mode = self.session.mode
        return mode.kind if isinstance(mode, DriveMode) else None

    def toggle(self, kind):
        """Press a sub-mode button: enter it, or leave it if it is already active."""
        kind = AccessoryKind(kind)
        if kind not in DRIVE_KINDS:
            raise ValueError(f"{kind.value} is not a drive/accessory sub-mode")

        current = self.active_kind
        new_kind = None if current == kind else kind

        if current is not None:
            self.recalculate()

        if new_kind is None:
            self.modes.exit()
            return

        self.modes.enter(DriveMode(new_kind))

        if new_kind in MOTOR_SUPPORT_KINDS and self.items.has_motor() \
                and self.state.counter(new_kind) == 0:
            self.store.dispatch(actions.set_counter(new_kind, 1))

        self.host.notify(HINT_MESSAGES[new_kind])

    def leave(self):
        if self.active_kind is not None:
            self.recalculate()
        self.modes.exit()

    def handle_cell_click(self, row_index: int, column: str):
        kind = self.active_kind
        if kind not in MARKER_KINDS or column != kind.value:
            return
        item = self.items.get_item(row_index)
        if item is None or not self.items.is_editable(row_index):
            return

        if kind == AccessoryKind.WINDER:
            if item.has_motor:
                self.host.request_confirmation(
                    WINDER_OVER_MOTOR_MESSAGE, lambda: self._toggle_winder(row_index))
            else:
                self._toggle_winder(row_index)
        else:
            if item.has_winder:
                self.host.request_confirmation(
                    MOTOR_OVER_WINDER_MESSAGE, lambda: self._toggle_motor(row_index))
            else:
                self._toggle_motor(row_index)

    def handle_counter_change(self, kind, direction):
        """Apply a +/- press to a counter whose sub-mode is active."""
        kind = AccessoryKind(kind)
        direction = CounterDirection(direction)
        if kind not in COUNTER_KINDS:
            raise ValueError(f"{kind.value} has no counter")
        if self.active_kind != kind:
            logger.debug("Ignoring %s %s outside its sub-mode", kind.value, direction.value)
            return

        current = self.state.counter(kind)
        if direction == CounterDirection.ADD:
            new_count = current + 1
        else:
            new_count = max(0, current - 1)

        if new_count == current:
            return

        if new_count == 0 and kind in MOTOR_SUPPORT_KINDS and self.items.has_motor():
            message = ZERO_WITH_MOTORS_MESSAGE.format(name=kind.value.capitalize())
            self.host.request_confirmation(message, lambda: self._set_count(kind, 0))
            return

        self._set_count(kind, new_count)

    def recalculate(self) -> AccessorySummary:
        """Recompute all five prices and the grand total from scratch."""
        counts = self._counts()
        product_type = self.state.product_type
        lines = {
            kind: AccessoryLine(
                count=count,
                price=self.pricing.price_accessory(product_type, kind, {'count': count}),
            )
            for kind, count in counts.items()
        }
        summary = AccessorySummary(lines)
        self.store.dispatch(actions.set_drive_summary(summary))
        logger.debug("Drive/accessory prices recomputed: total %.2f", summary.grand_total)
        return summary

    def _counts(self) -> Dict[AccessoryKind, int]:
        state = self.state
        return {
            AccessoryKind.WINDER: self.items.count(lambda item: item.has_winder),
            AccessoryKind.MOTOR: self.items.count(lambda item: item.has_motor),
            AccessoryKind.REMOTE: state.remote_count,
            AccessoryKind.CHARGER: state.charger_count,
            AccessoryKind.CORD: state.cord_count,
        }

    def _set_count(self, kind: AccessoryKind, count: int):
        self.store.dispatch(actions.set_counter(kind, count))

    def _toggle_winder(self, row_index: int):
        item = self.items.get_item(row_index)
        if item is None:
            return
        new_value = WinderMarker.NONE if item.has_winder else WinderMarker.SET
        self.items.update_item_property(row_index, 'winder', new_value)

    def _toggle_motor(self, row_index: int):
        item = self.items.get_item(row_index)
        if item is None:
            return
        new_value = MotorMarker.NONE if item.has_motor else MotorMarker.SET
        self.items.update_item_property(row_index, 'motor', new_value)
