"""Line items, the item store, and the enumerations shared by the tab controllers."""

import enum
import logging
from dataclasses import dataclass, fields, replace
from typing import Callable, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)


class Tab(enum.Enum):
    """Tabs of the detail editor."""
    LOCATION = "location"
    FABRIC = "fabric"
    OPTIONS = "options"
    DRIVE_ACCESSORIES = "driveAccessories"
    DUAL_CHAIN = "dualChain"


class AccessoryKind(enum.Enum):
    """Priced hardware categories."""
    WINDER = "winder"
    MOTOR = "motor"
    REMOTE = "remote"
    CHARGER = "charger"
    CORD = "cord"
    DUAL = "dual"


# Kinds priced by the drive/accessories tab, in display order
DRIVE_KINDS = (
    AccessoryKind.WINDER, AccessoryKind.MOTOR, AccessoryKind.REMOTE,
    AccessoryKind.CHARGER, AccessoryKind.CORD,
)

# Kinds driven by a per-row marker rather than a +/- counter
MARKER_KINDS = (AccessoryKind.WINDER, AccessoryKind.MOTOR)
COUNTER_KINDS = (AccessoryKind.REMOTE, AccessoryKind.CHARGER, AccessoryKind.CORD)


class DualChainKind(enum.Enum):
    """Sub-modes of the dual/chain tab."""
    DUAL = "dual"
    CHAIN = "chain"


class CounterDirection(enum.Enum):
    """Direction of a +/- counter press."""
    ADD = "add"
    SUBTRACT = "subtract"


class DualMarker(str, enum.Enum):
    NONE = ""
    PAIRED = "D"


class WinderMarker(str, enum.Enum):
    NONE = ""
    SET = "HD"


class MotorMarker(str, enum.Enum):
    NONE = ""
    SET = "Motor"


@dataclass
class LineItem:
    """One quoted blind.

    Winder and motor markers are not mutually exclusive here; the editor only
    asks the user to confirm before a blind carries both.
    """
    location: str = ""
    fabric: str = ""
    over: str = ""
    oi: str = ""
    lr: str = ""
    dual: DualMarker = DualMarker.NONE
    chain: Optional[int] = None
    winder: WinderMarker = WinderMarker.NONE
    motor: MotorMarker = MotorMarker.NONE

    @property
    def is_blank(self) -> bool:
        return self == LineItem()

    @property
    def is_paired(self) -> bool:
        return self.dual == DualMarker.PAIRED

    @property
    def has_winder(self) -> bool:
        return self.winder == WinderMarker.SET

    @property
    def has_motor(self) -> bool:
        return self.motor == MotorMarker.SET


LINE_ITEM_FIELDS = frozenset(f.name for f in fields(LineItem))


class QuoteItemStore:
    """Ordered, mutable sequence of line items.

    The last row is always a blank sentinel row. Updates address a single
    field of a single row; out-of-range rows are ignored.
    """

    def __init__(self, items: Optional[List[LineItem]] = None, row_count: int = 0):
        if items is None:
            items = [LineItem() for _ in range(row_count)]
        self._items: List[LineItem] = list(items)
        self._listeners: List[Callable[[], None]] = []
        self.ensure_sentinel()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[LineItem]:
        return iter(self.get_items())

    def get_items(self) -> Tuple[LineItem, ...]:
        """Snapshot of the current items, sentinel row included."""
        return tuple(self._items)

    def get_item(self, row_index: int) -> Optional[LineItem]:
        if 0 <= row_index < len(self._items):
            return self._items[row_index]
        return None

    @property
    def last_index(self) -> int:
        return len(self._items) - 1

    def is_sentinel(self, row_index: int) -> bool:
        return row_index == self.last_index

    def is_editable(self, row_index: int) -> bool:
        """True for existing rows other than the sentinel."""
        return 0 <= row_index < self.last_index

    def editable_rows(self) -> range:
        return range(self.last_index)

    def update_item_property(self, row_index: int, field: str, value) -> None:
        """Set one field on one row.

        Stale row indices are a silent no-op; unknown field names are a
        programming error.
        """
        if field not in LINE_ITEM_FIELDS:
            raise AttributeError(f"LineItem has no field '{field}'")
        if not 0 <= row_index < len(self._items):
            logger.debug("Ignoring update of %s on out-of-range row %s", field, row_index)
            return
        self._items[row_index] = replace(self._items[row_index], **{field: value})
        self.ensure_sentinel()
        for listener in list(self._listeners):
            listener()

    def subscribe(self, listener: Callable[[], None]):
        """Register a listener called after every item update."""
        self._listeners.append(listener)

    def ensure_sentinel(self) -> None:
        """Keep exactly one trailing blank row available."""
        if not self._items or not self._items[-1].is_blank:
            self._items.append(LineItem())

    def count(self, predicate) -> int:
        return sum(1 for item in self._items if predicate(item))

    def paired_indices(self) -> List[int]:
        return [i for i, item in enumerate(self._items) if item.is_paired]

    def has_motor(self) -> bool:
        return any(item.has_motor for item in self._items)
