"""Edit session, active-mode variants and derived accessory prices."""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

from config import DEFAULT_PRODUCT_TYPE
from .models import AccessoryKind, DRIVE_KINDS, DualChainKind, Tab


@dataclass(frozen=True)
class Idle:
    """No edit mode is live; clicks and keystrokes are ignored."""


@dataclass(frozen=True)
class LocationEntry:
    """Sequential location entry on the location tab."""


@dataclass(frozen=True)
class OptionsEdit:
    """Option cycling on the options tab."""


@dataclass(frozen=True)
class DriveMode:
    """One drive/accessories sub-mode (winder, motor, remote, charger, cord)."""
    kind: AccessoryKind


@dataclass(frozen=True)
class DualChainMode:
    """Dual bracket marking or chain length entry."""
    kind: DualChainKind


ActiveMode = Union[Idle, LocationEntry, OptionsEdit, DriveMode, DualChainMode]

IDLE = Idle()


@dataclass(frozen=True)
class TargetCell:
    """The single grid cell currently receiving keyboard input."""
    row_index: int
    column: str


@dataclass(frozen=True)
class EditSession:
    """Ephemeral editing state; replaced wholesale on every tab switch."""
    active_tab: Tab = Tab.LOCATION
    mode: ActiveMode = IDLE
    target_cell: Optional[TargetCell] = None
    pending_text: str = ""

    @property
    def is_idle(self) -> bool:
        return isinstance(self.mode, Idle)

    @property
    def sub_mode(self) -> Optional[str]:
        """Name of the tab-level sub-mode, if any (e.g. 'motor', 'chain')."""
        kind = getattr(self.mode, 'kind', None)
        return kind.value if kind is not None else None


@dataclass(frozen=True)
class AccessoryLine:
    """Count and total price of one accessory kind."""
    count: int = 0
    price: float = 0.0


def _empty_lines() -> Dict[AccessoryKind, AccessoryLine]:
    return {kind: AccessoryLine() for kind in DRIVE_KINDS}


@dataclass(frozen=True)
class AccessorySummary:
    """Drive/accessory prices as of the last full recomputation.

    Never edited by hand; always rebuilt as a whole.
    """
    lines: Dict[AccessoryKind, AccessoryLine] = field(default_factory=_empty_lines)

    def line(self, kind: AccessoryKind) -> AccessoryLine:
        return self.lines.get(kind, AccessoryLine())

    def price(self, kind: AccessoryKind) -> float:
        return self.line(kind).price

    @property
    def grand_total(self) -> float:
        return round(sum(self.price(kind) for kind in DRIVE_KINDS), 2)

    def prices(self) -> Dict[AccessoryKind, float]:
        return {kind: self.price(kind) for kind in DRIVE_KINDS}


@dataclass(frozen=True)
class EditorState:
    """Everything the render pass reads, apart from the line items themselves."""
    session: EditSession = field(default_factory=EditSession)
    product_type: str = DEFAULT_PRODUCT_TYPE
    visible_columns: Tuple[str, ...] = ('sequence', 'fabric', 'location')
    remote_count: int = 0
    charger_count: int = 0
    cord_count: int = 0
    drive_summary: AccessorySummary = field(default_factory=AccessorySummary)
    dual: AccessoryLine = field(default_factory=AccessoryLine)
    # Drive prices as last copied into the dual/chain tab's summary
    summary_prices: Dict[AccessoryKind, float] = field(default_factory=dict)
    accessories_total: float = 0.0

    def counter(self, kind: AccessoryKind) -> int:
        return getattr(self, f"{kind.value}_count")
