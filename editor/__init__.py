from .models import (
    Tab, AccessoryKind, DualChainKind, CounterDirection,
    DualMarker, WinderMarker, MotorMarker, LineItem, QuoteItemStore,
    DRIVE_KINDS, COUNTER_KINDS, MARKER_KINDS
)
from .state import (
    Idle, LocationEntry, OptionsEdit, DriveMode, DualChainMode, IDLE,
    TargetCell, EditSession, AccessoryLine, AccessorySummary, EditorState
)
from .store import StateStore
from .host import EditorHost, RecordingHost, PendingConfirmation, NoticeLevel, FocusTarget
from .errors import EditorError, PricingError, ConfirmationAlreadyResolved
from .pricing import PricingService, PriceSource, StaticPriceSource, DatabasePriceSource
from .validation import check_dual_pairs, parse_chain_value, DualCheckResult, ChainInputResult
from .coordinator import DetailEditor

__all__ = [
    'Tab', 'AccessoryKind', 'DualChainKind', 'CounterDirection',
    'DualMarker', 'WinderMarker', 'MotorMarker', 'LineItem', 'QuoteItemStore',
    'DRIVE_KINDS', 'COUNTER_KINDS', 'MARKER_KINDS',
    'Idle', 'LocationEntry', 'OptionsEdit', 'DriveMode', 'DualChainMode', 'IDLE',
    'TargetCell', 'EditSession', 'AccessoryLine', 'AccessorySummary', 'EditorState',
    'StateStore',
    'EditorHost', 'RecordingHost', 'PendingConfirmation', 'NoticeLevel', 'FocusTarget',
    'EditorError', 'PricingError', 'ConfirmationAlreadyResolved',
    'PricingService', 'PriceSource', 'StaticPriceSource', 'DatabasePriceSource',
    'check_dual_pairs', 'parse_chain_value', 'DualCheckResult', 'ChainInputResult',
    'DetailEditor'
]
