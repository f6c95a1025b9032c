"""Validation of dual bracket pairing and chain length input."""

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

DUAL_ODD_COUNT_MESSAGE = (
    "The total count of Dual Brackets (D) must be an even number. Please correct the selection."
)
DUAL_NOT_ADJACENT_MESSAGE = (
    "Dual Brackets (D) must be set on adjacent items. Please check your selection."
)
CHAIN_INVALID_MESSAGE = "Only positive integers are allowed."

_POSITIVE_INT = re.compile(r"\+?[0-9]+")


@dataclass
class DualCheckResult:
    """Result of a dual bracket pairing check."""
    valid: bool
    message: str = ""
    pairs: List[Tuple[int, int]] = field(default_factory=list)

    def __str__(self) -> str:
        if self.valid:
            return f"Dual pairing OK: {len(self.pairs)} pair(s)"
        return f"Dual pairing invalid: {self.message}"


@dataclass
class ChainInputResult:
    """Result of parsing a chain length entry."""
    valid: bool
    value: Optional[int] = None
    message: str = ""


def check_dual_pairs(indices: Iterable[int]) -> DualCheckResult:
    """Check that dual-marked rows form consecutive pairs.

    The sorted indices must have even length and split into (i, i+1) pairs,
    e.g. {2, 3, 5, 6} passes while {2, 3, 5} and {2, 4} do not.

    Args:
        indices: Row indices carrying the dual marker

    Returns:
        DualCheckResult with the pairs found when valid
    """
    selected = sorted(set(indices))

    if len(selected) % 2 != 0:
        return DualCheckResult(valid=False, message=DUAL_ODD_COUNT_MESSAGE)

    pairs = []
    for first, second in zip(selected[0::2], selected[1::2]):
        if second != first + 1:
            return DualCheckResult(valid=False, message=DUAL_NOT_ADJACENT_MESSAGE)
        pairs.append((first, second))

    return DualCheckResult(valid=True, pairs=pairs)


def parse_chain_value(text: str) -> ChainInputResult:
    """Parse a chain length typed by the user.

    Empty input clears the stored length. Otherwise only whole numbers
    greater than zero are accepted; "0", "-1", "3.5" and "abc" are rejected.
    """
    text = (text or "").strip()
    if text == "":
        return ChainInputResult(valid=True, value=None)

    if not _POSITIVE_INT.fullmatch(text):
        return ChainInputResult(valid=False, message=CHAIN_INVALID_MESSAGE)

    try:
        value = int(text)
    except ValueError:
        # Past the interpreter's digit limit for int conversion
        return ChainInputResult(valid=False, message=CHAIN_INVALID_MESSAGE)
    if value <= 0:
        return ChainInputResult(valid=False, message=CHAIN_INVALID_MESSAGE)
    return ChainInputResult(valid=True, value=value)
