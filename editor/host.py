"""Capabilities the editor core needs from whatever hosts it.

The Qt window supplies real dialogs and timers (see ui.qt_host); tests and
headless use go through RecordingHost.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from .errors import ConfirmationAlreadyResolved

logger = logging.getLogger(__name__)


class NoticeLevel(enum.Enum):
    INFO = "info"
    ERROR = "error"


class FocusTarget(enum.Enum):
    """Input boxes a controller may ask to focus."""
    LOCATION_INPUT = "location_input"
    CHAIN_INPUT = "chain_input"


def _noop():
    pass


class PendingConfirmation:
    """A yes/no question whose answer runs exactly one continuation, exactly once.

    Declining leaves the pre-prompt state untouched; the decline branch is a
    no-op unless the caller supplies one.
    """

    def __init__(self, message: str, on_confirm: Callable[[], None],
                 on_cancel: Optional[Callable[[], None]] = None):
        self.message = message
        self._on_confirm = on_confirm
        self._on_cancel = on_cancel or _noop
        self._answer: Optional[bool] = None

    @property
    def resolved(self) -> bool:
        return self._answer is not None

    @property
    def accepted(self) -> Optional[bool]:
        return self._answer

    def _resolve(self, answer: bool):
        if self._answer is not None:
            raise ConfirmationAlreadyResolved(self.message)
        self._answer = answer
        logger.debug("Confirmation %s: %s", "accepted" if answer else "declined", self.message)
        (self._on_confirm if answer else self._on_cancel)()

    def accept(self):
        self._resolve(True)

    def decline(self):
        self._resolve(False)

    def __repr__(self):
        state = {None: "pending", True: "accepted", False: "declined"}[self._answer]
        return f"PendingConfirmation({self.message!r}, {state})"


class EditorHost:
    """Base class for hosts; subclasses override the three capabilities."""

    def request_confirmation(self, message: str, on_confirm: Callable[[], None],
                             on_cancel: Optional[Callable[[], None]] = None) -> PendingConfirmation:
        """Ask the user a yes/no question. Exactly one callback runs, once."""
        raise NotImplementedError

    def notify(self, message: str, level: NoticeLevel = NoticeLevel.INFO) -> None:
        """Show a user-facing message."""
        raise NotImplementedError

    def schedule_focus(self, target: FocusTarget, delay_ms: int, select: bool = True) -> None:
        """Move input focus after the current event pass. Purely cosmetic."""
        raise NotImplementedError


@dataclass
class Notice:
    message: str
    level: NoticeLevel


@dataclass
class FocusRequest:
    target: FocusTarget
    delay_ms: int
    select: bool


class RecordingHost(EditorHost):
    """Host that records everything and leaves confirmations for the caller to answer."""

    def __init__(self):
        self.confirmations: List[PendingConfirmation] = []
        self.notices: List[Notice] = []
        self.focus_requests: List[FocusRequest] = []

    def request_confirmation(self, message, on_confirm, on_cancel=None):
        pending = PendingConfirmation(message, on_confirm, on_cancel)
        self.confirmations.append(pending)
        return pending

    def notify(self, message, level=NoticeLevel.INFO):
        self.notices.append(Notice(message, level))

    def schedule_focus(self, target, delay_ms, select=True):
        self.focus_requests.append(FocusRequest(target, delay_ms, select))

    @property
    def last_confirmation(self) -> Optional[PendingConfirmation]:
        return self.confirmations[-1] if self.confirmations else None

    @property
    def errors(self) -> List[str]:
        return [n.message for n in self.notices if n.level == NoticeLevel.ERROR]
