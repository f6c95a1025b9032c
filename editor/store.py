"""Synchronous state container shared by the tab controllers."""

import logging
from typing import Callable, List

from .state import EditorState

logger = logging.getLogger(__name__)

Action = Callable[[EditorState], EditorState]
Listener = Callable[[EditorState], None]


class StateStore:
    """Holds the single EditorState.

    An action is a pure function from the current state to the next one. A
    dispatched action is visible to the very next get_state() call.
    """

    def __init__(self, initial: EditorState = None):
        self._state = initial if initial is not None else EditorState()
        self._listeners: List[Listener] = []

    def get_state(self) -> EditorState:
        return self._state

    def dispatch(self, action: Action) -> EditorState:
        new_state = action(self._state)
        if new_state is None:
            raise TypeError(f"Action {action!r} returned None instead of a state")
        self._state = new_state
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called after every dispatch; returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
