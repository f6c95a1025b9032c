"""Action factories for the StateStore.

Each factory returns a pure function EditorState -> EditorState.
"""

from dataclasses import replace
from typing import Dict, Iterable, Optional

from .models import AccessoryKind, COUNTER_KINDS, Tab
from .state import (
    AccessoryLine, AccessorySummary, ActiveMode, EditSession, EditorState, IDLE, TargetCell
)


def _update_session(state: EditorState, **changes) -> EditorState:
    return replace(state, session=replace(state.session, **changes))


def start_session(tab: Tab):
    """Replace the session wholesale with a fresh one on the given tab."""
    def action(state: EditorState) -> EditorState:
        return replace(state, session=EditSession(active_tab=tab))
    return action


def set_mode(mode: ActiveMode, target: Optional[TargetCell] = None, pending_text: str = ""):
    def action(state: EditorState) -> EditorState:
        return _update_session(state, mode=mode, target_cell=target, pending_text=pending_text)
    return action


def exit_mode():
    """Back to idle; target cell and pending text are always cleared together."""
    return set_mode(IDLE)


def set_target_cell(target: Optional[TargetCell], pending_text: str = ""):
    def action(state: EditorState) -> EditorState:
        return _update_session(state, target_cell=target, pending_text=pending_text)
    return action


def clear_target():
    return set_target_cell(None)


def set_pending_text(text: str):
    def action(state: EditorState) -> EditorState:
        return _update_session(state, pending_text=text)
    return action


def set_visible_columns(columns: Iterable[str]):
    columns = tuple(columns)

    def action(state: EditorState) -> EditorState:
        return replace(state, visible_columns=columns)
    return action


def set_counter(kind: AccessoryKind, count: int):
    if kind not in COUNTER_KINDS:
        raise ValueError(f"{kind} has no counter")

    def action(state: EditorState) -> EditorState:
        return replace(state, **{f"{kind.value}_count": count})
    return action


def set_drive_summary(summary: AccessorySummary):
    def action(state: EditorState) -> EditorState:
        return replace(state, drive_summary=summary)
    return action


def set_dual_line(line: AccessoryLine):
    def action(state: EditorState) -> EditorState:
        return replace(state, dual=line)
    return action


def set_summary_prices(prices: Dict[AccessoryKind, float]):
    prices = dict(prices)

    def action(state: EditorState) -> EditorState:
        return replace(state, summary_prices=prices)
    return action


def set_accessories_total(total: float):
    def action(state: EditorState) -> EditorState:
        return replace(state, accessories_total=total)
    return action
