# brandbento/history.py
"""Bounded undo/redo over full document snapshots.

Pure functions over an immutable `History`. Each entry is a whole-document
snapshot; the document is small and the stack is capped, so nothing is
diffed.
"""

from __future__ import annotations

from typing import Optional, Tuple

from brandbento.model import History, HistoryState

MAX_HISTORY = 50


def _trim(past: Tuple[HistoryState, ...], limit: int) -> Tuple[HistoryState, ...]:
    if limit >= 0 and len(past) > limit:
        return past[len(past) - limit:]
    return past


def push_snapshot(history: History, snapshot: HistoryState, limit: int = MAX_HISTORY) -> History:
    """Record `snapshot` as the newest undo point and clear redo.

    `past` keeps at most `limit` entries; the oldest are dropped first.
    """
    return History(past=_trim(history.past + (snapshot,), limit), future=())


def step_back(history: History, current: HistoryState) -> Tuple[History, Optional[HistoryState]]:
    """Undo one step: returns (new history, state to restore) or (history, None)."""
    if not history.past:
        return history, None
    restored = history.past[-1]
    return History(past=history.past[:-1], future=(current,) + history.future), restored


def step_forward(
    history: History,
    current: HistoryState,
    limit: int = MAX_HISTORY,
) -> Tuple[History, Optional[HistoryState]]:
    """Redo one step; `current` goes onto `past`, trimmed to `limit` like a push."""
    if not history.future:
        return history, None
    restored = history.future[0]
    return History(past=_trim(history.past + (current,), limit), future=history.future[1:]), restored


def can_undo(history: History) -> bool:
    return len(history.past) > 0


def can_redo(history: History) -> bool:
    return len(history.future) > 0


__all__ = [
    "MAX_HISTORY",
    "can_redo",
    "can_undo",
    "push_snapshot",
    "step_back",
    "step_forward",
]
