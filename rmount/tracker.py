"""
tracker.py
StatusTracker: one state slot per host entry, nothing else.

Each slot has its own lock, so writers to different entries never wait on
each other and a reader never sees a half-published value.
"""

from __future__ import annotations
import threading
from typing import Iterable, List
from .types import MountState


class StateTransitionError(RuntimeError):
    """Raised when a slot would leave a terminal state or re-enter pending."""


class StatusTracker:
    def __init__(self, initial: Iterable[MountState]):
        self._states: List[MountState] = list(initial)
        self._locks = [threading.Lock() for _ in self._states]

    def __len__(self) -> int:
        return len(self._states)

    def get(self, index: int) -> MountState:
        with self._locks[index]:
            return self._states[index]

    def set(self, index: int, state: MountState) -> None:
        if not state.terminal:
            raise StateTransitionError(f"entry {index}: cannot move back to pending")
        with self._locks[index]:
            current = self._states[index]
            if current.terminal:
                raise StateTransitionError(
                    f"entry {index}: already {current.status.value}, refusing {state.status.value}"
                )
            self._states[index] = state

    def snapshot(self) -> List[MountState]:
        return [self.get(i) for i in range(len(self._states))]

    def pending_indices(self) -> List[int]:
        return [i for i, s in enumerate(self.snapshot()) if not s.terminal]

    def all_terminal(self) -> bool:
        return not self.pending_indices()
