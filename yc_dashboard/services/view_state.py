"""
yc_dashboard/services/view_state.py

Per-view holder for fetch-and-render state with a mounted guard.

A fetch result is applied only while the view is still open and only if
no newer fetch was started after it. Anything else is stale and dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from yc_dashboard.domain.load_state import Loading, LoadState
from yc_dashboard.logging_utils import log_event

logger = logging.getLogger(__name__)


class ViewSlot:
    """
    Owns the ``LoadState`` of one view.

    Single-threaded: one logical fetch per activation, no locking.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._state: LoadState = Loading()
        self._generation = 0
        self._open = True

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._open

    def begin(self) -> int:
        """
        Start a fetch and return its ticket. The state becomes ``Loading``.
        """

        if not self._open:
            raise RuntimeError(f"View '{self.name}' is closed.")
        self._generation += 1
        self._state = Loading()
        return self._generation

    def complete(self, ticket: int, state: LoadState) -> bool:
        """
        Apply a fetch outcome. Returns False when the outcome was discarded.
        """

        if not self._open or ticket != self._generation:
            log_event(
                logger,
                logging.DEBUG,
                "view_result_discarded",
                view=self.name,
                ticket=ticket,
                current=self._generation,
                open=self._open,
            )
            return False
        self._state = state
        return True

    def close(self) -> None:
        """Tear the view down; later results are discarded."""
        self._open = False

    def load(self, loader: Callable[[], LoadState]) -> LoadState:
        """
        Run ``loader`` as one fetch of this view and return the resulting state.

        If ``loader`` raises, the state from before this fetch is restored
        and the exception propagates.
        """

        previous = self._state
        ticket = self.begin()
        try:
            state = loader()
        except Exception:
            if ticket == self._generation:
                self._state = previous
            raise
        self.complete(ticket, state)
        return self._state
