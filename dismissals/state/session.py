"""
Analyzer Session.

Wires pointer input, the pending coordinate, form confirmation and
deletion onto an explicitly owned mapper and store. At most one pending
coordinate exists; a new accepted click replaces it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from dismissals.data.dismissal import (
    DismissalDraft,
    DismissalRecord,
    DismissalType,
    FieldCoordinate,
)
from dismissals.input.mapper import InputMapper, MapResult, PointerEvent, SurfaceTransform
from dismissals.render.panel import Renderer
from dismissals.state.store import DismissalStore, Statistics
from dismissals.utils.rates import NumericEntry

logger = logging.getLogger(__name__)

CANCEL_KEYS = frozenset({"Escape"})


@dataclass(frozen=True)
class FormFields:
    """Raw values from the dismissal form."""
    dismissal_type: Union[DismissalType, str] = DismissalType.OTHER
    bowler_or_fielder: str = ""
    runs: NumericEntry = ""
    balls: NumericEntry = ""
    notes: str = ""


class AnalyzerSession:
    """Event handlers the presentation layer calls into."""

    def __init__(
        self,
        mapper: InputMapper,
        store: DismissalStore,
        renderer: Optional[Renderer] = None,
    ):
        self._mapper = mapper
        self._store = store
        self._renderer = renderer
        self._pending: Optional[FieldCoordinate] = None

        if renderer is not None:
            store.on_change(renderer.render)
            renderer.render(store.list(), store.compute_statistics())

    @property
    def store(self) -> DismissalStore:
        return self._store

    @property
    def mapper(self) -> InputMapper:
        return self._mapper

    @property
    def pending(self) -> Optional[FieldCoordinate]:
        return self._pending

    def handle_pointer(self, event: PointerEvent, surface: SurfaceTransform) -> MapResult:
        """Map a click; an accepted coordinate becomes the pending input."""
        result = self._mapper.map_event(event, surface)
        if not result.accepted:
            logger.debug(
                "Click at (%.1f, %.1f) dropped: %s",
                event.client_x, event.client_y, result.rejection.value,
            )
            return result

        self._pending = result.coordinate
        if self._renderer is not None:
            self._renderer.show_pending(result.coordinate)
        return result

    def submit(self, fields: FormFields) -> Optional[DismissalRecord]:
        """Confirm the pending coordinate with the form values."""
        if self._pending is None:
            logger.debug("Submit ignored, no pending coordinate")
            return None

        draft = DismissalDraft(
            position=self._pending,
            dismissal_type=fields.dismissal_type,
            bowler_or_fielder=fields.bowler_or_fielder,
            runs=fields.runs,
            balls=fields.balls,
            notes=fields.notes,
        )
        self._discard_pending()
        return self._store.add(draft)

    def cancel(self) -> None:
        """Drop the pending coordinate without storing anything."""
        if self._pending is not None:
            logger.debug("Pending coordinate discarded")
        self._discard_pending()

    def handle_key(self, key: str) -> bool:
        """Returns True when the key cancelled pending input."""
        if key in CANCEL_KEYS:
            self.cancel()
            return True
        return False

    def request_delete(
        self,
        record_id: int,
        confirm: Callable[[DismissalRecord], bool],
    ) -> bool:
        """Delete a record once the user confirms. False if declined or unknown."""
        record = self._store.get(record_id)
        if record is None:
            logger.debug("Delete requested for unknown dismissal %s", record_id)
            return False
        if not confirm(record):
            logger.debug("Delete of dismissal %d declined", record_id)
            return False
        return self._store.remove(record_id)

    def statistics(self) -> Statistics:
        return self._store.compute_statistics()

    def _discard_pending(self) -> None:
        self._pending = None
        if self._renderer is not None:
            self._renderer.clear_pending()
