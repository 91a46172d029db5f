"""
Dismissal Store.

Owns the ordered collection of dismissal records. Statistics are derived
from the full collection on every read; nothing is cached or updated
incrementally.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Optional

from dismissals.data.dismissal import DismissalDraft, DismissalRecord, DismissalType
from dismissals.utils.rates import average, coerce_balls, coerce_runs, strike_rate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Statistics:
    """Aggregate view over every stored dismissal."""

    count: int = 0
    total_runs: int = 0
    total_balls: int = 0
    average_runs_per_dismissal: Optional[float] = None  # None when empty
    overall_strike_rate: float = 0.0
    # (type, count) pairs in the order each type was first recorded
    counts_by_type: tuple[tuple[DismissalType, int], ...] = field(default_factory=tuple)
    most_common_type: Optional[DismissalType] = None

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    def count_for(self, dismissal_type: DismissalType) -> int:
        for kind, n in self.counts_by_type:
            if kind is dismissal_type:
                return n
        return 0

    def counts_dict(self) -> dict[str, int]:
        return {kind.value: n for kind, n in self.counts_by_type}

    def summary_str(self) -> str:
        """Human-readable summary."""
        if self.is_empty:
            return "=== DISMISSAL SUMMARY ===\nNo dismissals recorded\n"
        breakdown = ", ".join(f"{kind.label}: {n}" for kind, n in self.counts_by_type)
        return (
            f"=== DISMISSAL SUMMARY ===\n"
            f"Dismissals: {self.count}\n"
            f"Runs: {self.total_runs} | Balls: {self.total_balls}\n"
            f"Average: {self.average_runs_per_dismissal:.1f}\n"
            f"Strike Rate: {self.overall_strike_rate:.1f}%\n"
            f"Most Common: {self.most_common_type.label}\n"
            f"Breakdown: {breakdown}\n"
        )


StoreListener = Callable[[tuple[DismissalRecord, ...], Statistics], None]


def tally_types(records: tuple[DismissalRecord, ...]) -> dict[DismissalType, int]:
    """Count dismissal types; insertion order is first-seen order."""
    tally: dict[DismissalType, int] = {}
    for record in records:
        tally[record.dismissal_type] = tally.get(record.dismissal_type, 0) + 1
    return tally


def most_common(tally: dict[DismissalType, int]) -> Optional[DismissalType]:
    """First type in tally order holding the highest count."""
    best: Optional[DismissalType] = None
    best_count = 0
    for kind, n in tally.items():
        if n > best_count:
            best, best_count = kind, n
    return best


class DismissalStore:
    """Ordered, in-memory collection of dismissal records.

    Mutated only through add() and remove(). Registered listeners are
    called after every successful mutation with the current records and
    freshly computed statistics.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._records: list[DismissalRecord] = []
        self._listeners: list[StoreListener] = []
        self._clock = clock
        self._last_id = 0

    def __len__(self) -> int:
        return len(self._records)

    def add(self, draft: DismissalDraft) -> DismissalRecord:
        """Store a confirmed draft. Malformed numbers are defaulted, never rejected."""
        now = self._clock()
        record = DismissalRecord(
            id=self._next_id(now),
            position=draft.position,
            dismissal_type=DismissalType.parse(draft.dismissal_type),
            runs_scored=coerce_runs(draft.runs),
            balls_faced=coerce_balls(draft.balls),
            created_at=datetime.fromtimestamp(now, tz=timezone.utc),
            bowler_or_fielder=(draft.bowler_or_fielder or "").strip(),
            notes=(draft.notes or "").strip(),
        )
        self._records.append(record)
        logger.info(
            "Dismissal %d recorded: %s at (%d, %d), %d (%d)",
            record.id, record.dismissal_type.value,
            record.position.x, record.position.y,
            record.runs_scored, record.balls_faced,
        )
        self._notify()
        return record

    def remove(self, record_id: int) -> bool:
        """Delete a record by id. Unknown ids are a no-op returning False."""
        for i, record in enumerate(self._records):
            if record.id == record_id:
                del self._records[i]
                logger.info("Dismissal %d removed", record_id)
                self._notify()
                return True
        logger.debug("Remove ignored, no dismissal with id %s", record_id)
        return False

    def list(self) -> tuple[DismissalRecord, ...]:
        """Records in insertion (chronological) order."""
        return tuple(self._records)

    def get(self, record_id: int) -> Optional[DismissalRecord]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def compute_statistics(self) -> Statistics:
        records = self.list()
        if not records:
            return Statistics()

        total_runs = sum(r.runs_scored for r in records)
        total_balls = sum(r.balls_faced for r in records)
        tally = tally_types(records)

        return Statistics(
            count=len(records),
            total_runs=total_runs,
            total_balls=total_balls,
            average_runs_per_dismissal=average(total_runs, len(records)),
            overall_strike_rate=strike_rate(total_runs, total_balls),
            counts_by_type=tuple(tally.items()),
            most_common_type=most_common(tally),
        )

    def on_change(self, callback: StoreListener) -> None:
        """Register a callback for store mutations."""
        self._listeners.append(callback)

    def _notify(self) -> None:
        if not self._listeners:
            return
        records = self.list()
        stats = self.compute_statistics()
        for callback in self._listeners:
            callback(records, stats)

    def _next_id(self, now: float) -> int:
        # Millisecond timestamp, bumped when two records share a millisecond
        candidate = int(now * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate
