"""
Rendering contract and plain-text panel.

The analyzer never draws anything itself. After every store mutation it
pushes the current records and statistics to a Renderer; pending-marker
changes are pushed the same way.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from dismissals.config import (
    EMPTY_STATE_PROMPT,
    MARKER_RADIUS,
    PENDING_MARKER_COLOR,
    TIMESTAMP_FORMAT,
)
from dismissals.data.dismissal import DismissalRecord, FieldCoordinate
from dismissals.state.store import Statistics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Marker:
    """A dot to draw on the field."""
    x: int
    y: int
    color: str
    radius: int = MARKER_RADIUS
    record_id: Optional[int] = None  # None for the pending marker

    @property
    def is_pending(self) -> bool:
        return self.record_id is None


class Renderer(ABC):
    """Abstract base class for presentation layers."""

    @abstractmethod
    def render(self, records: tuple[DismissalRecord, ...], statistics: Statistics) -> None:
        """Redraw markers and stat panels from the current store state."""

    @abstractmethod
    def show_pending(self, coordinate: FieldCoordinate) -> None:
        """Draw (or move) the single pending marker."""

    @abstractmethod
    def clear_pending(self) -> None:
        """Remove the pending marker if one is drawn."""


def record_marker(record: DismissalRecord) -> Marker:
    return Marker(
        x=record.position.x,
        y=record.position.y,
        color=record.dismissal_type.color,
        record_id=record.id,
    )


def stats_panel_lines(stats: Statistics) -> list[str]:
    if stats.is_empty:
        return [EMPTY_STATE_PROMPT]

    lines = [
        f"Total Dismissals: {stats.count}",
        f"Total Runs: {stats.total_runs}",
        f"Total Balls Faced: {stats.total_balls}",
        f"Average Runs per Dismissal: {stats.average_runs_per_dismissal:.1f}",
        f"Overall Strike Rate: {stats.overall_strike_rate:.1f}%",
        f"Most Common Dismissal: {stats.most_common_type.label}",
        "Dismissal Breakdown:",
    ]
    lines.extend(f"  {kind.label}: {n}" for kind, n in stats.counts_by_type)
    return lines


def detail_lines(record: DismissalRecord) -> list[str]:
    """Detail view shown when a marker is selected."""
    lines = [
        f"Dismissal Type: {record.dismissal_type.label}",
        f"Bowler/Fielder: {record.bowler_display or 'Not specified'}",
        f"Runs Scored: {record.runs_scored}",
        f"Balls Faced: {record.balls_faced}",
        f"Strike Rate: {record.strike_rate:.1f}%",
        f"Date & Time: {record.created_at.astimezone().strftime(TIMESTAMP_FORMAT)}",
    ]
    if record.notes:
        lines.append(f"Notes: {record.notes}")
    return lines


class TextPanelRenderer(Renderer):
    """Keeps the latest markers and panel text, and logs each redraw."""

    def __init__(self):
        self.markers: list[Marker] = []
        self.pending: Optional[Marker] = None
        self.panel: list[str] = [EMPTY_STATE_PROMPT]
        self.render_count = 0

    def render(self, records: tuple[DismissalRecord, ...], statistics: Statistics) -> None:
        self.markers = [record_marker(r) for r in records]
        self.panel = stats_panel_lines(statistics)
        self.render_count += 1
        for line in self.panel:
            logger.info("  %s", line)

    def show_pending(self, coordinate: FieldCoordinate) -> None:
        self.pending = Marker(x=coordinate.x, y=coordinate.y, color=PENDING_MARKER_COLOR)
        logger.debug("Pending marker at (%d, %d)", coordinate.x, coordinate.y)

    def clear_pending(self) -> None:
        self.pending = None

    def panel_text(self) -> str:
        return "\n".join(self.panel)
