"""
Dismissal data model.

Defines the field coordinate, the user-entered draft and the immutable
dismissal record that the store owns.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from dismissals.config import DEFAULT_MARKER_COLOR, MARKER_COLORS, TYPE_LABELS
from dismissals.utils.rates import NumericEntry, strike_rate

logger = logging.getLogger(__name__)


class DismissalType(Enum):
    BOWLED = "bowled"
    CAUGHT = "caught"
    LBW = "lbw"
    RUN_OUT = "runout"
    STUMPED = "stumped"
    HIT_WICKET = "hitwicket"
    OTHER = "other"

    @classmethod
    def parse(cls, raw: Union["DismissalType", str, None]) -> "DismissalType":
        """Resolve a form value to a member, falling back to OTHER."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw or "").strip().lower())
        except ValueError:
            logger.debug("Unknown dismissal type %r, recording as other", raw)
            return cls.OTHER

    @property
    def label(self) -> str:
        return TYPE_LABELS[self.value]

    @property
    def color(self) -> str:
        return MARKER_COLORS.get(self.value, DEFAULT_MARKER_COLOR)


@dataclass(frozen=True)
class FieldCoordinate:
    """A validated integer position in field units."""
    x: int
    y: int

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True)
class DismissalDraft:
    """Form entry awaiting confirmation. Numeric fields are raw text."""

    position: FieldCoordinate
    dismissal_type: Union[DismissalType, str] = DismissalType.OTHER
    bowler_or_fielder: str = ""
    runs: NumericEntry = ""
    balls: NumericEntry = ""
    notes: str = ""


@dataclass(frozen=True)
class DismissalRecord:
    """A stored dismissal. Never edited, only deleted."""

    id: int
    position: FieldCoordinate
    dismissal_type: DismissalType
    runs_scored: int
    balls_faced: int
    created_at: datetime
    bowler_or_fielder: str = ""
    notes: str = ""

    @property
    def strike_rate(self) -> float:
        """Strike rate for this innings (balls_faced is never 0)."""
        return strike_rate(self.runs_scored, self.balls_faced)

    @property
    def bowler_display(self) -> Optional[str]:
        return self.bowler_or_fielder.strip() or None
