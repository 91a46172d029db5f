"""
Pointer Input Mapper.

Converts a raw pointer event in client (screen) space into a validated
field coordinate. Rejections are returned as values, never raised; the
caller decides whether to log or ignore them.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

import numpy as np

from dismissals.config import FieldGeometry, MapperConfig
from dismissals.data.dismissal import FieldCoordinate

logger = logging.getLogger(__name__)


class Rejection(Enum):
    OUTSIDE_FIELD = "outside_field"
    OUTSIDE_CLAMP_BOUNDS = "outside_clamp_bounds"
    TOO_RAPID = "too_rapid"
    NOT_ON_SURFACE = "not_on_surface"
    UNMAPPABLE_SURFACE = "unmappable_surface"


class PointerTarget(Enum):
    """What the pointer landed on."""
    SURFACE = "surface"
    MARKER = "marker"  # An existing dismissal dot
    LABEL = "label"  # Field label text


@dataclass(frozen=True)
class PointerEvent:
    """A click delivered by the presentation layer."""
    client_x: float
    client_y: float
    target: PointerTarget = PointerTarget.SURFACE
    timestamp: Optional[float] = None  # Seconds; mapper clock used when None


@dataclass(frozen=True)
class BoundingBox:
    left: float
    top: float
    width: float
    height: float


@dataclass(frozen=True)
class SurfaceTransform:
    """Screen placement of the drawing surface.

    ``matrix`` is the affine (a, b, c, d, e, f) mapping logical surface
    units to client pixels:

        client_x = a * x + c * y + e
        client_y = b * x + d * y + f

    ``bounds`` and the geometry's declared viewport are used for the
    proportional fallback when the matrix is missing or singular.
    """

    bounds: BoundingBox
    matrix: Optional[tuple[float, float, float, float, float, float]] = None

    def as_array(self) -> Optional[np.ndarray]:
        if self.matrix is None:
            return None
        a, b, c, d, e, f = self.matrix
        return np.array(
            [[a, c, e],
             [b, d, f],
             [0.0, 0.0, 1.0]],
            dtype=float,
        )


@dataclass(frozen=True)
class MapResult:
    """Outcome of mapping one pointer event."""
    coordinate: Optional[FieldCoordinate] = None
    rejection: Optional[Rejection] = None
    logical: Optional[tuple[float, float]] = None  # Pre-rounding surface point

    @property
    def accepted(self) -> bool:
        return self.coordinate is not None

    @classmethod
    def accept(cls, coordinate: FieldCoordinate, logical: tuple[float, float]) -> "MapResult":
        return cls(coordinate=coordinate, logical=logical)

    @classmethod
    def reject(cls, reason: Rejection, logical: Optional[tuple[float, float]] = None) -> "MapResult":
        return cls(rejection=reason, logical=logical)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class InputMapper:
    """Maps pointer events onto the field and debounces repeated clicks.

    The only state held is the time of the last accepted event. Any event
    arriving within ``debounce_ms`` of it is rejected as TOO_RAPID; this
    also swallows genuinely distinct fast double-clicks.
    """

    def __init__(
        self,
        geometry: Optional[FieldGeometry] = None,
        config: Optional[MapperConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._geometry = geometry or FieldGeometry()
        self._config = config or MapperConfig()
        self._clock = clock
        self._last_accepted_ms: Optional[int] = None

    @property
    def geometry(self) -> FieldGeometry:
        return self._geometry

    @property
    def last_accepted_at(self) -> Optional[float]:
        """Seconds of the last accepted click, None before the first."""
        if self._last_accepted_ms is None:
            return None
        return self._last_accepted_ms / 1000.0

    def map_event(self, event: PointerEvent, surface: SurfaceTransform) -> MapResult:
        """Map a pointer event to a field coordinate, or reject it."""
        if event.target is not PointerTarget.SURFACE:
            return MapResult.reject(Rejection.NOT_ON_SURFACE)

        now = event.timestamp if event.timestamp is not None else self._clock()
        now_ms = round(now * 1000)
        if self._within_debounce(now_ms):
            return MapResult.reject(Rejection.TOO_RAPID)

        logical = self.to_logical(event.client_x, event.client_y, surface)
        if logical is None or not all(math.isfinite(v) for v in logical):
            return MapResult.reject(Rejection.UNMAPPABLE_SURFACE)

        x = round_half_up(logical[0])
        y = round_half_up(logical[1])

        if not self.within_boundary(x, y):
            return MapResult.reject(Rejection.OUTSIDE_FIELD, logical)
        if not self.within_clamp(x, y):
            return MapResult.reject(Rejection.OUTSIDE_CLAMP_BOUNDS, logical)

        self._last_accepted_ms = now_ms
        return MapResult.accept(FieldCoordinate(x, y), logical)

    def reset(self) -> None:
        """Forget the last accepted click."""
        self._last_accepted_ms = None

    # ------------------------------------------------------------------
    # Coordinate transforms
    # ------------------------------------------------------------------

    def to_logical(
        self, client_x: float, client_y: float, surface: SurfaceTransform
    ) -> Optional[tuple[float, float]]:
        """Client pixels -> surface-logical units.

        Uses the inverse screen matrix when it is invertible, otherwise the
        bounding box scaled onto the declared viewport. None when neither
        works.
        """
        matrix = surface.as_array()
        if matrix is not None and abs(np.linalg.det(matrix)) > self._config.singular_tolerance:
            point = np.linalg.inv(matrix) @ np.array([client_x, client_y, 1.0])
            return float(point[0]), float(point[1])

        if matrix is not None:
            logger.debug("Singular surface transform, using bounding-box mapping")
        return self._rect_ratio(client_x, client_y, surface.bounds)

    def _rect_ratio(
        self, client_x: float, client_y: float, bounds: BoundingBox
    ) -> Optional[tuple[float, float]]:
        if bounds.width <= 0 or bounds.height <= 0:
            return None
        geo = self._geometry
        x = geo.viewport_min_x + (client_x - bounds.left) / bounds.width * geo.viewport_width
        y = geo.viewport_min_y + (client_y - bounds.top) / bounds.height * geo.viewport_height
        return x, y

    # ------------------------------------------------------------------
    # Validity checks
    # ------------------------------------------------------------------

    def distance_from_center(self, x: float, y: float) -> float:
        return math.hypot(x - self._geometry.center_x, y - self._geometry.center_y)

    def within_boundary(self, x: float, y: float) -> bool:
        return self.distance_from_center(x, y) <= self._geometry.boundary_radius

    def within_clamp(self, x: float, y: float) -> bool:
        geo = self._geometry
        return (
            geo.clamp_min_x <= x <= geo.clamp_max_x
            and geo.clamp_min_y <= y <= geo.clamp_max_y
        )

    def _within_debounce(self, now_ms: int) -> bool:
        # Integer milliseconds on both sides
        if self._last_accepted_ms is None:
            return False
        elapsed_ms = now_ms - self._last_accepted_ms
        return elapsed_ms < self._config.debounce_ms
