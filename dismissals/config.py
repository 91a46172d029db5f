"""
Configuration management for the Cricket Dismissal Analyzer.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class FieldGeometry:
    """Logical geometry of the field diagram (field units, y grows downward)."""
    center_x: float = 600.0
    center_y: float = 400.0
    boundary_radius: float = 370.0  # Soft boundary (playing area)

    # Hard rectangular clamp
    clamp_min_x: float = 50.0
    clamp_max_x: float = 1150.0
    clamp_min_y: float = 50.0
    clamp_max_y: float = 750.0

    # Declared logical viewport of the drawing surface
    viewport_min_x: float = 0.0
    viewport_min_y: float = 0.0
    viewport_width: float = 1200.0
    viewport_height: float = 800.0


@dataclass(frozen=True)
class MapperConfig:
    """Pointer input mapping parameters."""
    debounce_ms: int = 500  # Minimum gap between accepted clicks
    singular_tolerance: float = 1e-12  # |det| below this = degenerate transform


@dataclass
class AnalyzerConfig:
    """Top-level analyzer configuration."""
    geometry: FieldGeometry = field(default_factory=FieldGeometry)
    mapper: MapperConfig = field(default_factory=MapperConfig)

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AnalyzerConfig":
        """Load configuration from environment variables."""
        return cls(
            mapper=MapperConfig(
                debounce_ms=int(os.getenv("DISMISSALS_DEBOUNCE_MS", "500")),
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def validate(self) -> None:
        if self.mapper.debounce_ms < 0:
            raise ValueError("DISMISSALS_DEBOUNCE_MS must not be negative")
        if self.geometry.boundary_radius <= 0:
            raise ValueError("Field boundary radius must be positive")
        if self.geometry.viewport_width <= 0 or self.geometry.viewport_height <= 0:
            raise ValueError("Viewport dimensions must be positive")
        if self.log_level.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown LOG_LEVEL: {self.log_level}")


# Display tables, keyed by DismissalType value
TYPE_LABELS: dict[str, str] = {
    "bowled": "Bowled",
    "caught": "Caught",
    "lbw": "LBW",
    "runout": "Run Out",
    "stumped": "Stumped",
    "hitwicket": "Hit Wicket",
    "other": "Other",
}

MARKER_COLORS: dict[str, str] = {
    "bowled": "#f44336",
    "caught": "#ff9800",
    "lbw": "#9c27b0",
    "runout": "#2196f3",
    "stumped": "#00bcd4",
    "hitwicket": "#795548",
    "other": "#607d8b",
}
DEFAULT_MARKER_COLOR = "#607d8b"

MARKER_RADIUS = 6
PENDING_MARKER_COLOR = "#ff4444"

TIMESTAMP_FORMAT = "%d/%m/%Y, %H:%M:%S"
EMPTY_STATE_PROMPT = "Click on the field to add your first dismissal"
