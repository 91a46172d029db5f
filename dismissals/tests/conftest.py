"""Shared test fixtures for dismissal analyzer tests."""

from __future__ import annotations

import pytest

from dismissals.config import FieldGeometry, MapperConfig
from dismissals.input.mapper import BoundingBox, InputMapper, SurfaceTransform
from dismissals.state.store import DismissalStore


class FakeClock:
    """Manually advanced clock (seconds)."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def geometry() -> FieldGeometry:
    return FieldGeometry()


@pytest.fixture
def mapper(geometry: FieldGeometry, clock: FakeClock) -> InputMapper:
    return InputMapper(geometry, MapperConfig(debounce_ms=500), clock=clock)


@pytest.fixture
def identity_surface() -> SurfaceTransform:
    """Surface at 1:1 scale with its origin at the client origin."""
    return SurfaceTransform(
        bounds=BoundingBox(left=0.0, top=0.0, width=1200.0, height=800.0),
        matrix=(1.0, 0.0, 0.0, 1.0, 0.0, 0.0),
    )


@pytest.fixture
def store(clock: FakeClock) -> DismissalStore:
    return DismissalStore(clock=clock)
