"""Pytest configuration and shared fixtures for cabinet layout tests."""

from __future__ import annotations

import pytest

from cabinet_composer.application import LayoutSession
from cabinet_composer.domain import (
    Cabinet,
    Partition,
    PartitionKind,
    PartitionRegistry,
    Point3D,
    Size3D,
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Geometry fixtures
# =============================================================================


@pytest.fixture
def cabinet() -> Cabinet:
    """A 2 m wide, 2.2 m tall, 0.6 m deep cabinet with 2 cm walls."""
    return Cabinet(width=2.0, height=2.2, depth=0.6, wall_thickness=0.02)


@pytest.fixture
def registry() -> PartitionRegistry:
    """An empty partition registry."""
    return PartitionRegistry()


@pytest.fixture
def center_vertical(cabinet: Cabinet) -> Partition:
    """A full-height vertical shelf at x=0."""
    return Partition(
        kind=PartitionKind.VERTICAL_SHELF,
        center=Point3D(0.0, cabinet.height / 2, 0.0),
        size=Size3D(0.02, cabinet.interior_height, cabinet.shelf_depth),
    )


@pytest.fixture
def middle_shelf(cabinet: Cabinet) -> Partition:
    """A full-width horizontal shelf at y=1.0."""
    return Partition(
        kind=PartitionKind.HORIZONTAL_SHELF,
        center=Point3D(0.0, 1.0, 0.0),
        size=Size3D(cabinet.interior_width, 0.02, cabinet.shelf_depth),
    )


# =============================================================================
# Session fixtures
# =============================================================================


@pytest.fixture
def session(cabinet: Cabinet) -> LayoutSession:
    """A layout session with the standard cabinet already built."""
    layout_session = LayoutSession()
    layout_session.build_cabinet(cabinet)
    return layout_session


def place(session: LayoutSession, kind: PartitionKind, *points: Point3D) -> Partition | None:
    """Drive one full drag through a session and return what was committed."""
    session.select(kind)
    session.pointer_down()
    for point in points:
        session.pointer_move(point)
    return session.pointer_up()


@pytest.fixture
def place_part():
    """Helper that drives select, press, moves and release."""
    return place
