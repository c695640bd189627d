"""Unit tests for text and JSON output of replayed layouts."""

import json

import pytest

from cabinet_composer.application import BuildLayoutCommand, CabinetInput, PlacementRequest
from cabinet_composer.application.dtos import LayoutOutput
from cabinet_composer.domain import PartitionKind, Point3D
from cabinet_composer.infrastructure import (
    JsonExporter,
    LayoutDiagramFormatter,
    LayoutSummaryFormatter,
)


@pytest.fixture
def layout_output() -> LayoutOutput:
    return BuildLayoutCommand().execute(
        CabinetInput(width_cm=200, height_cm=220, depth_cm=60),
        [
            PlacementRequest(PartitionKind.VERTICAL_SHELF, [Point3D(-0.5, 1.1)]),
            PlacementRequest(PartitionKind.HORIZONTAL_SHELF, [Point3D(0.5, 1.5)]),
            PlacementRequest(PartitionKind.DRAWER, [Point3D(0.5, 0.3)]),
        ],
    )


class TestLayoutDiagramFormatter:
    """Tests for the ASCII front elevation."""

    def test_no_cabinet(self) -> None:
        assert LayoutDiagramFormatter().format(None, []) == "No cabinet to display."

    def test_header_and_footer(self, layout_output: LayoutOutput) -> None:
        text = LayoutDiagramFormatter().format(layout_output.cabinet, layout_output.partitions)
        assert text.startswith("CABINET LAYOUT DIAGRAM")
        assert "Dimensions: 200 cm W x 220 cm H x 60 cm D" in text
        assert "Horizontal shelves: 1" in text
        assert "Vertical shelves: 1" in text
        assert "Drawers: 1" in text

    def test_grid_draws_parts(self, layout_output: LayoutOutput) -> None:
        text = LayoutDiagramFormatter().format(
            layout_output.cabinet, layout_output.partitions, width=40, height=16
        )
        grid = text.splitlines()[3 : 3 + 16]
        assert all(len(row) == 40 for row in grid)
        assert grid[0].startswith("+") and grid[0].endswith("+")
        interior = [row[1:-1] for row in grid[1:-1]]
        assert any("|" in row for row in interior)
        assert any("=" in row for row in interior)
        assert any("-" in row for row in interior)

    def test_empty_cabinet_grid_is_blank(self, layout_output: LayoutOutput) -> None:
        text = LayoutDiagramFormatter().format(layout_output.cabinet, [], width=30, height=10)
        grid = text.splitlines()[3 : 3 + 10]
        assert all(row[1:-1].strip() == "" for row in grid[1:-1])


class TestLayoutSummaryFormatter:
    def test_summary(self, layout_output: LayoutOutput) -> None:
        text = LayoutSummaryFormatter().format(layout_output)
        assert "PARTITIONS" in text
        assert "PLACEMENTS" in text
        assert "Vertical shelf" in text
        assert "Committed: 3  Rejected: 0" in text

    def test_errors(self) -> None:
        output = LayoutOutput(cabinet=None, errors=["Width must be positive"])
        assert LayoutSummaryFormatter().format(output) == "Error: Width must be positive"


class TestJsonExporter:
    def test_export(self, layout_output: LayoutOutput) -> None:
        data = json.loads(JsonExporter().export(layout_output))
        assert data["cabinet"]["width"] == pytest.approx(2.0)
        assert data["cabinet"]["color"] == "#8B4513"
        assert len(data["cabinet"]["panels"]) == 5
        assert [p["kind"] for p in data["partitions"]] == [
            "shelf-vertical",
            "shelf-horizontal",
            "drawer",
        ]
        assert data["partitions"][0]["color"] == "#DEB887"
        assert data["partitions"][2]["color"] == "#F5F5DC"
        assert all(p["committed"] for p in data["placements"])

    def test_export_errors(self) -> None:
        output = LayoutOutput(cabinet=None, errors=["Height must be positive"])
        assert json.loads(JsonExporter().export(output)) == {
            "errors": ["Height must be positive"]
        }
