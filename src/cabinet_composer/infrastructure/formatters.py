"""Output formatters and exporters for cabinet layouts."""

from __future__ import annotations

import json
from typing import Any

from cabinet_composer.application.dtos import LayoutOutput
from cabinet_composer.domain import (
    Cabinet,
    OrientationClass,
    Partition,
    PartitionKind,
)


class LayoutDiagramFormatter:
    """Formats an ASCII front elevation of a cabinet and its partitions."""

    def format(
        self,
        cabinet: Cabinet | None,
        partitions: list[Partition],
        width: int = 60,
        height: int = 20,
    ) -> str:
        """Generate an ASCII diagram of the cabinet seen from the front."""
        if cabinet is None:
            return "No cabinet to display."

        lines = [
            "CABINET LAYOUT DIAGRAM",
            "=" * width,
            "",
        ]

        grid = [[" " for _ in range(width)] for _ in range(height)]

        def col(x: float) -> int:
            ratio = (x + cabinet.width / 2) / cabinet.width
            return min(width - 2, max(1, round(ratio * (width - 1))))

        def row(y: float) -> int:
            ratio = y / cabinet.height
            return min(height - 2, max(1, round((1 - ratio) * (height - 1))))

        # Drawers first so shelves and verticals stay visible on top
        ordered = sorted(partitions, key=lambda p: p.kind is not PartitionKind.DRAWER)
        for partition in ordered:
            low, high = partition.min_corner, partition.max_corner
            if partition.orientation is OrientationClass.VERTICAL_SPANNING:
                x = col(partition.center.x)
                for y in range(row(high.y), row(low.y) + 1):
                    grid[y][x] = "|"
            elif partition.kind is PartitionKind.DRAWER:
                for y in range(row(high.y), row(low.y) + 1):
                    for x in range(col(low.x), col(high.x) + 1):
                        grid[y][x] = "="
            else:
                y = row(partition.center.y)
                for x in range(col(low.x), col(high.x) + 1):
                    grid[y][x] = "-"

        self._draw_box(grid, 0, 0, width - 1, height - 1)

        for grid_row in grid:
            lines.append("".join(grid_row))

        counts = {kind: 0 for kind in PartitionKind}
        for partition in partitions:
            counts[partition.kind] += 1

        lines.append("")
        lines.append(
            f"Dimensions: {cabinet.width * 100:g} cm W x {cabinet.height * 100:g} cm H"
            f" x {cabinet.depth * 100:g} cm D"
        )
        lines.append(f"Horizontal shelves: {counts[PartitionKind.HORIZONTAL_SHELF]}")
        lines.append(f"Vertical shelves: {counts[PartitionKind.VERTICAL_SHELF]}")
        lines.append(f"Drawers: {counts[PartitionKind.DRAWER]}")

        return "\n".join(lines)

    def _draw_box(
        self, grid: list[list[str]], x1: int, y1: int, x2: int, y2: int
    ) -> None:
        """Draw a box on the grid."""
        grid[y1][x1] = "+"
        grid[y1][x2] = "+"
        grid[y2][x1] = "+"
        grid[y2][x2] = "+"

        for x in range(x1 + 1, x2):
            grid[y1][x] = "-"
            grid[y2][x] = "-"

        for y in range(y1 + 1, y2):
            grid[y][x1] = "|"
            grid[y][x2] = "|"


class LayoutSummaryFormatter:
    """Formats a text report of partitions and placement outcomes."""

    def format(self, output: LayoutOutput) -> str:
        if not output.is_valid:
            return "\n".join(f"Error: {error}" for error in output.errors)

        lines = [
            "PARTITIONS",
            "=" * 60,
            f"{'#':>3}  {'Kind':<18} {'Center (x, y, z) m':<26} Size (w x h x d) m",
            "-" * 60,
        ]
        for i, p in enumerate(output.partitions, start=1):
            center = f"({p.center.x:.3f}, {p.center.y:.3f}, {p.center.z:.3f})"
            size = f"{p.size.width:.3f} x {p.size.height:.3f} x {p.size.depth:.3f}"
            lines.append(f"{i:>3}  {p.kind.display_name:<18} {center:<26} {size}")

        if output.outcomes:
            lines.append("")
            lines.append("PLACEMENTS")
            lines.append("=" * 60)
            for outcome in output.outcomes:
                mark = "placed" if outcome.committed else "rejected"
                lines.append(
                    f"{outcome.index + 1:>3}  {outcome.kind.display_name:<18} {mark}"
                )

        lines.append("")
        lines.append(
            f"Committed: {len(output.partitions)}  Rejected: {len(output.rejected)}"
        )
        return "\n".join(lines)


class JsonExporter:
    """Exports layout data as JSON."""

    def export(self, output: LayoutOutput) -> str:
        """Export layout output as JSON string."""
        if not output.is_valid or output.cabinet is None:
            return json.dumps({"errors": output.errors}, indent=2)

        cabinet = output.cabinet
        data = {
            "cabinet": {
                "width": cabinet.width,
                "height": cabinet.height,
                "depth": cabinet.depth,
                "wall_thickness": cabinet.wall_thickness,
                "color": f"#{cabinet.color:06X}",
                "panels": [
                    {
                        "name": panel.name,
                        "size": list(panel.size.as_tuple()),
                        "center": list(panel.center.as_tuple()),
                    }
                    for panel in cabinet.shell_panels()
                ],
            },
            "partitions": [self._format_partition(p) for p in output.partitions],
            "placements": [
                {
                    "index": outcome.index,
                    "kind": outcome.kind.value,
                    "committed": outcome.committed,
                    "status": outcome.status,
                }
                for outcome in output.outcomes
            ],
        }
        return json.dumps(data, indent=2)

    def _format_partition(self, partition: Partition) -> dict[str, Any]:
        return {
            "kind": partition.kind.value,
            "center": list(partition.center.as_tuple()),
            "size": list(partition.size.as_tuple()),
            "color": f"#{partition.kind.finish_color:06X}",
        }
