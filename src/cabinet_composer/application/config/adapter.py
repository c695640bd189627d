"""Conversion from configuration models to application DTOs."""

from cabinet_composer.application.config.schema import LayoutConfiguration
from cabinet_composer.application.dtos import CabinetInput, PlacementRequest
from cabinet_composer.domain import Point3D


def config_to_cabinet_input(config: LayoutConfiguration) -> CabinetInput:
    """Convert the cabinet section to a CabinetInput DTO."""
    cabinet = config.cabinet
    return CabinetInput(
        width_cm=cabinet.width_cm,
        height_cm=cabinet.height_cm,
        depth_cm=cabinet.depth_cm,
        color_hex=cabinet.color,
        wall_thickness=cabinet.wall_thickness,
    )


def config_to_placements(config: LayoutConfiguration) -> list[PlacementRequest]:
    """Convert the placements section to PlacementRequest DTOs."""
    return [
        PlacementRequest(
            kind=placement.kind,
            path=[Point3D(x, y, z) for x, y, z in placement.path],
        )
        for placement in config.placements
    ]
