"""Validation structures and layout advisory checks.

Schema validation happens when a layout file is loaded. The checks here go
further: they replay the scripted placements and report the ones that
would be rejected, and flag cursor points that will be clamped.
"""

from dataclasses import dataclass, field
from typing import Any

from cabinet_composer.application.commands import BuildLayoutCommand
from cabinet_composer.application.config.adapter import (
    config_to_cabinet_input,
    config_to_placements,
)
from cabinet_composer.application.config.schema import LayoutConfiguration


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "cabinet.wall_thickness")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
        placement: Index of the placement the warning concerns, if any
    """

    path: str
    message: str
    suggestion: str | None = None
    placement: int | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self,
        path: str,
        message: str,
        suggestion: str | None = None,
        placement: int | None = None,
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(
                path=path, message=message, suggestion=suggestion, placement=placement
            )
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_path_bounds(config: LayoutConfiguration) -> ValidationResult:
    """Warn about cursor points outside the cabinet's outer box.

    Such points are legal; the session clamps them into the interior. They
    usually mean the path was written in centimetres instead of meters.
    """
    result = ValidationResult()
    half_width = config.cabinet.width_cm / 200
    height = config.cabinet.height_cm / 100
    half_depth = config.cabinet.depth_cm / 200

    for i, placement in enumerate(config.placements):
        for j, (x, y, z) in enumerate(placement.path):
            if abs(x) > half_width or not 0 <= y <= height or abs(z) > half_depth:
                result.add_warning(
                    path=f"placements[{i}].path[{j}]",
                    message=f"Point ({x}, {y}, {z}) lies outside the cabinet and will be clamped",
                    suggestion="Path coordinates are meters from the cabinet's bottom center",
                    placement=i,
                )
    return result


def check_placements(config: LayoutConfiguration) -> ValidationResult:
    """Replay the layout and warn about placements that would be rejected."""
    result = ValidationResult()
    output = BuildLayoutCommand().execute(
        config_to_cabinet_input(config), config_to_placements(config)
    )
    for error in output.errors:
        result.add_error(path="cabinet", message=error)
    for outcome in output.rejected:
        result.add_warning(
            path=f"placements[{outcome.index}]",
            message=f"{outcome.kind.display_name} would be rejected: {outcome.status}",
            suggestion="Move the last path point into a free span",
            placement=outcome.index,
        )
    return result


def validate_config(config: LayoutConfiguration) -> ValidationResult:
    """Perform full validation of a loaded layout configuration.

    Args:
        config: A schema-valid layout configuration

    Returns:
        ValidationResult with any errors and warnings found
    """
    result = ValidationResult()
    result.merge(check_path_bounds(config))
    result.merge(check_placements(config))
    return result
