"""Configuration schema and loading for layout files.

Public API:
    - LayoutConfiguration: Root configuration model
    - CabinetConfig: Cabinet form values
    - PlacementConfig: One scripted drag
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - ValidationResult: Container for validation results
    - validate_config: Perform full configuration validation
    - config_to_cabinet_input: Convert config to a CabinetInput DTO
    - config_to_placements: Convert config to PlacementRequest DTOs
"""

from cabinet_composer.application.config.adapter import (
    config_to_cabinet_input,
    config_to_placements,
)
from cabinet_composer.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from cabinet_composer.application.config.schema import (
    SUPPORTED_VERSIONS,
    CabinetConfig,
    LayoutConfiguration,
    PlacementConfig,
)
from cabinet_composer.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "CabinetConfig",
    "ConfigError",
    "LayoutConfiguration",
    "PlacementConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_cabinet_input",
    "config_to_placements",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]
