"""
Config contracts: JSON Schema validation of raw field configurations.
"""

from .validators import (
    INPUT_NUMBER_CONFIG,
    SCHEMA_DIR,
    ContractValidator,
    InputNumberConfigValidator,
    SchemaLoader,
    validate_input_number_config,
)

__all__ = [
    "INPUT_NUMBER_CONFIG",
    "SCHEMA_DIR",
    "SchemaLoader",
    "ContractValidator",
    "InputNumberConfigValidator",
    "validate_input_number_config",
]
