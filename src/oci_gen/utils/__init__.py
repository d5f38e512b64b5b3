"""Utility functions for oci-gen."""

from oci_gen.utils.logging import configure_logging, get_logger, get_logger_with_context
from oci_gen.utils.errors import (
    OciGenError,
    TemplateNotFoundError,
    DecodeError,
    ValidationError,
    SeccompRuleError,
    HostUnsupportedCapabilityError,
    SerializationError,
    SpecIOError,
)
from oci_gen.utils.config import (
    OciGenConfig,
    GeneratorConfig,
    OutputConfig,
    LoggingConfig,
    load_config,
    save_config,
    get_config,
    set_config,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "get_logger_with_context",
    # Errors
    "OciGenError",
    "TemplateNotFoundError",
    "DecodeError",
    "ValidationError",
    "SeccompRuleError",
    "HostUnsupportedCapabilityError",
    "SerializationError",
    "SpecIOError",
    # Config
    "OciGenConfig",
    "GeneratorConfig",
    "OutputConfig",
    "LoggingConfig",
    "load_config",
    "save_config",
    "get_config",
    "set_config",
]
