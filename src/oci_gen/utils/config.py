"""Configuration file support for oci-gen."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from oci_gen.utils.errors import ValidationError


class GeneratorConfig(BaseModel):
    """Defaults applied when a Generator is created from the command line."""

    host_specific: bool = Field(
        default=False,
        description="Reject capabilities the running kernel does not support",
    )
    template: str | None = Field(default=None, description="Default template config path")


class OutputConfig(BaseModel):
    """Output configuration."""

    default_format: str = Field(default="json", description="Default output format for show")
    indent: str = Field(default="\t", description="Indentation used when saving configs")
    color: bool = Field(default=True, description="Enable color output")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    structured: bool = Field(default=False, description="Use structured log lines")


class OciGenConfig(BaseModel):
    """Main configuration for oci-gen."""

    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_config_paths() -> list[Path]:
    """Get possible configuration file paths, in search order."""
    paths = []

    paths.append(Path.cwd() / ".oci-gen.yaml")
    paths.append(Path.cwd() / ".oci-gen.yml")
    paths.append(Path.cwd() / "oci-gen.yaml")

    home = Path.home()
    paths.append(home / ".oci-gen.yaml")
    paths.append(home / ".config" / "oci-gen" / "config.yaml")

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        paths.append(Path(xdg_config) / "oci-gen" / "config.yaml")

    return paths


def load_config(config_path: Path | str | None = None) -> OciGenConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file. If None, searches default locations.

    Returns:
        Loaded configuration

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
        ValidationError: If the file is not valid YAML or has invalid settings
    """
    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            return _load_config_file(path)
        raise FileNotFoundError(f"Config file not found: {config_path}")

    for path in get_config_paths():
        if path.exists():
            return _load_config_file(path)

    return OciGenConfig()


def _load_config_file(path: Path) -> OciGenConfig:
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValidationError(f"Invalid YAML in config file: {e}", field=str(path)) from e

    if data is None:
        return OciGenConfig()
    try:
        return OciGenConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid settings in config file: {e}", field=str(path)) from e


def save_config(config: OciGenConfig, config_path: Path | str | None = None) -> Path:
    """Save configuration to file.

    Only values that differ from the defaults are written.

    Args:
        config: Configuration to save
        config_path: Path to save to. Defaults to ~/.config/oci-gen/config.yaml

    Returns:
        Path where config was saved
    """
    if config_path is None:
        config_path = Path.home() / ".config" / "oci-gen" / "config.yaml"
    else:
        config_path = Path(config_path)

    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(mode="json", exclude_defaults=True)
    config_path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=False))

    return config_path


def get_default_config() -> OciGenConfig:
    """Get the default configuration."""
    return OciGenConfig()


_config: OciGenConfig | None = None


def get_config() -> OciGenConfig:
    """Get the global configuration instance.

    Loads from file on first call.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: OciGenConfig | None) -> None:
    """Set (or reset, with None) the global configuration instance."""
    global _config
    _config = config
