"""
Configuration management for uuid-codec.

Loads and validates configuration from uuid-codec.toml files using Pydantic.
Every setting can also be overridden through ``UUID_CODEC_*`` environment
variables.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Literal, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "uuid-codec.toml"

OutputFormat = Literal["string", "base64", "base64url", "hex"]


class GenerationConfig(BaseSettings):
    """UUID generation defaults."""

    model_config = SettingsConfigDict(env_prefix="UUID_CODEC_GENERATION_")

    version: Literal[4, 5] = Field(default=4, description="UUID version to generate")
    namespace: str = Field(
        default="dns",
        description="Namespace for version 5 (dns, url, oid, x500 or a UUID string)",
    )


class OutputConfig(BaseSettings):
    """Output encoding configuration."""

    model_config = SettingsConfigDict(env_prefix="UUID_CODEC_OUTPUT_")

    format: OutputFormat = Field(default="string", description="Default output encoding")


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="UUID_CODEC_LOGGING_")

    level: str = Field(default="WARNING", description="Root log level")
    format: str = Field(
        default="%(levelname)s %(name)s: %(message)s",
        description="logging.Formatter format string",
    )


class Config(BaseSettings):
    """Main configuration for uuid-codec."""

    model_config = SettingsConfigDict(env_prefix="UUID_CODEC_")

    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_toml(cls, path: Path | str) -> Config:
        """
        Load configuration from TOML file.

        Args:
            path: Path to uuid-codec.toml file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is invalid
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        logger.info(f"Loaded configuration from {config_path}")
        return cls(**data)

    @classmethod
    def find_and_load(cls, start_dir: Optional[Path] = None) -> Config:
        """
        Find and load configuration from uuid-codec.toml.

        Searches for uuid-codec.toml starting from start_dir and walking up
        parent directories until found or reaching filesystem root.

        Args:
            start_dir: Directory to start search (defaults to current directory)

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If no config file found
        """
        if start_dir is None:
            start_dir = Path.cwd()

        current = Path(start_dir).resolve()

        while True:
            config_path = current / CONFIG_FILENAME
            logger.debug(f"Looking for configuration at {config_path}")
            if config_path.exists():
                return cls.from_toml(config_path)

            parent = current.parent
            if parent == current:
                break
            current = parent

        raise FileNotFoundError(
            f"No {CONFIG_FILENAME} found in {start_dir} or parent directories."
        )

    def to_toml(self, path: Path | str) -> None:
        """
        Write configuration to TOML file.

        Args:
            path: Path to write uuid-codec.toml
        """
        config_path = Path(path)

        toml_content = f"""# uuid-codec configuration

[generation]
version = {self.generation.version}
namespace = "{self.generation.namespace}"

[output]
format = "{self.output.format}"

[logging]
level = "{self.logging.level}"
format = "{self.logging.format}"
"""

        config_path.write_text(toml_content)

    def configure_logging(self) -> None:
        """Apply the logging section to the root logger."""
        logging.basicConfig(level=self.logging.level.upper(), format=self.logging.format)


# Default configuration instance
DEFAULT_CONFIG = Config()
