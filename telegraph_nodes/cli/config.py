"""Converter configuration loading and validation.

Settings are resolved in layers, later layers winning:

1. Built-in defaults (ConverterConfig)
2. YAML configuration file (--config, or .telegraph-nodes.yaml if present)
3. Environment variables, loaded through python-dotenv so a .env file works
4. Command-line flags

Configuration file structure:
    parser: "html.parser"
    max_depth: 128
"""

import logging
import os
from typing import Any, Dict, Optional

import yaml
from dotenv import find_dotenv, load_dotenv

from ..content_converter.dom import SUPPORTED_PARSERS
from ..content_converter.serializer import MAX_DEPTH_LIMIT
from .errors import ConfigError, InputError
from .models import ConverterConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = '.telegraph-nodes.yaml'

ENV_PARSER = 'TELEGRAPH_NODES_PARSER'
ENV_MAX_DEPTH = 'TELEGRAPH_NODES_MAX_DEPTH'


class ConfigLoader:
    """Handles configuration file loading, validation, and saving."""

    KNOWN_FIELDS = {'parser', 'max_depth'}

    @classmethod
    def load(cls, config_path: str) -> ConverterConfig:
        """Load and parse configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            ConverterConfig with file values applied over the defaults

        Raises:
            InputError: If file cannot be read
            ConfigError: If configuration is invalid or malformed
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            raise InputError(config_path, 'read', 'Configuration file not found')
        except PermissionError:
            raise InputError(config_path, 'read', 'Permission denied')
        except OSError as e:
            raise InputError(config_path, 'read', str(e))

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax: {str(e)}")

        # An empty file means "all defaults"
        if config_dict is None:
            return ConverterConfig()

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        return cls._parse_config(config_dict, ConverterConfig())

    @classmethod
    def save(cls, config_path: str, config: ConverterConfig) -> None:
        """Save configuration to a YAML file.

        Args:
            config_path: Path to the YAML configuration file
            config: ConverterConfig to save

        Raises:
            InputError: If file cannot be written
        """
        yaml_str = yaml.safe_dump(
            {'parser': config.parser, 'max_depth': config.max_depth},
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False
        )

        config_dir = os.path.dirname(config_path)
        if config_dir:
            try:
                os.makedirs(config_dir, exist_ok=True)
            except OSError as e:
                raise InputError(config_dir, 'create_directory', str(e))

        try:
            with open(config_path, 'w', encoding='utf-8') as f:
                f.write(yaml_str)
        except PermissionError:
            raise InputError(config_path, 'write', 'Permission denied')
        except OSError as e:
            raise InputError(config_path, 'write', str(e))

    @classmethod
    def apply_environment(cls, config: ConverterConfig) -> ConverterConfig:
        """Overlay TELEGRAPH_NODES_* environment variables on a config.

        Variables from a .env file in the working directory are loaded first.
        Values already set in the process environment are not overridden.

        Args:
            config: Configuration to start from

        Returns:
            New ConverterConfig with environment values applied

        Raises:
            ConfigError: If an environment value is invalid
        """
        load_dotenv(find_dotenv(usecwd=True))

        overrides: Dict[str, Any] = {}
        parser = os.getenv(ENV_PARSER)
        if parser:
            overrides['parser'] = parser
        max_depth = os.getenv(ENV_MAX_DEPTH)
        if max_depth:
            try:
                overrides['max_depth'] = int(max_depth)
            except ValueError:
                raise ConfigError(
                    f"{ENV_MAX_DEPTH} must be an integer, got '{max_depth}'",
                    'max_depth'
                )

        return cls._parse_config(overrides, config)

    @classmethod
    def resolve(
        cls,
        config_path: Optional[str] = None,
        parser: Optional[str] = None,
        max_depth: Optional[int] = None,
    ) -> ConverterConfig:
        """Resolve the effective configuration from all layers.

        Args:
            config_path: Explicit configuration file (must exist if given)
            parser: Parser flag value, if given on the command line
            max_depth: Max depth flag value, if given on the command line

        Returns:
            Effective ConverterConfig

        Raises:
            InputError: If the configuration file cannot be read
            ConfigError: If any layer holds an invalid value
        """
        if config_path is not None:
            config = cls.load(config_path)
        elif os.path.exists(DEFAULT_CONFIG_FILE):
            logger.debug(f"Using configuration file {DEFAULT_CONFIG_FILE}")
            config = cls.load(DEFAULT_CONFIG_FILE)
        else:
            config = ConverterConfig()

        config = cls.apply_environment(config)

        flags: Dict[str, Any] = {}
        if parser is not None:
            flags['parser'] = parser
        if max_depth is not None:
            flags['max_depth'] = max_depth
        config = cls._parse_config(flags, config)

        logger.debug(f"Effective configuration: parser={config.parser}, max_depth={config.max_depth}")
        return config

    @classmethod
    def _parse_config(cls, config_dict: Dict[str, Any], base: ConverterConfig) -> ConverterConfig:
        """Validate config_dict and apply it over base.

        Args:
            config_dict: Raw configuration values
            base: Configuration supplying values for absent fields

        Returns:
            Validated ConverterConfig

        Raises:
            ConfigError: If a field is unknown or has an invalid value
        """
        unknown_fields = set(config_dict.keys()) - cls.KNOWN_FIELDS
        if unknown_fields:
            raise ConfigError(
                f"Unknown fields: {', '.join(sorted(str(f) for f in unknown_fields))}"
            )

        parser = config_dict.get('parser', base.parser)
        if parser not in SUPPORTED_PARSERS:
            raise ConfigError(
                f"Unsupported parser '{parser}' (expected one of: {', '.join(SUPPORTED_PARSERS)})",
                'parser'
            )

        max_depth = config_dict.get('max_depth', base.max_depth)
        # bool is an int subclass; reject it explicitly
        if isinstance(max_depth, bool) or not isinstance(max_depth, int):
            raise ConfigError(
                f"Field 'max_depth' must be an integer, got {type(max_depth).__name__}",
                'max_depth'
            )
        if max_depth < 1:
            raise ConfigError(
                f"Field 'max_depth' must be at least 1, got {max_depth}",
                'max_depth'
            )
        if max_depth > MAX_DEPTH_LIMIT:
            raise ConfigError(
                f"Field 'max_depth' must be at most {MAX_DEPTH_LIMIT}, got {max_depth}",
                'max_depth'
            )

        return ConverterConfig(parser=parser, max_depth=max_depth)
