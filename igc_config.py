#!/usr/bin/env python3
"""
Configuration handling for IGC to GeoJSON converter

This module provides configuration management for the converter.
It handles command line arguments and config file loading; command line
values override the [Defaults] section of the config file.
"""

import configparser
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional

from igc_model import AltitudeMode
from igc_constants import (
    DEFAULT_ALTITUDE_MODE,
    DEFAULT_OUT_PATH,
    DEFAULT_INDENT,
    DEFAULT_FEATURE_PROJECTION,
    CONFIG_SECTION_DEFAULTS,
    CONFIG_FILE_NAMES
)

# Configure logger
logger = logging.getLogger(__name__)


class ConfigParser:
    """
    Handles parsing of configuration files.
    Separates the parsing logic from the configuration storage.
    """

    def __init__(self):
        """Initialize the config parser"""
        self.parser = configparser.RawConfigParser()

    def find_config_file(self, cli_path: Optional[str] = None) -> Optional[str]:
        """Find a configuration file to use"""
        if cli_path and os.path.isfile(cli_path):
            logger.info(f"Using configuration file: {cli_path}")
            return cli_path
        if cli_path:
            logger.warning(f"Configuration file not found: {cli_path}")

        # Look in standard locations
        paths = ('.', os.path.dirname(os.path.abspath(__file__)))

        for path in paths:
            for file in CONFIG_FILE_NAMES:
                full_path = os.path.join(path, file)
                if Path(full_path).is_file():
                    logger.info(f"Found configuration file: {full_path}")
                    return full_path

        logger.debug("No configuration file found, using defaults")
        return None

    def load_config_file(self, file_path: Optional[str] = None) -> bool:
        """Load configuration from file"""
        config_file = self.find_config_file(file_path)
        if not config_file:
            return False

        try:
            self.parser.read(config_file)
            return True
        except configparser.Error as e:
            logger.error(f"Error reading config file: {e}")
            return False

    def get_sections(self) -> List[str]:
        """Get all section names from the configuration file"""
        return self.parser.sections()

    def get_default_settings(self) -> Dict[str, str]:
        """Get default settings from configuration, keys lower-cased"""
        if CONFIG_SECTION_DEFAULTS in self.parser:
            return {key.lower(): value.strip() for key, value in self.parser[CONFIG_SECTION_DEFAULTS].items()}
        return {}


class Config:
    """Main configuration class for IGC to GeoJSON converter"""

    def __init__(self, cli_args=None):
        """Initialize with command line arguments"""
        self.parser = ConfigParser()
        self.cli_args = cli_args

        # Initialize defaults
        self.altitude_mode = AltitudeMode.from_value(DEFAULT_ALTITUDE_MODE)
        self.feature_projection: Optional[str] = DEFAULT_FEATURE_PROJECTION
        self.out_path: Optional[str] = DEFAULT_OUT_PATH
        self.indent: Optional[int] = DEFAULT_INDENT

        # Load configuration
        self._load_config()

    def _cli_value(self, name: str):
        return getattr(self.cli_args, name, None) if self.cli_args is not None else None

    def _load_config(self):
        """Load and process configuration"""
        self.parser.load_config_file(self._cli_value('config'))

        defaults = self.parser.get_default_settings()

        # Altitude mode; an invalid value is a configuration error
        altitude_mode = self._cli_value('altitude_mode') or defaults.get('altitudemode')
        if altitude_mode:
            self.altitude_mode = AltitudeMode.from_value(altitude_mode)

        feature_projection = self._cli_value('projection') or defaults.get('featureprojection')
        if feature_projection:
            self.feature_projection = feature_projection

        out_path = self._cli_value('output') or defaults.get('outpath')
        if out_path:
            self.out_path = out_path

        indent = self._cli_value('indent')
        if indent is None and defaults.get('indent'):
            try:
                indent = int(defaults['indent'])
            except ValueError:
                logger.warning(f"Ignoring invalid Indent value: {defaults['indent']}")
        self.indent = indent

    @property
    def outPath(self) -> Optional[str]:
        """Get output path"""
        return self.out_path

    def output_path_for(self, in_path: str, suffix: str) -> Path:
        """Output file for an input file, honouring the configured folder"""
        out_path = Path(in_path).with_suffix(suffix)
        if self.out_path:
            out_path = Path(self.out_path) / out_path.name
        return out_path
