"""Defines the package-wide settings that control how :mod:`epochal` reports its activity.

The value types themselves have no tunables; settings only cover where and how the
:class:`.Logger` writes. Defaults ship in ``default_behavior.config`` and any item may be
overridden by a user-provided file of the same layout:

.. code-block:: ini

    [logging]
    OutputLocation = ./logs/
    Level = INFO
"""

from __future__ import annotations

# Standard Library Imports
from configparser import ConfigParser
from configparser import Error as ConfigError
from importlib import resources
from logging import CRITICAL, DEBUG, ERROR, INFO, NOTSET, WARNING
from pathlib import Path
from typing import TYPE_CHECKING

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Callable
    from typing import Any, Final


class SubConfig:
    """Attribute-style view of one section of the configuration.

    Items are read as ``config.logging.Level`` rather than ``config["logging"]["Level"]``.
    """

    def __init__(self, section: str):
        """Create an empty view of a section.

        Args:
            section (``str``): name of the section in the config file

        Raises:
            TypeError: if `section` is not a string
        """
        if not isinstance(section, str):
            raise TypeError(f"Config section name must be a string, not {type(section)}")
        self.section = section

    def setonce(self, name: str, value: Any):
        """Set an item of this section, which can only be done once.

        Args:
            name (``str``): name of the item
            value (``any``): value of the item

        Raises:
            AttributeError: if `name` already holds a value
        """
        if (current := getattr(self, name, None)) is not None:
            raise AttributeError(f"[{self.section}] {name} is already set to {current!r}")
        setattr(self, name, value)


class CustomConfigParser(ConfigParser):
    """Config parser that also understands logging level names."""

    LOGGING_LEVELS: Final[dict[str, int]] = {
        "CRITICAL": CRITICAL,
        "ERROR": ERROR,
        "WARNING": WARNING,
        "INFO": INFO,
        "DEBUG": DEBUG,
        "NOTSET": NOTSET,
    }

    def getlogginglevel(self, section: str, option: str) -> int:
        """Return the :mod:`logging` level named by an option, ``NOTSET`` if unknown."""
        return self.LOGGING_LEVELS.get(self.get(section, option).upper(), NOTSET)


class BehavioralConfig:
    """Singleton holding the package settings, one :class:`.SubConfig` per section."""

    DEFAULT_CONFIG_FILE: Final[str] = "default_behavior.config"

    DEFAULT_SECTIONS: Final[dict[str, dict[str, Any]]] = {
        "logging": {
            "OutputLocation": "stdout",
            "Level": DEBUG,
            "MaxFileSize": 1048576,
            "MaxFileCount": 50,
            "AllowMultipleHandlers": False,
        },
    }

    STR_ITEMS: Final[dict[str, tuple[str, ...]]] = {"logging": ("OutputLocation",)}

    INT_ITEMS: Final[dict[str, tuple[str, ...]]] = {"logging": ("MaxFileSize", "MaxFileCount")}

    BOOL_ITEMS: Final[dict[str, tuple[str, ...]]] = {"logging": ("AllowMultipleHandlers",)}

    LOGGING_LEVEL_ITEMS: Final[dict[str, tuple[str, ...]]] = {"logging": ("Level",)}

    __shared_inst: BehavioralConfig | None = None

    def __init__(self, config_file_path: str | None = None):
        """Load the settings, and make them the shared instance.

        Args:
            config_file_path (``str``, optional): user config file. Items it lacks, or all of
                them if the file doesn't exist, keep their default value. Defaults to the
                shipped ``default_behavior.config``.
        """
        self._parser = CustomConfigParser()
        self._readFile(config_file_path)

        for section, defaults in self.DEFAULT_SECTIONS.items():
            setattr(self, section, self._buildSection(section, defaults))

        BehavioralConfig.__shared_inst = self

    def _readFile(self, config_file_path: str | None):
        """Feed the shipped defaults or a user file to the parser."""
        if config_file_path is None:
            res = resources.files("epochal.common").joinpath(self.DEFAULT_CONFIG_FILE)
            with (
                resources.as_file(res) as res_filepath,
                open(res_filepath, encoding="utf-8") as config_file,
            ):
                self._parser.read_file(config_file)

        elif Path(config_file_path).exists():
            with open(config_file_path, encoding="utf-8") as config_file:
                self._parser.read_file(config_file)

    def _getterFor(self, section: str, key: str) -> Callable[[str, str], Any]:
        """Select the typed parser method for an item.

        Raises:
            KeyError: if the item isn't listed in any of the typed item tables
        """
        if key in self.STR_ITEMS.get(section, ()):
            return self._parser.get
        if key in self.INT_ITEMS.get(section, ()):
            return self._parser.getint
        if key in self.BOOL_ITEMS.get(section, ()):
            return self._parser.getboolean
        if key in self.LOGGING_LEVEL_ITEMS.get(section, ()):
            return self._parser.getlogginglevel
        raise KeyError(f"Configuration item '{section}::{key}' lacks a type classification.")

    def _buildSection(self, section: str, defaults: dict[str, Any]) -> SubConfig:
        """Read every item of a section, falling back on its default when missing."""
        sub = SubConfig(section)
        for key, default in defaults.items():
            getter = self._getterFor(section, key)
            try:
                value = getter(section, key)
            except ConfigError:
                value = default
            sub.setonce(key, value)
        return sub

    @classmethod
    def getConfig(cls, config_file_path: str | None = None) -> BehavioralConfig:
        """Return the shared settings, loading them on first use."""
        if cls.__shared_inst is None:
            cls.__shared_inst = BehavioralConfig(config_file_path)
        return cls.__shared_inst
