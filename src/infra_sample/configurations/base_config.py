"""
BaseConfig - common behaviour for all resource configuration wrappers.
MIT License. See Project Root for the license information.
"""

from typing import Dict, Any


class BaseConfig:
    """
    Base configuration class that provides common functionality for all resource configurations.

    Resource-specific configuration classes wrap one section of the stack
    configuration and expose typed properties with sensible defaults.
    """

    def __init__(self, config: Dict[str, Any]) -> None:
        """
        Initialize the base configuration with a dictionary.

        Args:
            config: Dictionary containing configuration values
        """
        self.__config = config or {}

    @property
    def dictionary(self) -> Dict[str, Any]:
        """
        Get the raw configuration dictionary.

        Returns:
            The configuration dictionary
        """
        return self.__config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Args:
            key: The configuration key
            default: Default value if key is not found

        Returns:
            The configuration value or default
        """
        return self.__config.get(key, default)

    def get_section(self, key: str) -> Dict[str, Any]:
        """
        Get a nested configuration section, always returning a dictionary.

        Args:
            key: The section key (e.g., "health_check", "launch_template")

        Returns:
            The nested dictionary, or an empty one when the section is missing
        """
        return self.__config.get(key) or {}
