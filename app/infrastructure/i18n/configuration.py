"""Configuration collaborator consulted when a dictionary is fetched."""

from abc import ABC, abstractmethod
from typing import Optional

from infrastructure.configuration import Settings


class ConfigurationManager(ABC):
    """Source of user preferences used by the translation engine."""

    @abstractmethod
    def get_config_option(self, name: str) -> Optional[str]:
        """Return the value of option ``name``, or None when it is unset."""
        pass


class SettingsConfigurationManager(ConfigurationManager):
    """Reads preferences from the application settings.

    Only the ``language`` option is known; it maps to ``settings.i18n.LANGUAGE``.
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    def get_config_option(self, name: str) -> Optional[str]:
        if name == "language":
            return self.settings.i18n.LANGUAGE or None
        return None
