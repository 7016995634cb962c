"""Infrastructure modules for the translation engine.

Centralized infrastructure components:
- configuration: Settings management (settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Translation resolution engine
"""

# Configuration
from infrastructure.configuration import settings

# Observability
from infrastructure.logging import get_module_logger

__all__ = [
    # Configuration
    "settings",
    # Observability
    "get_module_logger",
]
