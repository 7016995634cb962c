import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.i18n`) works during pytest collection.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

from infrastructure.configuration import I18nSettings, Settings


@pytest.fixture
def make_settings():
    """Build Settings with explicit i18n values instead of the environment."""

    def _make(**i18n_values):
        return Settings(i18n=I18nSettings(**i18n_values))

    return _make
