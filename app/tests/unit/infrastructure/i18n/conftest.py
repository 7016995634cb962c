"""Feature-level fixtures for i18n system tests.

Provides collaborator doubles and translation directories for the
translation engine scenarios.
"""

import pytest
import yaml

from infrastructure.i18n import create_translation_engine
from tests.factories.i18n import (
    FakeConfigurationManager,
    FakeTransport,
    make_locale_table,
)


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - incident.en.yml
    - role.en.yml
    - fr.yml
    """
    en_incident = {
        "incident": {
            "created": "Incident {{ incident_id }} created",
            "resolved": "Incident {{ incident_id }} resolved",
        }
    }
    with open(tmp_path / "incident.en.yml", "w") as f:
        yaml.dump(en_incident, f)

    en_role = {
        "incident": {"escalated": "Incident escalated to {{ role }}"},
        "role": {"created": "Role {{ role_name }} created"},
    }
    with open(tmp_path / "role.en.yml", "w") as f:
        yaml.dump(en_role, f)

    fr = {
        "incident": {"created": "Incident {{ incident_id }} créé"},
        "role": {"created": "Rôle {{ role_name }} créé"},
    }
    with open(tmp_path / "fr.yml", "w", encoding="utf-8") as f:
        yaml.dump(fr, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def transport():
    """Transport double serving a French dictionary."""
    return FakeTransport({"fr": {"greeting": "Bonjour {{ name }}"}})


@pytest.fixture
def config():
    """Configuration collaborator preferring French."""
    return FakeConfigurationManager(language="fr")


@pytest.fixture
def engine(transport, config):
    """Engine seeded with English, ambient language pinned."""
    return create_translation_engine(
        make_locale_table(["en"]),
        transport=transport,
        config=config,
        ambient_language="de",
    )
