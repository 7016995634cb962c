"""i18n system - reactive translation resolution engine.

Resolves text for a key in the active locale, interpolates parameters into
message templates, and fetches missing locale dictionaries in the
background.

Main components:
- paths: resolve() for dot-path lookup in nested mappings
- templates: render() for {{ name }} interpolation
- signals: Signal and Store observable cells
- store: LocaleStore holding the active locale and dictionaries
- loader: TranslationTransport, YAMLTranslationTransport, HTTPTranslationTransport
- fetcher: FetchCoordinator single-flight dictionary fetches
- translator: Translator, the translation function
- factory: create_translation_engine and TranslationActions
"""

from infrastructure.i18n.configuration import (
    ConfigurationManager,
    SettingsConfigurationManager,
)
from infrastructure.i18n.exceptions import TranslationError, TranslationFetchError
from infrastructure.i18n.factory import (
    TranslationActions,
    create_translation_engine,
    create_translation_engine_from_settings,
)
from infrastructure.i18n.fetcher import FetchCoordinator
from infrastructure.i18n.loader import (
    HTTPTranslationTransport,
    TranslationTransport,
    YAMLTranslationTransport,
)
from infrastructure.i18n.paths import resolve
from infrastructure.i18n.signals import Signal, Store
from infrastructure.i18n.store import LocaleStore
from infrastructure.i18n.templates import render
from infrastructure.i18n.translator import Translator

__all__ = [
    "ConfigurationManager",
    "SettingsConfigurationManager",
    "TranslationError",
    "TranslationFetchError",
    "TranslationActions",
    "create_translation_engine",
    "create_translation_engine_from_settings",
    "FetchCoordinator",
    "TranslationTransport",
    "YAMLTranslationTransport",
    "HTTPTranslationTransport",
    "resolve",
    "render",
    "Signal",
    "Store",
    "LocaleStore",
    "Translator",
]
