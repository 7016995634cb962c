"""Factory functions for creating translation engines.

Provides ``create_translation_engine`` returning the translation function
together with the actions that manage locales and dictionaries, and a
settings-driven variant choosing the transport from configuration.
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from infrastructure.configuration import Settings, settings as default_settings
from infrastructure.i18n.configuration import (
    ConfigurationManager,
    SettingsConfigurationManager,
)
from infrastructure.i18n.fetcher import FetchCoordinator
from infrastructure.i18n.loader import (
    HTTPTranslationTransport,
    TranslationTransport,
    YAMLTranslationTransport,
)
from infrastructure.i18n.models import DEFAULT_BASELINE_LOCALE, Dictionary, LocaleTable
from infrastructure.i18n.resolvers import detect_ambient_language, select_initial_locale
from infrastructure.i18n.store import LocaleStore
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class TranslationActions:
    """Operations managing the locales of a translation engine."""

    def __init__(self, store: LocaleStore):
        self._store = store

    def add(self, locale: str, table: Mapping[str, Any]) -> None:
        """Add (or edit an existing) locale.

        Example:
            ```python
            actions.add("sw", {"hello": "Hej {{ name }}"})
            ```
        """
        self._store.add(locale, table)

    def locale(self, value: Optional[str] = None) -> str:
        """Switch to ``value``; return the current locale when omitted.

        Example:
            ```python
            actions.locale()      # => 'fr'
            actions.locale("sw")
            actions.locale()      # => 'sw'
            ```
        """
        return self._store.locale(value)

    def dict(self, locale: str) -> Optional[Mapping[str, Any]]:
        """Retrieve a read-only view of the dictionary of a locale.

        Changes go through ``add`` so that watchers are notified.
        """
        return self._store.get_dictionary(locale)


def create_translation_engine(
    initial: Optional[LocaleTable] = None,
    default_locale: Optional[str] = None,
    *,
    transport: TranslationTransport,
    config: ConfigurationManager,
    baseline_locale: str = DEFAULT_BASELINE_LOCALE,
    ambient_language: Optional[str] = None,
) -> Tuple[Translator, TranslationActions]:
    """Create a translation engine.

    Args:
        initial: Seed dictionaries keyed by locale.
        default_locale: Locale to start with. Defaults to the ambient
            language when it is seeded, else the first seeded locale.
        transport: Source of dictionaries fetched on misses.
        config: Configuration collaborator giving the preferred language.
        baseline_locale: Locale fetched when no language is configured.
        ambient_language: Language of the runtime. Detected from the
            process locale when not given.

    Returns:
        The translation function and the locale actions.

    Usage:
        t, actions = create_translation_engine(
            {"en": {"hello": "Hello {{ name }}"}},
            transport=YAMLTranslationTransport(Path("locales")),
            config=SettingsConfigurationManager(settings),
        )
        t("hello", {"name": "Tom"})
        # => 'Hello Tom'
    """
    initial = dict(initial or {})
    if ambient_language is None:
        ambient_language = detect_ambient_language()

    locale = select_initial_locale(
        initial,
        default_locale=default_locale,
        ambient_language=ambient_language,
        baseline_locale=baseline_locale,
    )
    store = LocaleStore(initial, locale)
    fetcher = FetchCoordinator(transport, baseline_locale=baseline_locale)
    translator = Translator(store, fetcher, config)

    logger.info(
        "translation_engine_created",
        locale=locale,
        seeded_locales=list(initial.keys()),
        transport=type(transport).__name__,
    )
    return translator, TranslationActions(store)


def create_translation_engine_from_settings(
    settings: Optional[Settings] = None,
    initial: Optional[LocaleTable] = None,
    default_locale: Optional[str] = None,
    preload: bool = False,
) -> Tuple[Translator, TranslationActions]:
    """Create a translation engine configured from application settings.

    Uses an HTTP transport when ``I18N_TRANSLATIONS_URL`` is set, otherwise
    a YAML transport over ``I18N_TRANSLATIONS_DIR``.
    The engine owns the transport it creates; call ``await t.close()`` on
    shutdown to release the HTTP client.

    Args:
        settings: Settings to read (default: the application settings).
        initial: Seed dictionaries keyed by locale.
        default_locale: Locale to start with.
        preload: Seed every locale found in the YAML directory up front.

    Raises:
        ValueError: If neither a translations URL nor directory is configured.
    """
    settings = settings or default_settings
    i18n = settings.i18n

    transport: TranslationTransport
    seed: Dict[str, Dictionary] = {}
    if i18n.TRANSLATIONS_URL:
        transport = HTTPTranslationTransport(
            i18n.TRANSLATIONS_URL, timeout=i18n.HTTP_TIMEOUT_SECONDS
        )
    elif i18n.TRANSLATIONS_DIR:
        yaml_transport = YAMLTranslationTransport(Path(i18n.TRANSLATIONS_DIR))
        if preload:
            seed = yaml_transport.load_all()
        transport = yaml_transport
    else:
        raise ValueError(
            "Either I18N_TRANSLATIONS_URL or I18N_TRANSLATIONS_DIR must be configured"
        )

    seed.update(initial or {})
    return create_translation_engine(
        seed,
        default_locale,
        transport=transport,
        config=SettingsConfigurationManager(settings),
        baseline_locale=i18n.BASELINE_LOCALE,
    )
