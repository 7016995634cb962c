"""Translation function resolving keys against the active locale.

Composes the locale store, the path resolver, the template engine and the
fetch coordinator. A miss returns immediately with an empty (or default)
value and schedules a background fetch; once the dictionary arrives, the
next read or any ``watch`` subscriber sees the corrected text.
"""

from typing import Any, Callable, Optional

from infrastructure.i18n.configuration import ConfigurationManager
from infrastructure.i18n.fetcher import FetchCoordinator
from infrastructure.i18n.models import Params
from infrastructure.i18n.paths import resolve
from infrastructure.i18n.signals import Unsubscribe
from infrastructure.i18n.store import LocaleStore
from infrastructure.i18n.templates import render
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Callable translation service.

    Attributes:
        store: LocaleStore holding the active locale and dictionaries.
        fetcher: FetchCoordinator used on misses.
        config: Configuration collaborator giving the preferred language.
    """

    def __init__(
        self,
        store: LocaleStore,
        fetcher: FetchCoordinator,
        config: ConfigurationManager,
    ):
        self.store = store
        self.fetcher = fetcher
        self.config = config

    def __call__(
        self,
        key: str,
        params: Optional[Params] = None,
        default_value: Optional[str] = None,
    ) -> Any:
        """Translate ``key`` and fetch the dictionary in the background on a miss.

        An empty translation counts as a miss, the same as an absent key.

        Args:
            key: Dot-path of the message, e.g. "incident.created".
            params: Values injected into the message template.
            default_value: Template used when the key is not found.

        Returns:
            The translated text, or the raw value when ``key`` points at a
            nested dictionary.

        Example:
            ```python
            t, actions = create_translation_engine(
                {"fr": {"hello": "Bonjour {{ name }} !"}}, transport=..., config=...
            )
            t("hello", {"name": "John"}, "Hello, {{ name }}!")
            # => 'Bonjour John !'
            ```
        """
        translated = self.translate(key, params, default_value)
        if translated == "":
            logger.debug(
                "translation_miss", key=key, locale=self.store.locale_signal.get()
            )
            self.fetcher.schedule(self.store.add, self._preferred_locale)
        return translated

    def translate(
        self,
        key: str,
        params: Optional[Params] = None,
        default_value: Optional[str] = None,
    ) -> Any:
        """Resolve ``key`` without triggering any fetch."""
        value = resolve(self.store.active_dictionary(), key, default_value or "")
        if callable(value):
            return value(params)
        if isinstance(value, str):
            return render(value, params or {})
        return value

    def watch(
        self,
        key: str,
        callback: Callable[[Any], None],
        params: Optional[Params] = None,
        default_value: Optional[str] = None,
    ) -> Unsubscribe:
        """Call ``callback`` with the translation now and whenever it changes.

        The value is recomputed when the active locale switches or a
        dictionary is added. Recomputations do not trigger fetches; only the
        initial read does.

        Returns:
            A callable stopping the notifications.
        """
        last = self(key, params, default_value)
        callback(last)

        def recompute(*_: Any) -> None:
            nonlocal last
            value = self.translate(key, params, default_value)
            if value != last:
                last = value
                callback(value)

        unsubscribers = [
            self.store.subscribe_locale(recompute),
            self.store.subscribe_dictionary(recompute),
        ]

        def unsubscribe() -> None:
            for unsubscriber in unsubscribers:
                unsubscriber()

        return unsubscribe

    async def wait_for_fetches(self) -> None:
        """Wait until background dictionary fetches have completed."""
        await self.fetcher.wait()

    async def close(self) -> None:
        """Finish pending fetches, then close the transport.

        Engines built by ``create_translation_engine_from_settings`` own their
        transport; call this on shutdown to release its HTTP client.
        """
        await self.fetcher.wait()
        await self.fetcher.transport.close()

    def _preferred_locale(self) -> Optional[str]:
        return self.config.get_config_option("language")
