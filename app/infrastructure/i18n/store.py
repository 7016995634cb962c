"""Reactive holder of the active locale and the loaded dictionaries."""

from types import MappingProxyType
from typing import Any, Callable, List, Mapping, Optional

from infrastructure.i18n.models import Dictionary, LocaleTable
from infrastructure.i18n.paths import resolve
from infrastructure.i18n.signals import Signal, Store, Unsubscribe
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def merge_dictionaries(base: Mapping[str, Any], update: Mapping[str, Any]) -> Dictionary:
    """Deep-merge ``update`` into a copy of ``base``.

    Nested mappings present on both sides are merged; any other value from
    ``update`` replaces the one in ``base``. Neither argument is mutated.
    """
    merged: Dictionary = dict(base)
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_dictionaries(current, value)
        else:
            merged[key] = value
    return merged


def freeze_dictionary(table: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return a read-only deep copy of ``table``.

    Nested mappings are copied and wrapped in ``MappingProxyType`` at every
    level, so callers holding the result cannot change the stored data.
    """
    return MappingProxyType(
        {
            key: freeze_dictionary(value) if isinstance(value, Mapping) else value
            for key, value in table.items()
        }
    )


class LocaleStore:
    """Active locale plus the LocaleTable, both observable.

    Only this class mutates the table and the active locale; every other
    component reads through its accessors.

    Attributes:
        locale_signal: Cell holding the active locale identifier.
        dictionaries: Cell holding one read-only Dictionary per locale.
            Seed tables and added tables are copied on the way in.
    """

    def __init__(self, initial: Optional[LocaleTable], locale: str):
        self.locale_signal: Signal[str] = Signal(locale)
        self.dictionaries: Store[Mapping[str, Any]] = Store(
            {name: freeze_dictionary(table) for name, table in (initial or {}).items()}
        )

    def add(self, locale: str, table: Mapping[str, Any]) -> None:
        """Add a locale, or merge ``table`` into an already loaded one.

        Args:
            locale: The locale to add or edit.
            table: The dictionary to merge.
        """
        merged = freeze_dictionary(
            merge_dictionaries(self.dictionaries.get(locale) or {}, table)
        )
        self.dictionaries.set(locale, merged)
        logger.info("dictionary_added", locale=locale, key_count=len(table))

    def locale(self, value: Optional[str] = None) -> str:
        """Switch to ``value``, or return the active locale when omitted.

        Args:
            value: The locale to switch to.

        Returns:
            The active locale after the call.
        """
        if value:
            previous = self.locale_signal.get()
            self.locale_signal.set(value)
            if previous != value:
                logger.info("locale_switched", previous=previous, locale=value)
        return self.locale_signal.get()

    def get_dictionary(self, locale: str) -> Optional[Mapping[str, Any]]:
        """Read-only snapshot of the dictionary of ``locale``.

        ``locale`` is itself a dot-path into the table, so ``"en.menu"``
        returns the ``menu`` section of the English dictionary.
        """
        return resolve(self.dictionaries.snapshot(), locale)

    def active_dictionary(self) -> Optional[Mapping[str, Any]]:
        return self.dictionaries.get(self.locale_signal.get())

    def available_locales(self) -> List[str]:
        return self.dictionaries.keys()

    def subscribe_locale(self, callback: Callable[[str], None]) -> Unsubscribe:
        return self.locale_signal.subscribe(callback)

    def subscribe_dictionary(
        self, callback: Callable[[str, Mapping[str, Any]], None]
    ) -> Unsubscribe:
        return self.dictionaries.subscribe(callback)

    def snapshot(self) -> Mapping[str, Mapping[str, Any]]:
        return self.dictionaries.snapshot()
