"""Single-flight fetching of missing locale dictionaries.

When a translation misses, the coordinator asks the configuration
collaborator which locale the user prefers, fetches that locale's
dictionary through the transport, and merges it into the locale store.
At most one fetch is in flight per coordinator; misses arriving while a
fetch is running are dropped, not queued.
"""

import asyncio
from typing import Any, Callable, Mapping, Optional, Set

from infrastructure.i18n.loader import TranslationTransport
from infrastructure.i18n.models import DEFAULT_BASELINE_LOCALE
from infrastructure.logging import get_module_logger

logger = get_module_logger()

AddDictionary = Callable[[str, Mapping[str, Any]], None]
PreferredLocale = Callable[[], Optional[str]]


class FetchCoordinator:
    """Fetches one dictionary at a time and hands it to ``add``.

    Attributes:
        transport: Source of dictionaries.
        baseline_locale: Locale fetched when no preference is configured.
    """

    def __init__(
        self,
        transport: TranslationTransport,
        baseline_locale: str = DEFAULT_BASELINE_LOCALE,
    ):
        self.transport = transport
        self.baseline_locale = baseline_locale
        self._fetching = False
        self._tasks: Set[asyncio.Task] = set()

    @property
    def in_flight(self) -> bool:
        return self._fetching

    async def fetch_into(
        self, add: AddDictionary, get_preferred_locale: PreferredLocale
    ) -> None:
        """Fetch the preferred locale's dictionary unless a fetch is running.

        Args:
            add: Receives ``(locale, dictionary)`` once the fetch succeeds.
            get_preferred_locale: Returns the locale to fetch, or None for
                the baseline locale.
        """
        if not self._acquire():
            return
        await self._run(add, get_preferred_locale)

    def schedule(
        self, add: AddDictionary, get_preferred_locale: PreferredLocale
    ) -> Optional[asyncio.Task]:
        """Start a fetch in the background on the running event loop.

        The guard is taken before the task is created, so misses reported
        before the task gets to run are dropped as well.

        Returns:
            The background task, or None when the request was dropped.
        """
        if not self._acquire():
            return None
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._fetching = False
            logger.warning("translation_fetch_not_scheduled", reason="no_running_loop")
            return None

        task = loop.create_task(self._run(add, get_preferred_locale))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def wait(self) -> None:
        """Wait for every fetch started with ``schedule`` to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def _acquire(self) -> bool:
        if self._fetching:
            logger.debug("translation_fetch_dropped", reason="fetch_in_flight")
            return False
        self._fetching = True
        return True

    async def _run(self, add: AddDictionary, get_preferred_locale: PreferredLocale) -> None:
        locale = None
        try:
            locale = get_preferred_locale() or self.baseline_locale
            logger.info("translation_fetch_started", locale=locale)
            table = await self.transport.fetch_locale_data(locale)
            add(locale, table)
            logger.info("translation_fetch_completed", locale=locale)
        except Exception as e:
            # Failures are not surfaced; a later miss may trigger a new attempt
            logger.warning("translation_fetch_failed", locale=locale, error=str(e))
        finally:
            self._fetching = False
