"""Dictionary transports.

Defines the contract the fetch coordinator uses to obtain a missing
locale's dictionary, and provides YAML-file and HTTP implementations.
"""

import asyncio
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

import httpx
import yaml

from infrastructure.i18n.exceptions import TranslationFetchError
from infrastructure.i18n.models import Dictionary
from infrastructure.i18n.store import merge_dictionaries
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class TranslationTransport(ABC):
    """Abstract base for dictionary transports.

    Implementations define where a locale's dictionary comes from.
    """

    @abstractmethod
    async def fetch_locale_data(self, locale: str) -> Dictionary:
        """Fetch the dictionary of a specific locale.

        Args:
            locale: Locale to fetch (e.g. "en", "fr-FR").

        Returns:
            The locale's Dictionary.

        Raises:
            TranslationFetchError: If the dictionary cannot be obtained.
        """
        pass

    async def close(self) -> None:
        """Release resources held by the transport. Nothing to release by default."""
        return None


class YAMLTranslationTransport(TranslationTransport):
    """Transport reading YAML dictionaries from a directory.

    Expects files named ``<locale>.yml`` or ``<domain>.<locale>.yml``. All
    files of a locale are deep-merged into one dictionary, in file name order.

    Attributes:
        translations_dir: Path to directory containing YAML files.
        cache: Optional cache of parsed dictionaries (locale -> dictionary).
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize YAML transport.

        Args:
            translations_dir: Path to directory with YAML translation files.
            use_cache: Whether to cache parsed dictionaries in memory.

        Raises:
            ValueError: If translations_dir does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, Dictionary] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_transport",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    async def fetch_locale_data(self, locale: str) -> Dictionary:
        return await asyncio.to_thread(self.load, locale)

    def load(self, locale: str) -> Dictionary:
        """Load and merge every YAML file of ``locale``.

        Args:
            locale: Locale to load.

        Returns:
            The merged dictionary.

        Raises:
            TranslationFetchError: If no file exists for the locale or a file
                cannot be parsed.
        """
        if self.use_cache and locale in self.cache:
            logger.debug("loaded_from_cache", locale=locale)
            return self.cache[locale]

        yaml_files = self._files_for(locale)
        if not yaml_files:
            raise TranslationFetchError(
                locale,
                f"No translation files found for locale {locale} in {self.translations_dir}",
            )

        dictionary: Dictionary = {}
        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise TranslationFetchError(
                    locale, f"Failed to parse {yaml_file}: {e}"
                ) from e

            if data is None:
                continue
            if not isinstance(data, dict):
                logger.warning(
                    "invalid_yaml_format", file=str(yaml_file), expected="dict"
                )
                continue
            dictionary = merge_dictionaries(dictionary, data)

        logger.info(
            "loaded_translations",
            locale=locale,
            file_count=len(yaml_files),
            key_count=len(dictionary),
        )

        if self.use_cache:
            self.cache[locale] = dictionary

        return dictionary

    def load_all(self) -> Dict[str, Dictionary]:
        """Load every locale present in the directory.

        Returns:
            Dict mapping each locale to its dictionary.
        """
        result = {}
        for locale in self.available_locales():
            try:
                result[locale] = self.load(locale)
            except TranslationFetchError as e:
                logger.warning("could_not_load_locale", locale=locale, error=e.message)
        return result

    def available_locales(self) -> List[str]:
        # "incident.fr-FR.yml" -> "fr-FR", "en.yml" -> "en"
        return sorted(
            {path.stem.split(".")[-1] for path in self.translations_dir.glob("*.yml")}
        )

    def clear_cache(self) -> None:
        """Clear all cached dictionaries."""
        self.cache.clear()
        logger.info("cleared_translation_cache")

    def _files_for(self, locale: str) -> List[Path]:
        files = set(self.translations_dir.glob(f"*.{locale}.yml"))
        exact = self.translations_dir / f"{locale}.yml"
        if exact.exists():
            files.add(exact)
        return sorted(files)


class HTTPTranslationTransport(TranslationTransport):
    """Transport fetching JSON dictionaries from a remote endpoint.

    Issues ``GET {base_url}/{locale}`` and expects a JSON object body.

    Attributes:
        base_url: Base URL of the dictionary endpoint.
        client: Async HTTP client reused across fetches.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()
        logger.info("translation_http_client_closed", base_url=self.base_url)

    async def fetch_locale_data(self, locale: str) -> Dictionary:
        try:
            response = await self.client.get(f"/{locale}")
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPError as e:
            logger.error("translation_http_fetch_failed", locale=locale, error=str(e))
            raise TranslationFetchError(
                locale, f"Failed to fetch translations for {locale}: {e}"
            ) from e
        except ValueError as e:
            raise TranslationFetchError(
                locale, f"Invalid JSON dictionary for {locale}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise TranslationFetchError(
                locale,
                f"Expected a JSON object for {locale}, got {type(data).__name__}",
            )
        return data
