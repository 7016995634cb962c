"""Locale resolution logic for choosing the initial active locale."""

import locale as system_locale
import os
from typing import Mapping, Optional

from infrastructure.i18n.models import DEFAULT_BASELINE_LOCALE
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def normalize_language_tag(raw: Optional[str]) -> Optional[str]:
    """Convert a POSIX locale name to a BCP 47 style tag.

    "fr_CA.UTF-8" -> "fr-CA", "en" -> "en". "C" and "POSIX" carry no
    language and return None.
    """
    if not raw:
        return None
    tag = raw.split(".")[0].split("@")[0].replace("_", "-")
    if not tag or tag.upper() in ("C", "POSIX"):
        return None
    return tag


def detect_ambient_language() -> Optional[str]:
    """Return the language of the running process, if any.

    Reads the process locale first, then the LC_ALL, LC_MESSAGES and LANG
    environment variables.
    """
    try:
        language = system_locale.getlocale()[0]
    except ValueError:
        language = None

    tag = normalize_language_tag(language)
    if tag:
        return tag

    for variable in ("LC_ALL", "LC_MESSAGES", "LANG"):
        tag = normalize_language_tag(os.environ.get(variable))
        if tag:
            return tag
    return None


def select_initial_locale(
    initial: Mapping[str, object],
    default_locale: Optional[str] = None,
    ambient_language: Optional[str] = None,
    baseline_locale: str = DEFAULT_BASELINE_LOCALE,
) -> str:
    """Pick the locale an engine starts with.

    Resolution order:
    1. ``default_locale`` when given
    2. ``ambient_language`` when it is a key of ``initial``
    3. The first key of ``initial``
    4. ``baseline_locale``

    Args:
        initial: The seed LocaleTable.
        default_locale: Locale explicitly requested by the caller.
        ambient_language: Language of the runtime environment.
        baseline_locale: Used when nothing else applies.

    Returns:
        The locale identifier to activate.
    """
    if default_locale:
        return default_locale
    if ambient_language and ambient_language in initial:
        logger.debug("resolved_from_ambient_language", locale=ambient_language)
        return ambient_language
    for locale in initial:
        return locale
    logger.debug("resolved_to_baseline_locale", locale=baseline_locale)
    return baseline_locale
