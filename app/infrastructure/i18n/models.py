"""Translation models for i18n system.

Defines the type aliases shared by the translation engine components.
"""

from typing import Any, Dict, Mapping

# Parameters injected into a translation template, e.g. {"name": "Tom"}
Params = Mapping[str, Any]

# Nested translation data for a single locale, addressed with dot-paths.
# Leaves are template strings or callables taking Params.
Dictionary = Dict[str, Any]

# All loaded dictionaries keyed by locale identifier ("en", "fr", ...)
LocaleTable = Dict[str, Dictionary]

DEFAULT_BASELINE_LOCALE = "en"
