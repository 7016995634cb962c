"""String template interpolation for translation messages."""

import re
from typing import Any, Mapping, Optional, Pattern, Union

from infrastructure.i18n.paths import resolve

# Matches {{ name }} placeholders; the inner text is captured as a dot-path
PLACEHOLDER_PATTERN: Pattern[str] = re.compile(r"\{\{(.*?)\}\}")


def render(
    template: str,
    params: Optional[Mapping[str, Any]],
    pattern: Union[str, Pattern[str]] = PLACEHOLDER_PATTERN,
) -> str:
    """Replace every placeholder in ``template`` with its value from ``params``.

    Placeholders are dot-paths into ``params`` (``{{ user.name }}``). A
    placeholder that does not resolve collapses to an empty string. Inserted
    values are not rendered again.

    Args:
        template: The message containing placeholders.
        params: Values to inject.
        pattern: Regular expression, compiled or as a string, whose first
            group captures the path.

    Returns:
        The interpolated message.

    Example:
        >>> render("Hello {{ name }}", {"name": "Tom"})
        'Hello Tom'
    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern)
    return pattern.sub(
        lambda match: str(resolve(params, match.group(1), "")),
        template,
    )
