"""Safe deep access into nested mappings via dot-separated paths."""

from typing import Any, Mapping, Optional


def resolve(root: Optional[Mapping[str, Any]], path: str, fallback: Any = None) -> Any:
    """Read a nested value from ``root`` following a dot-separated path.

    The walk never raises: as soon as a node is falsy, is not a mapping, or
    lacks the next segment, the remaining steps yield ``None``.

    Args:
        root: The mapping to read from. May be ``None`` (e.g. a locale that is
            not loaded yet).
        path: Dot-separated path such as ``"menu.file.open"``. Surrounding
            whitespace is ignored.
        fallback: Value returned when the path does not lead to a value.

    Returns:
        The value stored at ``path``, or ``fallback`` when it is missing.

    Example:
        >>> resolve({"a": {"b": {"c": "hello"}}}, "a.b.c")
        'hello'
        >>> resolve({"a": {"b": {}}}, "a.b.d", "not found")
        'not found'
    """
    value: Any = root
    for segment in path.strip().split("."):
        if not value or not isinstance(value, Mapping):
            value = None
            continue
        value = value.get(segment)
    return value if value is not None else fallback
