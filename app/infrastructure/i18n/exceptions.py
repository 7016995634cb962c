"""Exceptions raised by the translation engine collaborators."""

from typing import Any, Dict, Optional


class TranslationError(Exception):
    """Base exception for the translation engine"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class TranslationFetchError(TranslationError):
    """Raised when a transport cannot produce a dictionary for a locale"""

    def __init__(
        self,
        locale: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.locale = locale
        super().__init__(message, details={"locale": locale, **(details or {})})
