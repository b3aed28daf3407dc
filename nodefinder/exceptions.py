"""
Exceptions raised by nodefinder.

Only ElementNotFound is raised by the retry engine for a missing element.
UnknownSelectorKind and InvalidSelector describe a broken query and are never
retried. BackendError is transient while find() is polling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from nodefinder.selectors.selector import Selector


class FinderError(Exception):
    """Base class for all nodefinder errors."""


class UnknownSelectorKind(FinderError, KeyError):
    """Raised when a selector kind is not registered."""

    def __init__(self, kind: Any) -> None:
        self.kind = kind
        super().__init__(f"Unknown selector kind: {kind!r}")

    def __str__(self) -> str:
        return str(self.args[0])


class InvalidSelector(FinderError, ValueError):
    """Raised for malformed finder arguments or untranslatable locators."""


class BackendError(FinderError):
    """Raised by a document backend when a query cannot be evaluated."""

    def __init__(self, message: str, expression: Optional[str] = None) -> None:
        self.expression = expression
        super().__init__(message)


class ElementNotFound(FinderError):
    """Raised when no element matches before the wait time expires."""

    def __init__(self, message: str, selector: Optional["Selector"] = None) -> None:
        self.selector = selector
        super().__init__(message)


__all__ = [
    "FinderError",
    "UnknownSelectorKind",
    "InvalidSelector",
    "BackendError",
    "ElementNotFound",
]
