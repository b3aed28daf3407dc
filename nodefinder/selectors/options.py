"""
Finder option normalization for nodefinder.

Turns the loose arguments a caller passes to find/first/all into a
FilterOptions value. After normalization the filter pipeline only ever sees
one shape per option: text is always a compiled pattern, visible is always a
bool and selected is always a list.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Pattern, Sequence

from nodefinder.config.env import parse_bool
from nodefinder.config.options import FinderConfig

# Option names handled by the finder itself, everything else is a kind filter
RESERVED_OPTIONS = frozenset({"text", "visible", "selected", "message"})


@dataclass(frozen=True)
class FilterOptions:
    """Normalized finder options.

    Attributes:
        text: Pattern the node's text must contain, literal text already
            escaped.
        visible: Only accept visible nodes when true; false accepts both.
        selected: Accepted selected-state values.
        message: Explicit ElementNotFound message.
        custom: Remaining options, matched against kind-specific filters.
    """

    text: Optional[Pattern[str]] = None
    visible: bool = False
    selected: Optional[list[str]] = None
    message: Optional[str] = None
    custom: Mapping[str, Any] = field(default_factory=dict)

    def get(self, name: str, default: Any = None) -> Any:
        """Get an option by its original name."""
        if name in RESERVED_OPTIONS:
            return getattr(self, name)
        return self.custom.get(name, default)

    def __contains__(self, name: object) -> bool:
        if name in RESERVED_OPTIONS:
            return getattr(self, str(name)) is not None
        return name in self.custom


def normalize_text(text: Any) -> Pattern[str]:
    """Turn literal text into a "contains this text" pattern.

    Compiled patterns pass through unchanged. Bytes are decoded as UTF-8 and
    anything else is converted to a string, then escaped, so ``*`` or ``.``
    only ever match themselves.
    """
    if isinstance(text, re.Pattern):
        return text
    if isinstance(text, bytes):
        text = text.decode("utf-8")
    return re.compile(re.escape(str(text)))


def normalize_visible(visible: Any, config: FinderConfig) -> bool:
    """Resolve the visible option to a bool.

    None falls back to ``ignore_hidden_elements``. Strings are parsed the way
    boolean environment variables are, so ``"false"`` means false.
    """
    if visible is None:
        return config.ignore_hidden_elements
    if isinstance(visible, str):
        return parse_bool(visible.strip())
    return bool(visible)


def normalize_selected(selected: Any) -> list[str]:
    """Flatten a scalar or (nested) sequence of selected values into a list."""
    if isinstance(selected, (str, bytes)) or not isinstance(selected, Iterable):
        return [selected]
    result: list[Any] = []
    for item in selected:
        result.extend(normalize_selected(item))
    return result


def extract_normalized_options(
    args: Sequence[Any],
    config: FinderConfig,
    options: Optional[Mapping[str, Any]] = None,
) -> tuple[list[Any], FilterOptions]:
    """Split finder arguments into positionals and normalized options.

    A trailing mapping in ``args`` is taken as the options bag; keyword
    ``options`` are merged over it. The caller's sequence is never modified.

    Args:
        args: Positional finder arguments, e.g. ``("css", "a.nav", {"text": "Home"})``.
        config: Configuration snapshot of the current call.
        options: Keyword options of the call.

    Returns:
        The positional arguments with the FilterOptions appended, and the
        FilterOptions on their own.
    """
    args = list(args)
    raw: dict[str, Any] = {}
    if args and isinstance(args[-1], Mapping):
        raw.update(args.pop())
    if options:
        raw.update(options)

    text = raw.pop("text", None)
    visible = raw.pop("visible", None)
    selected = raw.pop("selected", None)
    message = raw.pop("message", None)

    normalized = FilterOptions(
        text=normalize_text(text) if text is not None else None,
        visible=normalize_visible(visible, config),
        selected=normalize_selected(selected) if selected is not None else None,
        message=message,
        custom=raw,
    )
    args.append(normalized)
    return args, normalized
