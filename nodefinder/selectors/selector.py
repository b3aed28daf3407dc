"""
Normalized selectors for nodefinder.

Selector.normalize() resolves the selector kind and expands the locator into
the XPath expressions the query executor runs, in declaration order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from nodefinder.exceptions import InvalidSelector
from nodefinder.selectors.filters import FilterPipeline
from nodefinder.selectors.options import FilterOptions
from nodefinder.selectors.registry import (
    FailureMessage,
    SelectorKind,
    SelectorRegistry,
    get_registry,
)

if TYPE_CHECKING:
    from nodefinder.config.options import FinderConfig
    from nodefinder.node.element import Element

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selector:
    """What to find: kind, locator, options and the expanded expressions."""

    kind: SelectorKind
    locator: str
    options: FilterOptions
    xpaths: tuple[str, ...]
    pipeline: FilterPipeline = field(repr=False, compare=False)

    @property
    def name(self) -> str:
        return self.kind.name

    @property
    def failure_message(self) -> Optional[FailureMessage]:
        return self.kind.failure_message

    async def matches_filters(self, node: "Element") -> bool:
        """Check a candidate against every filter of this selector."""
        return await self.pipeline.matches(node)

    @classmethod
    def normalize(
        cls,
        *args: Any,
        config: "FinderConfig",
        registry: Optional[SelectorRegistry] = None,
    ) -> "Selector":
        """Build a selector from finder arguments.

        Args:
            *args: ``(locator,)`` or ``(kind, locator)``, optionally followed
                by the FilterOptions produced by extract_normalized_options().
            config: Configuration snapshot of the current call.
            registry: Selector kinds to resolve against; defaults to the
                process-wide registry.

        Raises:
            InvalidSelector: If the arguments have the wrong shape or the
                locator cannot be expanded.
            UnknownSelectorKind: If the kind is not registered.
        """
        registry = registry or get_registry()
        positional = list(args)
        options = FilterOptions()
        if positional and isinstance(positional[-1], FilterOptions):
            options = positional.pop()

        if len(positional) == 2:
            kind = registry.resolve(positional[0])
            locator = positional[1]
        elif len(positional) == 1:
            locator = positional[0]
            kind = registry.detect(locator) or registry.resolve(config.default_selector)
        else:
            raise InvalidSelector(
                f"Expected a locator optionally preceded by a selector kind, "
                f"got {len(positional)} positional arguments"
            )

        locator = _coerce_locator(kind, locator)
        xpaths = kind.call(locator, options)
        if not xpaths:
            raise InvalidSelector(f"Selector {kind.name} produced no expressions for {locator!r}")

        logger.debug(f"Normalized {kind.name} {locator!r} into {len(xpaths)} expression(s)")
        return cls(
            kind=kind,
            locator=locator,
            options=options,
            xpaths=xpaths,
            pipeline=FilterPipeline.build(options, kind.filters),
        )


def _coerce_locator(kind: SelectorKind, locator: Any) -> str:
    """Turn a locator argument into the string the path generator expects.

    Strings, enum members with a string value, UTF-8 bytes and numbers are
    accepted. Anything else, a compiled pattern for instance, is rejected
    rather than stringified into an expression nobody meant.
    """
    if isinstance(locator, Enum):
        locator = locator.value
    if isinstance(locator, bytes):
        locator = locator.decode("utf-8")
    if isinstance(locator, (int, float)) and not isinstance(locator, bool):
        locator = str(locator)
    if not isinstance(locator, str):
        raise InvalidSelector(
            f"Locator for {kind.name} selector must be a string, "
            f"got {type(locator).__name__}"
        )
    return locator
