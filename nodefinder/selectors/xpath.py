"""
XPath building helpers for nodefinder selector kinds.

All generated expressions are relative (``.//``) so they work both against
the document and against a previously found element acting as a scope.
"""

from __future__ import annotations

from typing import Iterable

from cssselect import HTMLTranslator, SelectorError

from nodefinder.exceptions import InvalidSelector

_translator = HTMLTranslator()

# Form controls a field locator can point at
FIELD_TAGS = ("input", "textarea", "select")
NON_FIELD_INPUT_TYPES = ("submit", "image", "hidden")
NON_FILLABLE_INPUT_TYPES = ("submit", "image", "radio", "checkbox", "hidden", "file")
BUTTON_INPUT_TYPES = ("submit", "reset", "image", "button")


def literal(text: str) -> str:
    """Quote text as an XPath string literal.

    Args:
        text: Text to quote.

    Returns:
        A literal safe to embed in an XPath expression.
    """
    if "'" not in text:
        return f"'{text}'"
    if '"' not in text:
        return f'"{text}"'
    # Contains both quotes - use concat
    parts = text.split("'")
    return "concat('" + "', \"'\", '".join(parts) + "')"


def normalized_text(node: str = ".") -> str:
    return f"normalize-space(string({node}))"


def contains_text(value: str) -> str:
    """Predicate body: the context node's normalized text contains value."""
    return f"contains({normalized_text()}, {literal(value)})"


def any_of(*conditions: str) -> str:
    """Join predicate bodies with ``or``."""
    return " or ".join(f"({c})" for c in conditions)


def type_in(types: Iterable[str]) -> str:
    return any_of(*(f"@type={literal(t)}" for t in types))


def self_is(tags: Iterable[str]) -> str:
    return " or ".join(f"self::{tag}" for tag in tags)


def css_to_xpath(css: str) -> str:
    """Translate a CSS selector into a relative XPath expression.

    Raises:
        InvalidSelector: If the CSS cannot be parsed.
    """
    try:
        return _translator.css_to_xpath(css, prefix="descendant::")
    except SelectorError as e:
        raise InvalidSelector(f"Invalid CSS selector {css!r}: {e}") from e


def labelled_field_xpaths(field: str, locator: str) -> list[str]:
    """Expand a field-like locator into id/name/label lookups.

    Args:
        field: Node test with predicates selecting the candidate controls,
            e.g. ``*[self::input][@type='checkbox']``.
        locator: Id, name, placeholder or label text of the control.

    Returns:
        Two expressions, in priority order: the control matched by its own
        attributes or by a label pointing at it through ``for``, then a label
        wrapping the control. A control is matched by at most one of them.
    """
    value = literal(locator)
    label = f"label[{contains_text(locator)}]"
    attributes = any_of(
        f"@id={value}",
        f"@name={value}",
        f"@placeholder={value}",
        f"@id=//{label}/@for",
    )
    return [
        f".//{field}[{attributes}]",
        f".//{label}//{field}[not({attributes})]",
    ]
