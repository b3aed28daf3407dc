"""
Builtin selector kinds for nodefinder.

Form-oriented kinds (field, checkbox, select, ...) expand into several XPath
expressions so that a control can be found by id, name, placeholder or label
text without a single monster union expression.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from nodefinder.selectors.registry import BuiltinSelector, SelectorRegistry
from nodefinder.selectors.xpath import (
    BUTTON_INPUT_TYPES,
    FIELD_TAGS,
    NON_FIELD_INPUT_TYPES,
    NON_FILLABLE_INPUT_TYPES,
    any_of,
    contains_text,
    css_to_xpath,
    labelled_field_xpaths,
    literal,
    self_is,
    type_in,
)

if TYPE_CHECKING:
    from nodefinder.node.element import Element
    from nodefinder.selectors.options import FilterOptions
    from nodefinder.selectors.selector import Selector


# Path generators


def _xpath(locator: str, options: "FilterOptions") -> str:
    return locator


def _css(locator: str, options: "FilterOptions") -> str:
    return css_to_xpath(locator)


def _id(locator: str, options: "FilterOptions") -> str:
    return f".//*[@id={literal(locator)}]"


def _field(locator: str, options: "FilterOptions") -> list[str]:
    field = f"*[{self_is(FIELD_TAGS)}][not({type_in(NON_FIELD_INPUT_TYPES)})]"
    return labelled_field_xpaths(field, locator)


def _fillable_field(locator: str, options: "FilterOptions") -> list[str]:
    field = (
        f"*[self::textarea or (self::input and not({type_in(NON_FILLABLE_INPUT_TYPES)}))]"
    )
    return labelled_field_xpaths(field, locator)


def _input_of_type(input_type: str):
    def generate(locator: str, options: "FilterOptions") -> list[str]:
        return labelled_field_xpaths(f"input[@type={literal(input_type)}]", locator)

    return generate


def _select(locator: str, options: "FilterOptions") -> list[str]:
    return labelled_field_xpaths("select", locator)


def _option(locator: str, options: "FilterOptions") -> str:
    return f".//option[normalize-space(string(.))={literal(locator)}]"


def _fieldset(locator: str, options: "FilterOptions") -> str:
    value = literal(locator)
    return f".//fieldset[{any_of(f'@id={value}', f'legend[{contains_text(locator)}]')}]"


def _link(locator: str, options: "FilterOptions") -> str:
    value = literal(locator)
    return (
        ".//a[@href]["
        + any_of(
            f"@id={value}",
            contains_text(locator),
            f"contains(@title, {value})",
            f".//img[contains(@alt, {value})]",
        )
        + "]"
    )


def _button(locator: str, options: "FilterOptions") -> list[str]:
    value = literal(locator)
    return [
        f".//input[{type_in(BUTTON_INPUT_TYPES)}]"
        f"[{any_of(f'@id={value}', f'contains(@value, {value})', f'contains(@title, {value})')}]",
        f".//input[@type='image'][contains(@alt, {value})]",
        ".//button["
        + any_of(
            f"@id={value}",
            f"contains(@value, {value})",
            contains_text(locator),
            f"contains(@title, {value})",
        )
        + "]",
    ]


def _link_or_button(locator: str, options: "FilterOptions") -> list[str]:
    return [_link(locator, options), *_button(locator, options)]


def _content(locator: str, options: "FilterOptions") -> str:
    return f".//*[{contains_text(locator)}]"


def _table(locator: str, options: "FilterOptions") -> str:
    value = literal(locator)
    return f".//table[{any_of(f'@id={value}', f'caption[{contains_text(locator)}]')}]"


def _looks_like_xpath(locator: Any) -> bool:
    return isinstance(locator, str) and locator.lstrip().startswith(("/", ".//", "("))


# Kind-specific filters


async def _checked(node: "Element", value: Any) -> bool:
    return await node.is_checked() == bool(value)


async def _unchecked(node: "Element", value: Any) -> bool:
    return await node.is_checked() != bool(value)


_CHECKED_FILTERS = {"checked": _checked, "unchecked": _unchecked}


# Failure messages


def _message(template: str):
    def build(scope: Any, selector: "Selector") -> str:
        return template.format(locator=selector.locator)

    return build


def _option_message(scope: Any, selector: "Selector") -> str:
    from nodefinder.node.element import Element

    suffix = " in the select box" if isinstance(scope, Element) else ""
    return f"no option with text '{selector.locator}'{suffix}"


def register_builtin_selectors(registry: SelectorRegistry) -> SelectorRegistry:
    """Register every builtin kind into a registry.

    Returns:
        The same registry, for chaining.
    """
    registry.add(BuiltinSelector.XPATH, _xpath, match=_looks_like_xpath)
    registry.add(BuiltinSelector.CSS, _css)
    registry.add(BuiltinSelector.ID, _id)
    registry.add(BuiltinSelector.FIELD, _field, filters=_CHECKED_FILTERS)
    registry.add(BuiltinSelector.FIELDSET, _fieldset)
    registry.add(
        BuiltinSelector.LINK_OR_BUTTON,
        _link_or_button,
        failure_message=_message("no link or button '{locator}' found"),
    )
    registry.add(
        BuiltinSelector.LINK,
        _link,
        failure_message=_message("no link with title, id or text '{locator}' found"),
    )
    registry.add(
        BuiltinSelector.BUTTON,
        _button,
        failure_message=_message("no button with value or id or text '{locator}' found"),
    )
    registry.add(
        BuiltinSelector.FILLABLE_FIELD,
        _fillable_field,
        failure_message=_message(
            "no text field, text area or password field with id, name, or label "
            "'{locator}' found"
        ),
    )
    registry.add(
        BuiltinSelector.RADIO_BUTTON,
        _input_of_type("radio"),
        failure_message=_message("no radio button with id, name, or label '{locator}' found"),
        filters=_CHECKED_FILTERS,
    )
    registry.add(
        BuiltinSelector.CHECKBOX,
        _input_of_type("checkbox"),
        failure_message=_message("no checkbox with id, name, or label '{locator}' found"),
        filters=_CHECKED_FILTERS,
    )
    registry.add(
        BuiltinSelector.SELECT,
        _select,
        failure_message=_message("no select box with id, name, or label '{locator}' found"),
    )
    registry.add(BuiltinSelector.OPTION, _option, failure_message=_option_message)
    registry.add(
        BuiltinSelector.FILE_FIELD,
        _input_of_type("file"),
        failure_message=_message("no file field with id, name, or label '{locator}' found"),
    )
    registry.add(BuiltinSelector.CONTENT, _content)
    registry.add(BuiltinSelector.TABLE, _table)
    return registry
