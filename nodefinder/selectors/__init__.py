"""
Selectors for nodefinder.

- **extract_normalized_options / FilterOptions**: caller arguments to options
- **SelectorRegistry / SelectorKind**: selector kinds by name
- **Selector**: a normalized selector with its XPath expressions
- **FilterPipeline**: the checks a candidate must pass

Builtin kinds: xpath, css, id, field, fieldset, link_or_button, link,
button, fillable_field, radio_button, checkbox, select, option, file_field,
content, table.
"""

from nodefinder.selectors.options import (
    RESERVED_OPTIONS,
    FilterOptions,
    extract_normalized_options,
    normalize_selected,
    normalize_visible,
    normalize_text,
)
from nodefinder.selectors.filters import (
    CustomFilter,
    FilterPipeline,
    NodeFilter,
    SelectedFilter,
    TextFilter,
    VisibilityFilter,
)
from nodefinder.selectors.registry import (
    BuiltinSelector,
    SelectorKind,
    SelectorRegistry,
    add_selector,
    get_registry,
)
from nodefinder.selectors.builtin import register_builtin_selectors
from nodefinder.selectors.selector import Selector
from nodefinder.selectors.xpath import css_to_xpath, literal

__all__ = [
    # Options
    "FilterOptions",
    "RESERVED_OPTIONS",
    "extract_normalized_options",
    "normalize_text",
    "normalize_selected",
    "normalize_visible",
    # Filters
    "NodeFilter",
    "VisibilityFilter",
    "TextFilter",
    "SelectedFilter",
    "CustomFilter",
    "FilterPipeline",
    # Registry
    "BuiltinSelector",
    "SelectorKind",
    "SelectorRegistry",
    "add_selector",
    "get_registry",
    "register_builtin_selectors",
    # Selector
    "Selector",
    # XPath helpers
    "literal",
    "css_to_xpath",
]
