"""
Failure messages for nodefinder.
"""

from __future__ import annotations

import json
from typing import Any

from nodefinder.selectors.selector import Selector


def build_failure_message(scope: Any, selector: Selector) -> str:
    """Build the ElementNotFound message for a selector.

    An explicit ``message`` option wins, then the kind's failure message
    hook, then ``Unable to find <kind> "<locator>"`` with quotes and
    backslashes in the locator escaped.

    Args:
        scope: Node the find was called on.
        selector: The selector that matched nothing.
    """
    if selector.options.message is not None:
        return str(selector.options.message)
    if selector.failure_message is not None:
        return selector.failure_message(scope, selector)
    return f"Unable to find {selector.name} {json.dumps(selector.locator, ensure_ascii=False)}"
