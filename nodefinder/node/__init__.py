"""
Finder nodes for nodefinder.

- **Finders**: find/first/all and the find_* helpers
- **Document**: the root scope of a session
- **Element**: a found node, also usable as a nested scope
- **RetryScheduler**: the polling loop behind find()
"""

from nodefinder.node.retry import FindState, RetryOutcome, RetryScheduler
from nodefinder.node.reporting import build_failure_message
from nodefinder.node.finders import Finders
from nodefinder.node.document import Document
from nodefinder.node.element import Element

__all__ = [
    "Finders",
    "Document",
    "Element",
    "FindState",
    "RetryOutcome",
    "RetryScheduler",
    "build_failure_message",
]
