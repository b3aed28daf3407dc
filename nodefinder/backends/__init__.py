"""
Document backends for nodefinder.

- **DocumentBackend**: the interface the finder engine queries
- **LxmlBackend**: lxml-parsed HTML documents
"""

from nodefinder.backends.base import DocumentBackend
from nodefinder.backends.lxml_backend import LxmlBackend

__all__ = [
    "DocumentBackend",
    "LxmlBackend",
]
