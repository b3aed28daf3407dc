"""
nodefinder: find document nodes by selector, waiting for pages that are
still changing.

Basic usage:
    from nodefinder import LxmlBackend, Session

    session = Session(LxmlBackend(html))
    link = await session.find_link("Logout")
    items = await session.all("css", "ul.menu li", text="Settings")
    maybe = await session.first("xpath", "//div[@id='flash']")

Waiting for a document that is still being updated:
    backend = LxmlBackend(initial_html, dynamic=True)
    session = Session(backend)

    # Polls until the element appears or default_wait_time runs out
    flash = await session.find("#flash", text="Saved")

Configuration:
    from nodefinder import FinderConfig, configure

    configure(default_wait_time=5, ignore_hidden_elements=True)
    session = Session(backend, config=FinderConfig(default_selector="xpath"))
"""

__version__ = "0.1.0"
__license__ = "MIT"

from nodefinder.exceptions import (
    BackendError,
    ElementNotFound,
    FinderError,
    InvalidSelector,
    UnknownSelectorKind,
)

from nodefinder.config import (
    ConfigurationError,
    FinderConfig,
    configure,
    get_default_config,
    load_config,
    reset_default_config,
    set_default_config,
)

from nodefinder.backends import DocumentBackend, LxmlBackend

from nodefinder.selectors import (
    BuiltinSelector,
    FilterOptions,
    Selector,
    SelectorKind,
    SelectorRegistry,
    add_selector,
    extract_normalized_options,
    get_registry,
)

from nodefinder.node import (
    Document,
    Element,
    Finders,
    FindState,
    RetryScheduler,
)

from nodefinder.session import Session

__all__ = [
    # Version
    "__version__",
    # Session
    "Session",
    # Nodes
    "Document",
    "Element",
    "Finders",
    "FindState",
    "RetryScheduler",
    # Backends
    "DocumentBackend",
    "LxmlBackend",
    # Selectors
    "BuiltinSelector",
    "FilterOptions",
    "Selector",
    "SelectorKind",
    "SelectorRegistry",
    "add_selector",
    "get_registry",
    "extract_normalized_options",
    # Configuration
    "FinderConfig",
    "ConfigurationError",
    "configure",
    "get_default_config",
    "set_default_config",
    "reset_default_config",
    "load_config",
    # Exceptions
    "FinderError",
    "ElementNotFound",
    "UnknownSelectorKind",
    "InvalidSelector",
    "BackendError",
]
