"""
Document node for nodefinder.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from nodefinder.node.finders import Finders

if TYPE_CHECKING:
    from nodefinder.session import Session


class Document(Finders):
    """The root scope of a session.

    Queries run against whatever document the backend currently holds, so a
    document reloaded between two polls is picked up by the next one.
    """

    def __init__(self, session: "Session") -> None:
        self.session = session

    @property
    def base(self) -> Any:
        return None

    def __repr__(self) -> str:
        return f"<Document backend={type(self.session.backend).__name__}>"
