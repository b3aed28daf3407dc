"""
Configuration options for nodefinder.

FinderConfig is an immutable snapshot of the process-wide finder settings.
Every find/first/all call reads one snapshot at its start and threads it
through the whole call, so changing the defaults mid-call has no effect on
queries already in flight.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .defaults import (
    DEFAULT_IGNORE_HIDDEN_ELEMENTS,
    DEFAULT_POLLING_INTERVAL,
    DEFAULT_PREFER_VISIBLE_ELEMENTS,
    DEFAULT_SELECTOR,
    DEFAULT_WAIT_TIME,
)


class FinderConfig(BaseModel):
    """Finder configuration snapshot.

    Example:
        config = FinderConfig(default_wait_time=5.0, ignore_hidden_elements=True)
        session = Session(backend, config=config)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_selector: str = Field(
        DEFAULT_SELECTOR, min_length=1, description="Selector kind used for bare locators"
    )
    default_wait_time: float = Field(
        DEFAULT_WAIT_TIME, ge=0, description="Seconds find() keeps polling"
    )
    polling_interval: float = Field(
        DEFAULT_POLLING_INTERVAL, gt=0, description="Seconds between polls"
    )
    ignore_hidden_elements: bool = Field(
        DEFAULT_IGNORE_HIDDEN_ELEMENTS,
        description="Only match visible elements unless visible= is given",
    )
    prefer_visible_elements: bool = Field(
        DEFAULT_PREFER_VISIBLE_ELEMENTS,
        description="first() returns the first visible match when there is one",
    )

    @field_validator("default_selector", mode="before")
    @classmethod
    def parse_selector(cls, v: Any) -> Any:
        """Accept enum members for the selector kind."""
        value = getattr(v, "value", v)
        if isinstance(value, str):
            return value.strip()
        return value

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FinderConfig":
        """Create configuration from dictionary."""
        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump(exclude_none=True)

    def replace(self, **changes: Any) -> "FinderConfig":
        """Return a copy with some values changed (validated)."""
        data = self.model_dump()
        data.update(changes)
        return FinderConfig(**data)

    def merge(self, other: "FinderConfig") -> "FinderConfig":
        """Merge with another FinderConfig, explicitly set values of other win."""
        return self.replace(**other.model_dump(exclude_unset=True))
