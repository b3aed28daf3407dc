"""
Retry scheduling for nodefinder.

RetryScheduler drives the polling loop behind find(): run an attempt, stop
on a result, otherwise sleep and try again until a wall-clock deadline fixed
at loop entry. Backend errors count as "not found yet". The deadline is the
only way a loop ends without a result; there is no external cancel signal.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Generic, Optional, TypeVar

from nodefinder.exceptions import BackendError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FindState(str, Enum):
    """States of a polling loop."""

    POLLING = "polling"
    SATISFIED = "satisfied"
    EXHAUSTED = "exhausted"


@dataclass
class RetryOutcome(Generic[T]):
    """Final state of a polling loop.

    Attributes:
        state: SATISFIED or EXHAUSTED.
        value: The attempt's result when satisfied.
        attempts: Number of attempts made.
        elapsed: Seconds spent in the loop.
        last_error: Last backend error swallowed while polling.
    """

    state: FindState
    value: Optional[T] = None
    attempts: int = 0
    elapsed: float = 0.0
    last_error: Optional[BackendError] = None

    @property
    def satisfied(self) -> bool:
        return self.state is FindState.SATISFIED


class RetryScheduler:
    """Bounded-time polling loop.

    Example:
        scheduler = RetryScheduler(timeout=2.0, polling_interval=0.05)
        outcome = await scheduler.run(lambda: node.first("#flash"))
        if not outcome.satisfied:
            ...

    Args:
        timeout: Seconds until the deadline, counted from the start of run().
        polling_interval: Seconds to sleep between attempts.
        enabled: When false exactly one attempt is made.
    """

    def __init__(
        self,
        timeout: float,
        polling_interval: float,
        enabled: bool = True,
    ) -> None:
        self.timeout = max(0.0, timeout)
        self.polling_interval = polling_interval
        self.enabled = enabled

    async def run(self, attempt: Callable[[], Awaitable[Optional[T]]]) -> RetryOutcome[T]:
        """Run attempts until one returns a value or the deadline passes.

        Only BackendError is swallowed; any other exception from an attempt
        propagates immediately.
        """
        start_time = time.monotonic()
        deadline = start_time + self.timeout
        outcome: RetryOutcome[T] = RetryOutcome(state=FindState.POLLING)

        while outcome.state is FindState.POLLING:
            outcome.attempts += 1
            try:
                result = await attempt()
            except BackendError as e:
                outcome.last_error = e
                result = None
                logger.debug(f"Attempt {outcome.attempts} failed in backend: {e}")

            now = time.monotonic()
            if result is not None:
                outcome.state = FindState.SATISFIED
                outcome.value = result
            elif not self.enabled or now >= deadline:
                outcome.state = FindState.EXHAUSTED
            else:
                # Do not overshoot the deadline
                await asyncio.sleep(min(self.polling_interval, deadline - now))

        outcome.elapsed = time.monotonic() - start_time
        logger.debug(
            f"Polling {outcome.state.value} after {outcome.attempts} attempt(s) "
            f"({outcome.elapsed:.2f}s)"
        )
        return outcome
