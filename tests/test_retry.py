"""
Tests for the polling behaviour of find().
"""

import asyncio
import time

import pytest

from nodefinder import (
    BackendError,
    ElementNotFound,
    FinderConfig,
    FindState,
    InvalidSelector,
    LxmlBackend,
    RetryScheduler,
    Session,
    UnknownSelectorKind,
)
from nodefinder.config import configure, set_default_config

from conftest import EMPTY_HTML, PAGE_HTML

# Allowance for event loop scheduling on slow machines
SLACK = 0.5

FLASH_HTML = "<html><body><div id='app'><p id='flash'>Saved</p></div></body></html>"


class TestRetryScheduler:
    """Tests for RetryScheduler."""

    @pytest.mark.asyncio
    async def test_satisfied_first_attempt(self):
        """Test that a result on the first attempt ends the loop."""

        async def attempt():
            return "done"

        outcome = await RetryScheduler(timeout=1.0, polling_interval=0.05).run(attempt)
        assert outcome.state is FindState.SATISFIED
        assert outcome.satisfied
        assert outcome.value == "done"
        assert outcome.attempts == 1

    @pytest.mark.asyncio
    async def test_exhausted_after_deadline(self):
        """Test that the loop ends no earlier than the timeout."""
        attempts = 0

        async def attempt():
            nonlocal attempts
            attempts += 1
            return None

        start = time.monotonic()
        outcome = await RetryScheduler(timeout=0.2, polling_interval=0.05).run(attempt)
        elapsed = time.monotonic() - start

        assert outcome.state is FindState.EXHAUSTED
        assert outcome.value is None
        assert outcome.attempts == attempts
        assert attempts >= 2
        assert 0.2 <= elapsed < 0.2 + 0.05 + SLACK

    @pytest.mark.asyncio
    async def test_disabled_single_attempt(self):
        """Test that a disabled scheduler never sleeps."""
        attempts = 0

        async def attempt():
            nonlocal attempts
            attempts += 1
            return None

        outcome = await RetryScheduler(timeout=5.0, polling_interval=0.05, enabled=False).run(
            attempt
        )
        assert outcome.state is FindState.EXHAUSTED
        assert attempts == 1
        assert outcome.elapsed < 1.0

    @pytest.mark.asyncio
    async def test_zero_timeout(self):
        """Test that a zero timeout still makes one attempt."""

        async def attempt():
            return None

        outcome = await RetryScheduler(timeout=0, polling_interval=0.05).run(attempt)
        assert outcome.attempts == 1

    @pytest.mark.asyncio
    async def test_backend_error_is_swallowed(self):
        """Test that backend errors are retried and remembered."""
        attempts = 0

        async def attempt():
            nonlocal attempts
            attempts += 1
            if attempts < 3:
                raise BackendError("busy")
            return "ok"

        outcome = await RetryScheduler(timeout=1.0, polling_interval=0.01).run(attempt)
        assert outcome.value == "ok"
        assert outcome.attempts == 3
        assert isinstance(outcome.last_error, BackendError)

    @pytest.mark.asyncio
    async def test_other_errors_propagate(self):
        """Test that non-backend errors end the loop immediately."""

        async def attempt():
            raise InvalidSelector("broken")

        with pytest.raises(InvalidSelector):
            await RetryScheduler(timeout=1.0, polling_interval=0.01).run(attempt)


class TestFindWaiting:
    """Tests for find() against dynamic documents."""

    @pytest.mark.asyncio
    async def test_waits_full_time_before_failing(self, fast_config):
        """Test that find() raises after the wait time and not much later."""
        session = Session(LxmlBackend(EMPTY_HTML, dynamic=True), config=fast_config)

        start = time.monotonic()
        with pytest.raises(ElementNotFound):
            await session.find("#flash")
        elapsed = time.monotonic() - start

        assert elapsed >= fast_config.default_wait_time
        assert elapsed < fast_config.default_wait_time + fast_config.polling_interval + SLACK

    @pytest.mark.asyncio
    async def test_element_appears_later(self):
        """Test that an element added while polling is found."""
        backend = LxmlBackend(EMPTY_HTML, dynamic=True)
        session = Session(backend, config=FinderConfig(default_wait_time=2.0))
        asyncio.get_running_loop().call_later(0.1, backend.load, FLASH_HTML)

        start = time.monotonic()
        flash = await session.find("#flash")
        elapsed = time.monotonic() - start

        assert await flash.text() == "Saved"
        assert 0.1 <= elapsed < 1.0

    @pytest.mark.asyncio
    async def test_static_document_single_attempt(self, counting_backend):
        """Test that a static document is queried once however long the wait."""
        backend = counting_backend(PAGE_HTML)
        session = Session(backend, config=FinderConfig(default_wait_time=5.0))

        start = time.monotonic()
        with pytest.raises(ElementNotFound):
            await session.find("#missing")

        assert time.monotonic() - start < 1.0
        assert len(backend.expressions) == 1

    @pytest.mark.asyncio
    async def test_each_poll_runs_every_expression(self, counting_backend, fast_config):
        """Test that every poll re-runs the full expression list."""
        backend = counting_backend(EMPTY_HTML, dynamic=True)
        session = Session(backend, config=fast_config)

        with pytest.raises(ElementNotFound):
            await session.find_button("Launch")

        assert len(backend.expressions) >= 6
        assert len(backend.expressions) % 3 == 0

    @pytest.mark.asyncio
    async def test_recovers_from_backend_errors(self, flaky_backend):
        """Test that transient backend failures are retried."""
        backend = flaky_backend(PAGE_HTML, failures=3)
        session = Session(backend, config=FinderConfig(default_wait_time=2.0, polling_interval=0.01))

        link = await session.find("#home")

        assert await link.text() == "Home"
        assert backend.queries == 4

    @pytest.mark.asyncio
    async def test_backend_error_is_cause(self, flaky_backend, fast_config):
        """Test that the last backend error is chained to ElementNotFound."""
        backend = flaky_backend(PAGE_HTML, failures=10**6)
        session = Session(backend, config=fast_config)

        with pytest.raises(ElementNotFound) as exc_info:
            await session.find("#home")

        assert isinstance(exc_info.value.__cause__, BackendError)
        assert backend.queries >= 2

    @pytest.mark.asyncio
    async def test_unknown_kind_fails_fast(self):
        """Test that a broken query is not retried."""
        session = Session(
            LxmlBackend(EMPTY_HTML, dynamic=True),
            config=FinderConfig(default_wait_time=5.0),
        )

        start = time.monotonic()
        with pytest.raises(UnknownSelectorKind):
            await session.find("bogus", "x")
        with pytest.raises(InvalidSelector):
            await session.find("a[")

        assert time.monotonic() - start < 1.0

    @pytest.mark.asyncio
    async def test_concurrent_finds_interleave(self, fast_config):
        """Test that two waiting finds run concurrently on one loop."""
        session = Session(LxmlBackend(EMPTY_HTML, dynamic=True), config=fast_config)

        start = time.monotonic()
        results = await asyncio.gather(
            session.find("#one"),
            session.find("#two"),
            return_exceptions=True,
        )
        elapsed = time.monotonic() - start

        assert all(isinstance(r, ElementNotFound) for r in results)
        assert elapsed < 2 * fast_config.default_wait_time

    @pytest.mark.asyncio
    async def test_config_read_once_per_call(self):
        """Test that changing the defaults mid-find does not move the deadline."""
        set_default_config(FinderConfig(default_wait_time=0.3, polling_interval=0.05))
        session = Session(LxmlBackend(EMPTY_HTML, dynamic=True))
        asyncio.get_running_loop().call_later(
            0.05, lambda: configure(default_wait_time=5.0)
        )

        start = time.monotonic()
        with pytest.raises(ElementNotFound):
            await session.find("#flash")

        assert time.monotonic() - start < 0.3 + SLACK
        assert session.config.default_wait_time == 5.0
