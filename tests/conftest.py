"""
Shared fixtures for nodefinder tests.
"""

from typing import Any, Optional

import pytest

from nodefinder import BackendError, FinderConfig, LxmlBackend, Session
from nodefinder.config import reset_default_config, set_default_config


PAGE_HTML = """
<html>
  <head><title>Test page</title></head>
  <body>
    <div id="header">
      <a id="home" href="/">Home</a>
      <a href="/logout" title="Sign out">Logout</a>
      <a name="anchor">No href</a>
    </div>
    <ul id="menu">
      <li class="item">First</li>
      <li class="item" style="display: none">Second</li>
      <li class="item">Third Quox</li>
    </ul>
    <form id="signup" action="/signup">
      <label for="user_email">Email address</label>
      <input id="user_email" name="user[email]" type="email">
      <label>Password <input name="user[password]" type="password"></label>
      <input id="token" name="token" type="hidden" value="abc">
      <input placeholder="Nickname" name="nick" type="text">
      <label for="terms">Accept terms</label>
      <input id="terms" type="checkbox" name="terms" checked>
      <input id="news" type="checkbox" name="news">
      <input type="radio" id="plan_free" name="plan" value="free">
      <label for="avatar">Avatar</label>
      <input type="file" id="avatar" name="avatar">
      <select id="country" name="country">
        <option>Norway</option>
        <option selected>Sweden</option>
      </select>
      <select id="tags" name="tags" multiple>
        <option selected>x</option>
        <option selected>y</option>
        <option>z</option>
      </select>
      <textarea id="bio" name="bio"></textarea>
      <input type="submit" id="submit" value="Submit">
      <button id="cancel" type="button">Cancel</button>
    </form>
    <fieldset id="prefs"><legend>Preferences</legend></fieldset>
    <table id="users"><caption>User list</caption><tr><td>admin</td></tr></table>
    <p id="literal">Foo*Bar</p>
    <p id="other">FooXBar</p>
  </body>
</html>
"""

VISIBILITY_HTML = """
<html><body>
  <p class="v" style="display:none">hidden-A</p>
  <p class="v">visible-B</p>
  <p class="v" style="display:none">hidden-C</p>
</body></html>
"""

EMPTY_HTML = "<html><body><div id='app'></div></body></html>"


@pytest.fixture(autouse=True)
def default_config():
    """Isolate the process-wide default config between tests."""
    set_default_config(FinderConfig())
    yield
    reset_default_config()


@pytest.fixture
def fast_config() -> FinderConfig:
    """Config with a short wait so timing tests stay quick."""
    return FinderConfig(default_wait_time=0.3, polling_interval=0.05)


@pytest.fixture
def page() -> Session:
    """Session over the static test page."""
    return Session(LxmlBackend(PAGE_HTML))


@pytest.fixture
def visibility_page() -> Session:
    """Session over [hidden-A, visible-B, hidden-C]."""
    return Session(LxmlBackend(VISIBILITY_HTML))


class FlakyBackend(LxmlBackend):
    """Dynamic lxml backend whose first queries fail."""

    def __init__(self, html_content: str, failures: int) -> None:
        super().__init__(html_content, dynamic=True)
        self.failures = failures
        self.queries = 0

    async def query(self, scope: Optional[Any], xpath: str) -> list[Any]:
        self.queries += 1
        if self.queries <= self.failures:
            raise BackendError(f"document busy ({self.queries})", expression=xpath)
        return await super().query(scope, xpath)


class CountingBackend(LxmlBackend):
    """Lxml backend that records every expression it evaluates."""

    def __init__(self, html_content: str, dynamic: bool = False) -> None:
        super().__init__(html_content, dynamic=dynamic)
        self.expressions: list[str] = []

    async def query(self, scope: Optional[Any], xpath: str) -> list[Any]:
        self.expressions.append(xpath)
        return await super().query(scope, xpath)


@pytest.fixture
def flaky_backend():
    """Factory for FlakyBackend instances."""
    return FlakyBackend


@pytest.fixture
def counting_backend():
    """Factory for CountingBackend instances."""
    return CountingBackend
