import io
import time

import pytest

from clytia import Clytia, Settings


@pytest.fixture(autouse=True)
def fixed_terminal_size(monkeypatch):
    """Pin the terminal width so progress bars render deterministically."""
    monkeypatch.setenv("COLUMNS", "40")
    monkeypatch.setenv("LINES", "24")


@pytest.fixture
def settings():
    """Fast frames and no pause between re-prompts."""
    return Settings(tick_interval=0.01, retry_delay=0)


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def make_cli(output, settings):
    """Build a Clytia reading *keys* and writing to the shared output buffer."""

    def _make(keys: str = "") -> Clytia:
        return Clytia(io.StringIO(keys), output, settings=settings)

    return _make


@pytest.fixture
def wait_for():
    """Poll *predicate* until it holds, failing the test after *timeout* seconds."""

    def _wait(predicate, timeout: float = 5.0) -> None:
        deadline = time.monotonic() + timeout
        while not predicate():
            if time.monotonic() > deadline:
                raise AssertionError("condition not met before timeout")
            time.sleep(0.001)

    return _wait
