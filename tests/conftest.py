import pytest

from edgegraph.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Run every test with the invariant check on and a clean config cache."""
    monkeypatch.setenv("EDGEGRAPH_GRAPH_CHECK_REP", "true")
    reset_config()
    yield
    reset_config()
