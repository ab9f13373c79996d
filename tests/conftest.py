import pytest

from fraction.builtin.env_builtin import make_root_environment


# Ignore FRACTION_* settings from the surrounding shell.
@pytest.fixture(autouse=True)
def _clean_fraction_env(monkeypatch):
    monkeypatch.delenv("FRACTION_MAX_DEPTH", raising=False)
    monkeypatch.delenv("FRACTION_LOG_LEVEL", raising=False)


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    return make_root_environment()
