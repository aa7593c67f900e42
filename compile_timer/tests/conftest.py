import pytest

from compile_timer.config import CONFIG_ENV_VAR


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch):
    """Keep a developer's config file out of the tests."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
