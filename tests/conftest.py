import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("CONVERTME_STRICT", raising=False)
    monkeypatch.delenv("CONVERTME_LOG_LEVEL", raising=False)
