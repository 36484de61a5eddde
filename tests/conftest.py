import pytest
from fastapi.testclient import TestClient

from calculator.pip_values import PipValueTable
from main import app
from settings import settings


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def table():
    return PipValueTable()


@pytest.fixture
def lenient_table():
    return PipValueTable(on_unknown="defaultValue", default_pip_value=10.0)


@pytest.fixture
def policy(monkeypatch):
    def _set(name, default_pip_value=10.0):
        monkeypatch.setattr(settings, "UNKNOWN_INSTRUMENT_POLICY", name)
        monkeypatch.setattr(settings, "DEFAULT_PIP_VALUE", default_pip_value)

    return _set
