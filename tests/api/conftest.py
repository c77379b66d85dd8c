import pytest
from fastapi.testclient import TestClient

from benefit_calc.api.app import app
from benefit_calc.api.deps import get_limits, get_session_store
from benefit_calc.data.sessions import MemorySessionStore
from benefit_calc.engine.limits import load_plan_year_limits


@pytest.fixture
def session_store():
    return MemorySessionStore()


@pytest.fixture
def client(session_store):
    app.dependency_overrides[get_session_store] = lambda: session_store
    app.dependency_overrides[get_limits] = lambda: load_plan_year_limits(2025)
    yield TestClient(app)
    app.dependency_overrides.clear()
