import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, create_engine

from private_markets.core.config import Settings
from private_markets.db import Database
from private_markets.main import create_app
import private_markets.models  # noqa: F401


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite file with the schema created."""
    database_url = f"sqlite:///{tmp_path / 'test_private_markets.db'}"

    engine = create_engine(database_url)
    SQLModel.metadata.create_all(engine)
    engine.dispose()

    return Settings(
        DATABASE_URL=database_url,
        ENVIRONMENT="test",
        ALLOW_DESTRUCTIVE_OPERATIONS=True,
        DB_CONNECT_RETRIES=1,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def database(settings):
    """An opened Database for tests that call domain operations directly."""
    db = Database.from_settings(settings)
    db.open()
    yield db
    db.close()


@pytest.fixture
def session(database):
    with database.session() as s:
        yield s


@pytest.fixture
def client(settings):
    """TestClient running the app lifespan (pool opened and closed)."""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def fund_payload():
    return {
        "name": "Test Growth Fund I",
        "vintage_year": 2024,
        "target_size_usd": 250000000.00,
        "status": "Fundraising",
    }


@pytest.fixture
def create_fund(client, fund_payload):
    def _create(**overrides):
        response = client.post("/funds", json={**fund_payload, **overrides})
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_investor(client):
    counter = {"n": 0}

    def _create(name=None, investor_type="Institution", email=None):
        counter["n"] += 1
        n = counter["n"]
        response = client.post(
            "/investors",
            json={
                "name": name or f"Investor {n}",
                "investor_type": investor_type,
                "email": email or f"investor{n}@example.com",
            },
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_investment(client):
    def _create(fund_id, investor_id, amount_usd, investment_date="2024-06-15"):
        response = client.post(
            f"/funds/{fund_id}/investments",
            json={
                "investor_id": investor_id,
                "amount_usd": amount_usd,
                "investment_date": investment_date,
            },
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create
