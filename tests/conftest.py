import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from app.database.connection import Base, get_db
from app.main import create_app
from app.repositories.product_store import ProductStore
from app.services.discount_client import DiscountClient
from app.services.status_translator import StatusTranslator

TEST_DB_URL = "sqlite:///:memory:"
DISCOUNT_URL = "https://discounts.test/api/v1/discounts/apply"

engine = create_engine(
    TEST_DB_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture(scope="session", autouse=True)
def create_test_database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db():
    connection = engine.connect()
    trans = connection.begin()
    session = TestingSessionLocal(bind=connection)
    try:
        yield session
    finally:
        session.close()
        trans.rollback()
        connection.close()


@pytest.fixture()
def translator():
    return StatusTranslator.default()


@pytest.fixture()
def store(db, translator):
    return ProductStore(db, translator)


def make_discount_client(handler) -> DiscountClient:
    """DiscountClient whose HTTP calls are answered by `handler`."""
    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    return DiscountClient(DISCOUNT_URL, http_client=http_client)


@pytest.fixture()
def discount_rules():
    return [
        {"id": "1", "enablement": True, "discount": 0.1},
        {"id": "2", "enablement": False, "discount": 0.5},
        {"id": "3", "enablement": True, "discount": 0.25},
    ]


@pytest.fixture()
def discount_requests():
    return []


@pytest.fixture()
def discount_client(discount_rules, discount_requests):
    def handler(request: httpx.Request) -> httpx.Response:
        discount_requests.append(request)
        return httpx.Response(200, json=discount_rules)

    client = make_discount_client(handler)
    yield client
    client._client.close()


@pytest.fixture()
def app(db, discount_client):
    application = create_app(discount_client=discount_client)
    application.dependency_overrides[get_db] = lambda: db
    return application


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def discount_client_for():
    """Factory: discount_client_for(handler) -> DiscountClient."""
    clients = []

    def factory(handler):
        client = make_discount_client(handler)
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client._client.close()
