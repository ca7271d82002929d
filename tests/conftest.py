import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from storefront.core.config import Settings
from storefront.db.schema import SchemaProvisioner
from storefront.db.session import build_engine
from storefront.main import create_app
from storefront.models import CartItem, WishlistItem


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite:///{tmp_path / 'storefront.db'}",
        DB_CONNECT_RETRIES=0,
    )


@pytest.fixture
def engine(settings):
    engine = build_engine(settings)
    yield engine
    engine.dispose()


@pytest.fixture
def provisioner(engine):
    provisioner = SchemaProvisioner(engine)
    provisioner.provision([CartItem, WishlistItem])
    return provisioner


@pytest.fixture
def session(engine, provisioner):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as client:
        yield client


@pytest.fixture
def shirt():
    return {
        "addedID": 1,
        "title": "Shirt",
        "userEmail": "a@x.com",
        "price": 19.99,
        "image_url": "http://x/1.png",
        "userName": "A",
        "size": "M",
    }
