from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from storefront.config import Settings
from storefront.services.checkout import ReceiptNumbers
from storefront.shop.cart import Cart
from storefront.shop.catalog import Catalog, CatalogEntry, default_catalog
from storefront.web.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(
        site_name="EnableMeNow",
        currency="USD",
        currency_symbol="$",
        decimals=2,
        host="127.0.0.1",
        port=8000,
        log_level="INFO",
        playlist_1="PLdefaultOne",
        playlist_2="PLdefaultTwo",
        contact_email="hello@enablemenow.example",
    )


@pytest.fixture
def catalog() -> Catalog:
    return default_catalog()


@pytest.fixture
def small_catalog() -> Catalog:
    return Catalog(
        [
            CatalogEntry(id="a", title="Alpha", unit_price=Decimal("10.00")),
            CatalogEntry(id="b", title="Beta", unit_price=Decimal("2.50"), badge="New"),
        ]
    )


@pytest.fixture
def cart(catalog) -> Cart:
    return Cart(catalog)


@pytest.fixture
def numbers() -> ReceiptNumbers:
    return ReceiptNumbers()


@pytest.fixture
def app(settings, catalog):
    return create_app(settings, catalog)


@pytest.fixture
def test_client(app) -> TestClient:
    return TestClient(app)
