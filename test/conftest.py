from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
from jose import jwt

from orders_api.settings import settings


@pytest.fixture
def mongo():
    """Replace the MongoDB connection with mocks.

    `mongo.collection` is the orders collection every controller call sees.
    """
    client = MagicMock(name="MongoClient")
    database = client.__getitem__.return_value
    collection = database.get_collection.return_value
    with patch("orders_api.db.mongo_connect", return_value=client) as connect, \
            patch("orders_api.db.mongo_close") as close:
        yield SimpleNamespace(
            connect=connect,
            close=close,
            client=client,
            database=database,
            collection=collection,
        )


def make_token(role: str, email: str = "staff@example.com") -> str:
    return jwt.encode({"sub": email, "role": role}, settings.secret_key, algorithm=settings.algorithm)


@pytest.fixture
def auth_headers():
    def _headers(role: str) -> dict:
        return {"Authorization": f"Bearer {make_token(role)}"}
    return _headers


@pytest.fixture
def sample_order() -> dict:
    return {
        "orderId": "123456",
        "items": [
            {"name": "Pizza", "quantity": 2, "price": 10.99},
            {"name": "Burger", "quantity": 1, "price": 5.99},
        ],
        "total": 27.97,
        "customerName": "Pepito Pérez",
    }
