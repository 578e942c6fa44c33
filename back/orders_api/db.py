from collections.abc import Iterator
from contextlib import contextmanager

from pymongo import MongoClient
from pymongo.database import Database

from .settings import settings


def mongo_connect() -> MongoClient:
    """Open a new client. Every caller owns the client it gets back."""
    return MongoClient(
        settings.mongo_url,
        serverSelectionTimeoutMS=settings.mongo_timeout_ms,
    )


def mongo_close(client: MongoClient) -> None:
    client.close()


@contextmanager
def get_database() -> Iterator[Database]:
    """Yield the configured database, closing the client on every exit path."""
    client = mongo_connect()
    try:
        yield client[settings.mongo_db_name]
    finally:
        mongo_close(client)


def check_db_connection() -> None:
    with get_database() as db:
        db.command("ping")
