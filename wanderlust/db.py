# db.py
from pymongo import MongoClient
from pymongo.database import Database

from wanderlust.config import settings


def get_client(uri: str | None = None, timeout_ms: int | None = None) -> MongoClient:
    """Build a MongoClient from settings; arguments override the env values."""
    return MongoClient(
        uri or settings.MONGO_URI,
        serverSelectionTimeoutMS=timeout_ms or settings.MONGO_TIMEOUT_MS,
    )


def get_db(client: MongoClient | None = None, name: str | None = None) -> Database:
    if client is None:
        client = get_client()
    return client[name or settings.MONGO_DB]


def ping(client: MongoClient) -> None:
    # raises ServerSelectionTimeoutError when the server is unreachable
    client.admin.command("ping")
