"""MongoDB connection management.

Provides connect() to open and verify a client at startup and
get_collection() to resolve the collection links are written to.
"""

from pymongo import MongoClient
from pymongo.collection import Collection
from ..config import Settings
from ..log import get_logger

logger = get_logger("store")

def connect(settings: Settings) -> MongoClient:
    """
    Opens a client for settings.MONGO_URI and pings the server.
    Raises pymongo.errors.PyMongoError if the server cannot be reached.
    """
    client = MongoClient(
        settings.MONGO_URI,
        serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS,
    )
    try:
        client.admin.command("ping")
    except Exception:
        client.close()
        raise
    logger.info("Connected to MongoDB")
    return client

def get_collection(client: MongoClient, settings: Settings) -> Collection:
    return client[settings.MONGO_DATABASE][settings.MONGO_COLLECTION]
