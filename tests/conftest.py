import pytest
import os
from unittest.mock import MagicMock, AsyncMock
from bson import ObjectId
from dotenv import load_dotenv

from linksaver.config import Settings
from linksaver.store.repo import LinkRepo
from linksaver.chat.client import TelegramReplier
from linksaver.pipeline.run import LinkPipeline

@pytest.fixture(scope="session", autouse=True)
def _load_env():
    # Load .env once per session to avoid side-effects on import time
    load_dotenv()

def _truthy(v: str | None) -> bool:
    return v is not None and v.strip().lower() not in ("", "0", "false", "no")

@pytest.fixture(scope="session")
def allow_integration(_load_env) -> bool:
    # Depends on _load_env to ensure .env is loaded first
    return _truthy(os.getenv("RUN_INTEGRATION_TESTS"))

@pytest.fixture
def settings():
    """
    Explicit settings so tests never depend on a local .env or a real bot/database.
    """
    return Settings(
        _env_file=None,
        TELEGRAM_BOT_TOKEN="123456:TEST-TOKEN",
        MONGO_URI="mongodb://localhost:27017",
    )

@pytest.fixture
def mongo_collection():
    """
    Stands in for a pymongo Collection. insert_one returns a fresh ObjectId like the driver does.
    """
    collection = MagicMock()
    collection.insert_one.side_effect = lambda doc: MagicMock(inserted_id=ObjectId())
    return collection

@pytest.fixture
def bot():
    """
    Stands in for telegram.Bot; send_message is a coroutine.
    """
    mock = MagicMock()
    mock.send_message = AsyncMock(return_value=None)
    return mock

@pytest.fixture
def pipeline(mongo_collection, bot, settings):
    return LinkPipeline(
        repo=LinkRepo(mongo_collection),
        replier=TelegramReplier(bot),
        settings=settings,
    )
