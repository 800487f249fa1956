"""Webhook receiver for Telegram updates.

Usage:
    python -m linksaver.main_ingest
"""

import sys
from contextlib import asynccontextmanager
from typing import Optional
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from telegram import Bot
from .config import Settings, get_settings
from .errors import StoreError
from .log import setup_logging, get_logger
from .store.db import connect, get_collection
from .store.repo import LinkRepo
from .chat.client import TelegramReplier
from .schemas.telegram import TelegramUpdate
from .pipeline.run import LinkPipeline

logger = get_logger("ingest")

def create_app(settings: Optional[Settings] = None, pipeline: Optional[LinkPipeline] = None) -> FastAPI:
    """
    Builds the FastAPI app. When no pipeline is injected, the Telegram bot and
    the MongoDB client are created at startup and closed at shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if pipeline is not None:
            app.state.pipeline = pipeline
            yield
            return

        app_settings = settings or get_settings()
        # Also covers "uvicorn linksaver.main_ingest:create_app --factory", which skips main()
        setup_logging(app_settings.LOG_LEVEL)
        bot = Bot(token=app_settings.TELEGRAM_BOT_TOKEN)
        await bot.initialize()
        logger.info(f"Bot authorized on account {bot.username}")

        try:
            mongo_client = connect(app_settings)
        except Exception:
            await bot.shutdown()
            raise
        app.state.pipeline = LinkPipeline(
            repo=LinkRepo(get_collection(mongo_client, app_settings)),
            replier=TelegramReplier(bot),
            settings=app_settings,
        )
        try:
            yield
        finally:
            mongo_client.close()
            await bot.shutdown()

    app = FastAPI(lifespan=lifespan)
    if pipeline is not None:
        # Also available when the app is used without running the lifespan
        app.state.pipeline = pipeline

    @app.get("/")
    async def root():
        return {"message": "Hello World from your link bot!"}

    @app.post("/webhook")
    async def telegram_webhook(request: Request):
        # 1. Decode
        body = await request.body()
        try:
            update = TelegramUpdate.model_validate_json(body)
        except ValidationError as e:
            logger.error(f"Error decoding update: {e}")
            return JSONResponse(status_code=400, content={"error": "invalid JSON"})

        message = update.to_inbound()
        if message is None:
            logger.info(f"Update {update.update_id} has no message, ignoring.")
            return {"status": "ignored"}

        # 2. Extract, persist, reply
        try:
            await request.app.state.pipeline.process(message)
        except StoreError:
            return JSONResponse(status_code=500, content={"error": "internal server error"})

        return {"status": "ok"}

    return app

def main():
    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging()
        logger.critical(f"Missing or invalid configuration: {e}")
        sys.exit(1)

    setup_logging(settings.LOG_LEVEL)
    logger.info(f"Starting server on port :{settings.PORT}")
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.PORT)

if __name__ == "__main__":
    main()
