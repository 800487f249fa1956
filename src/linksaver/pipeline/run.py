"""Single-pass processing of one inbound message.

extract -> persist (only when a link was found) -> reply
"""

from typing import Optional
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel
from telegram.error import TelegramError
from ..config import Settings
from ..schemas.telegram import InboundMessage
from ..store.repo import LinkRepo
from ..chat.client import TelegramReplier
from ..chat.replies import select_reply
from ..retrieval.url import extract_url
from ..log import get_logger

logger = get_logger("pipeline")

class ProcessResult(BaseModel):
    chat_id: int
    url: Optional[str] = None
    record_id: Optional[str] = None
    replied: bool = False

class LinkPipeline:
    def __init__(self, repo: LinkRepo, replier: TelegramReplier, settings: Settings):
        self.repo = repo
        self.replier = replier
        self.settings = settings

    async def process(self, message: InboundMessage) -> ProcessResult:
        """
        Runs one message through the pipeline.
        StoreError propagates and no reply is sent in that case.
        """
        logger.info(f"New message from chat {message.chat_id}: {message.text}")
        result = ProcessResult(chat_id=message.chat_id)

        result.url = extract_url(message.text)
        if result.url:
            # pymongo is blocking
            result.record_id = await run_in_threadpool(
                self.repo.save_link, message.text, result.url
            )
            logger.info(f"Saved {result.url} as {result.record_id}")
        else:
            logger.info(f"No URL in message from chat {message.chat_id}")

        reply = select_reply(result.url, self.settings)
        try:
            await self.replier.send_reply(message.chat_id, reply)
            result.replied = True
        except TelegramError as e:
            logger.error(f"Could not reply to chat {message.chat_id}: {e}")

        return result
