from datetime import timedelta
from telegram import Bot
from telegram.error import RetryAfter
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type
from ..log import get_logger

logger = get_logger("telegram_client")

_backoff = wait_exponential(multiplier=1, min=1, max=8)

def wait_for_flood_control(retry_state) -> float:
    """
    Waits as long as Telegram asked in RetryAfter.retry_after (seconds or timedelta),
    exponential backoff otherwise.
    """
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    if isinstance(exc, RetryAfter):
        delay = exc.retry_after
        if isinstance(delay, timedelta):
            return delay.total_seconds()
        return float(delay)
    return _backoff(retry_state)

class TelegramReplier:
    def __init__(self, bot: Bot):
        self.bot = bot

    @retry(
        retry=retry_if_exception_type(RetryAfter),
        stop=stop_after_attempt(3),
        wait=wait_for_flood_control,
        reraise=True
    )
    async def send_reply(self, chat_id: int, text: str):
        """
        Sends a plain text message to the chat.
        Flood control (RetryAfter) is retried, any other TelegramError propagates.
        """
        try:
            await self.bot.send_message(chat_id=chat_id, text=text)
        except RetryAfter as e:
            logger.warning(f"Telegram flood control: {e}, retrying...")
            raise
