import pytest
from datetime import timedelta
from unittest.mock import MagicMock, AsyncMock
from telegram.error import RetryAfter, Forbidden
from linksaver.chat.client import TelegramReplier, wait_for_flood_control
from linksaver.chat.replies import select_reply

@pytest.mark.asyncio
async def test_send_reply_success(bot):
    """
    WHY: Verify that our wrapper calls the official Bot API with the right parameters.
    HOW: Call send_reply with a mocked bot.
    EXPECTED: send_message awaited once with chat_id and text.
    """
    await TelegramReplier(bot).send_reply(99, "Hello World")
    bot.send_message.assert_awaited_once_with(chat_id=99, text="Hello World")

@pytest.mark.asyncio
async def test_send_reply_flood_control_retry(bot):
    """
    WHY: Telegram throttles bots that send too fast and says how long to wait.
    HOW: Fail once with RetryAfter(30) and then succeed, recording the sleeps instead of sleeping.
    EXPECTED: send_message is awaited twice and the retry waited the 30s Telegram asked for.
    """
    bot.send_message.side_effect = [RetryAfter(30), None]
    sleeps = []

    async def fake_sleep(seconds):
        sleeps.append(seconds)

    send_reply = TelegramReplier.send_reply.retry_with(sleep=fake_sleep)
    await send_reply(TelegramReplier(bot), 99, "Retry Me")

    assert bot.send_message.await_count == 2
    assert sleeps == [30.0]

def test_flood_control_wait_accepts_timedelta():
    """
    WHY: Newer python-telegram-bot releases report retry_after as a timedelta.
    HOW: Build a retry state whose last exception carries a timedelta, then one with another error.
    EXPECTED: The timedelta is converted to seconds; other errors fall back to exponential backoff.
    """
    state = MagicMock()
    state.outcome.exception.return_value = RetryAfter(timedelta(seconds=12))
    assert wait_for_flood_control(state) == 12.0

    state = MagicMock()
    state.attempt_number = 1
    state.outcome.exception.return_value = Forbidden("blocked")
    assert 1 <= wait_for_flood_control(state) <= 8

@pytest.mark.asyncio
async def test_send_reply_other_errors_not_retried(bot):
    bot.send_message.side_effect = Forbidden("bot was blocked by the user")

    with pytest.raises(Forbidden):
        await TelegramReplier(bot).send_reply(99, "Hi")
    assert bot.send_message.await_count == 1

def test_select_reply(settings):
    assert select_reply("https://x.com", settings) == settings.REPLY_SAVED
    assert select_reply(None, settings) == settings.REPLY_MISSING_URL
    assert settings.REPLY_SAVED != settings.REPLY_MISSING_URL
