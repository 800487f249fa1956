#!/usr/bin/env python3
"""
Registers the public webhook URL with Telegram.

Usage:
    python scripts/set_webhook.py https://<your-host>/webhook
"""
import asyncio
import sys
from telegram import Bot
from linksaver.config import get_settings

async def set_webhook(url: str):
    settings = get_settings()
    async with Bot(token=settings.TELEGRAM_BOT_TOKEN) as bot:
        await bot.set_webhook(url=url, allowed_updates=["message"])
        info = await bot.get_webhook_info()
        print(f"Webhook for @{bot.username}: {info.url}")
        if info.last_error_message:
            print(f"Last delivery error: {info.last_error_message}")

if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(1)
    asyncio.run(set_webhook(sys.argv[1]))
