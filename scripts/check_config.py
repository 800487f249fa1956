#!/usr/bin/env python3
"""
Quick check that the bot is configured before starting the server.
Loads Settings exactly as the server does (environment + .env) and reports what is wrong.
"""
import sys
from pydantic import ValidationError
from linksaver.config import Settings

def mask(value: str) -> str:
    return value[:8] + "..." if len(value) > 8 else "***"

def check_settings() -> bool:
    try:
        settings = Settings()
    except ValidationError as e:
        print("✗ Configuration is invalid:")
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            print(f"  {field}: {error['msg']}")
        print("\nExample .env:")
        print("TELEGRAM_BOT_TOKEN=123456:ABC-your-token")
        print("MONGO_URI=mongodb://localhost:27017")
        return False

    print(f"✓ TELEGRAM_BOT_TOKEN: {mask(settings.TELEGRAM_BOT_TOKEN)}")
    print(f"✓ MONGO_URI: {mask(settings.MONGO_URI)}")
    print(f"  MongoDB collection: {settings.MONGO_DATABASE}.{settings.MONGO_COLLECTION}")
    print(f"  PORT: {settings.PORT}")
    print("\nNext steps:")
    print("1. Run the webhook server:")
    print("   python -m linksaver.main_ingest")
    print("\n2. Register the webhook:")
    print("   python scripts/set_webhook.py https://<your-host>/webhook")
    return True

if __name__ == "__main__":
    sys.exit(0 if check_settings() else 1)
