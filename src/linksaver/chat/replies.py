from typing import Optional
from ..config import Settings

def select_reply(url: Optional[str], settings: Settings) -> str:
    """Confirmation when a link was saved, otherwise a prompt to send one."""
    if url:
        return settings.REPLY_SAVED
    return settings.REPLY_MISSING_URL
