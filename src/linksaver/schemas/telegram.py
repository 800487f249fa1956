"""Pydantic schemas for inbound Telegram webhook updates.

Only the fields the bot reads are modelled; everything else Telegram
sends is ignored.
"""

from pydantic import BaseModel, ConfigDict
from typing import Optional

class Chat(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int

class Message(BaseModel):
    model_config = ConfigDict(extra="ignore")

    chat: Chat
    text: str = ""

class InboundMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    chat_id: int
    text: str

class TelegramUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    update_id: int = 0
    message: Optional[Message] = None

    def to_inbound(self) -> Optional[InboundMessage]:
        # Edited messages, callback queries etc. arrive without "message"
        if self.message is None:
            return None
        return InboundMessage(chat_id=self.message.chat.id, text=self.message.text)
