"""linksaver - A Telegram bot that keeps the links people send it.

Receives Telegram webhook updates, picks the first http(s) link out of the
message text, stores it in MongoDB and answers the chat with a confirmation.

Components:
- main_ingest: FastAPI webhook receiver
- retrieval: URL extraction from message text
- pipeline: extract, persist and reply for one message
- store: MongoDB persistence
- chat: Telegram replies
"""
