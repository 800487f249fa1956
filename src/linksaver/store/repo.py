"""Repository for saved links.

Wraps the MongoDB collection so the pipeline only deals with LinkRecord.
"""

from datetime import datetime, timezone
from typing import Optional
from pymongo.collection import Collection
from pymongo.errors import PyMongoError
from ..errors import StoreError
from ..schemas.records import LinkRecord
from ..log import get_logger

logger = get_logger("store")

class LinkRepo:
    def __init__(self, collection: Collection):
        self.collection = collection

    def save_link(self, text: str, url: str, now: Optional[datetime] = None) -> str:
        """
        Insert one record for an extracted link.
        Returns the generated document id. No retry: failures raise StoreError.
        """
        record = LinkRecord(
            message=text,
            url=url,
            date=now or datetime.now(timezone.utc),
        )
        try:
            result = self.collection.insert_one(record.model_dump())
        except PyMongoError as e:
            logger.error(f"DB Error saving link: {e}")
            raise StoreError(str(e)) from e
        return str(result.inserted_id)
