from datetime import datetime
from pydantic import BaseModel

class LinkRecord(BaseModel):
    """A saved link. Field names match the documents in the urls collection."""
    message: str
    url: str
    date: datetime
