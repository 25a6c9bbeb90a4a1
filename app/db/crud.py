from __future__ import annotations

import logging

from sqlalchemy.orm import Session, sessionmaker

from app.db.session import SessionLocal
from app.models.blobs import StoredBlob

logger = logging.getLogger(__name__)

PLACES_KEY = "places"
ROUTE_KEY = "currentRoute"
COMMENTS_KEY = "collectionComments"
ACTIVE_DAYS_KEY = "activeDays"


class BlobStore:
    """Named blob storage backed by the ``storage`` table.

    Reads return ``None`` for a missing key; the caller decides what the
    default is. Writes replace the whole value.
    """

    def __init__(self, session_factory: sessionmaker = SessionLocal) -> None:
        self._session_factory = session_factory

    def read(self, key: str) -> str | None:
        db: Session = self._session_factory()
        try:
            blob = db.get(StoredBlob, key)
            return blob.value if blob else None
        finally:
            db.close()

    def write(self, key: str, value: str) -> None:
        db: Session = self._session_factory()
        try:
            blob = db.get(StoredBlob, key)
            if blob is None:
                blob = StoredBlob(key=key, value=value)
            else:
                blob.value = value
            db.add(blob)
            db.commit()
        finally:
            db.close()
        logger.debug("Stored %s (%s bytes)", key, len(value))
