"""Upload service — store uploaded files and keep their records in the JSON store."""

import json
import logging
from typing import Any

from fastapi import UploadFile

from backend.db.store import JSONStore
from backend.schemas.upload import UploadRecord, utc_now
from backend.utils.storage import LocalStorage

logger = logging.getLogger(__name__)

DEFAULT_MIME = "application/octet-stream"


def _reject_constant(token: str):
    raise ValueError(f"{token} is not valid JSON")


def parse_metadata(value: Any) -> Any:
    """
    Normalise the optional ``metadata`` form value.

    Strings are parsed as JSON; anything that does not parse is kept as
    ``{"raw": value}``, including the bare NaN and Infinity tokens that
    json.loads would otherwise accept. Already-structured values pass
    through untouched.
    """
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        return value
    try:
        return json.loads(value, parse_constant=_reject_constant)
    except ValueError:
        return {"raw": value}


class UploadService:
    def __init__(self, store: JSONStore, storage: LocalStorage, max_upload_size_mb: int = 0):
        self.store = store
        self.storage = storage
        self.max_upload_size_mb = max_upload_size_mb

    async def save_upload(
        self,
        file: UploadFile,
        uploader_name: str | None = None,
        uploader_email: str | None = None,
        metadata: Any = None,
    ) -> UploadRecord:
        """Write the file to disk, append its record and persist the store."""
        data = await file.read()
        size_mb = len(data) / (1024 * 1024)
        if self.max_upload_size_mb and size_mb > self.max_upload_size_mb:
            raise ValueError(f"File too large ({size_mb:.1f} MB). Max is {self.max_upload_size_mb} MB.")

        original_name = file.filename or "file"
        stored_name = self.storage.generate_name(original_name)
        await self.storage.store_bytes(data, stored_name)

        record = UploadRecord(
            id=self.store.next_id(),
            original_name=original_name,
            stored_name=stored_name,
            size=len(data),
            mime_type=file.content_type or DEFAULT_MIME,
            uploader_name=uploader_name,
            uploader_email=uploader_email,
            metadata=parse_metadata(metadata),
            uploaded_at=utc_now(),
            file_url=self.storage.get_url(stored_name),
        )
        self.store.prepend(record)
        try:
            self.store.write()
        except Exception:
            self.store.remove(record.id)
            await self.storage.delete(stored_name)
            raise

        logger.info("Stored upload %d: %s as %s (%d bytes)", record.id, original_name, stored_name, record.size)
        return record

    def list_uploads(self) -> list[UploadRecord]:
        return self.store.list_all()

    def get_upload(self, upload_id: int) -> UploadRecord | None:
        return self.store.get(upload_id)

    async def delete_upload(self, upload_id: int) -> bool:
        """Drop the record, persist, then remove the file. False when the id is unknown."""
        snapshot = self.store.list_all()
        record = self.store.remove(upload_id)
        if record is None:
            return False
        try:
            self.store.write()
        except Exception:
            self.store.replace_all(snapshot)
            raise

        removed = await self.storage.delete(record.stored_name)
        if not removed:
            logger.warning("Upload %s had no file on disk: %s", upload_id, record.stored_name)
        logger.info("Deleted upload %s", upload_id)
        return True
