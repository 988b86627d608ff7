"""Upload record and store document schemas."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field, field_serializer


def utc_now() -> datetime:
    """Current UTC time truncated to milliseconds."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class UploadRecord(BaseModel):
    id: int
    original_name: str
    stored_name: str
    size: int
    mime_type: str
    uploader_name: str | None = None
    uploader_email: str | None = None
    metadata: Any = None
    uploaded_at: datetime = Field(default_factory=utc_now)
    file_url: str

    @field_serializer("uploaded_at")
    def _serialize_uploaded_at(self, value: datetime) -> str:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class StoreData(BaseModel):
    """The whole persisted document: records newest first plus the id counter."""

    uploads: list[UploadRecord] = []
    last_id: int = Field(default=0, alias="lastId")

    model_config = {"populate_by_name": True}
