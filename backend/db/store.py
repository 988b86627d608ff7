"""JSON-file record store — the whole document is loaded once and rewritten on every mutation."""

import json
import logging
import os
import tempfile
from pathlib import Path

from backend.schemas.upload import StoreData, UploadRecord

logger = logging.getLogger(__name__)


class JSONStore:
    """
    Holds the upload records in memory and persists them to a single JSON file.

    There is no locking: every write serialises the full document, so concurrent
    writers simply overwrite each other (last write wins).
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.data = self._load()

    def _load(self) -> StoreData:
        if not self.path.exists():
            data = StoreData()
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._dump(data)
            logger.info("Created empty store at %s", self.path)
            return data

        raw = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        data = StoreData.model_validate(raw)

        # lastId must stay ahead of every id already handed out
        highest = max((u.id for u in data.uploads), default=0)
        if data.last_id < highest:
            logger.warning("Store lastId %d behind highest id %d, repairing", data.last_id, highest)
            data.last_id = highest
        return data

    def _dump(self, data: StoreData) -> None:
        payload = json.dumps(data.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def write(self) -> None:
        """Persist the current document."""
        self._dump(self.data)

    # ── Record access ───────────────────────────────────

    def list_all(self) -> list[UploadRecord]:
        return list(self.data.uploads)

    def get(self, record_id: int) -> UploadRecord | None:
        return next((u for u in self.data.uploads if u.id == record_id), None)

    def next_id(self) -> int:
        """Reserve and return the next record id."""
        self.data.last_id += 1
        return self.data.last_id

    def prepend(self, record: UploadRecord) -> None:
        self.data.uploads.insert(0, record)

    def replace_all(self, records: list[UploadRecord]) -> None:
        self.data.uploads = list(records)

    def remove(self, record_id: int) -> UploadRecord | None:
        record = self.get(record_id)
        if record is None:
            return None
        self.data.uploads = [u for u in self.data.uploads if u.id != record_id]
        return record
