"""File storage abstraction — local filesystem implementation."""

import re
import time
from pathlib import Path

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9._-]")


def sanitize_filename(filename: str) -> str:
    """Replace every character outside [a-zA-Z0-9._-] with an underscore."""
    return _UNSAFE_CHARS.sub("_", filename)


class LocalStorage:
    """Stores uploaded files flat under a single directory."""

    def __init__(self, base: Path):
        self.base = Path(base)
        self.base.mkdir(parents=True, exist_ok=True)

    def _resolve(self, name: str) -> Path:
        return self.base / name

    async def store_bytes(self, data: bytes, name: str) -> str:
        dest = self._resolve(name)
        dest.write_bytes(data)
        return name

    async def delete(self, name: str) -> bool:
        path = self._resolve(name)
        if path.exists():
            path.unlink()
            return True
        return False

    def exists(self, name: str) -> bool:
        return self._resolve(name).exists()

    def get_url(self, name: str) -> str:
        return f"/uploads/{name}"

    def generate_name(self, filename: str) -> str:
        """Timestamp-prefixed safe name; the timestamp is bumped while the name is taken."""
        safe = sanitize_filename(filename)
        stamp = int(time.time() * 1000)
        name = f"{stamp}-{safe}"
        while self.exists(name):
            stamp += 1
            name = f"{stamp}-{safe}"
        return name
