"""
Backend-specific configuration using Pydantic BaseSettings.
Loads from .env and provides typed access to all backend settings.
"""

from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Storage ──────────────────────────────────────────
    DATA_DIR: Path = Path("./data")
    UPLOADS_DIR: Path = Path("./uploads")
    DB_FILENAME: str = "db.json"

    # ── Server ───────────────────────────────────────────
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 5000
    CORS_ORIGINS: list[str] = ["*"]
    MAX_UPLOAD_SIZE_MB: int = 100

    # ── Logging ──────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def db_path(self) -> Path:
        return self.DATA_DIR / self.DB_FILENAME

    def ensure_dirs(self) -> None:
        self.DATA_DIR.mkdir(parents=True, exist_ok=True)
        self.UPLOADS_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
