"""FastAPI dependency injection — get_store, get_storage, get_upload_service."""

from fastapi import Depends, Request

from backend.config import Settings
from backend.db.store import JSONStore
from backend.services.upload_service import UploadService
from backend.utils.storage import LocalStorage


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> JSONStore:
    """The store loaded once at app creation and shared by every request."""
    return request.app.state.store


def get_storage(request: Request) -> LocalStorage:
    return request.app.state.storage


def get_upload_service(
    store: JSONStore = Depends(get_store),
    storage: LocalStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
) -> UploadService:
    return UploadService(store, storage, settings.MAX_UPLOAD_SIZE_MB)
