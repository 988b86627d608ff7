"""Shared Pydantic schemas."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str


class StatusResponse(BaseModel):
    ok: bool = True
