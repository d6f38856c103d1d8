from __future__ import annotations

from pydantic import Field

from app.schemas.common import CamelModel


class ViewCountResponse(CamelModel):
    success: bool = True
    views: int
    slug: str


class ContactRequest(CamelModel):
    name: str = Field(default="", max_length=100)
    email: str = Field(default="", max_length=200)
    subject: str | None = Field(default=None, max_length=200)
    message: str = Field(default="", max_length=5000)


class ContactResponse(CamelModel):
    success: bool = True
    message: str
