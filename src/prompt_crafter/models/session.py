"""Authenticated user session."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class Session(BaseModel):
    uid: str
    email: str
    display_name: str | None = None
    created_at: datetime | None = None
    id_token: str | None = Field(default=None, repr=False)

    @property
    def initials(self) -> str:
        local = self.email.split("@")[0] if self.email else ""
        return local[:2].upper() or "U"

    @property
    def label(self) -> str:
        if self.display_name:
            return self.display_name
        local = self.email.split("@")[0] if self.email else ""
        return local or "User"
