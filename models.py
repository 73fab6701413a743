# models.py
# Project / author records persisted under the config directory (Pydantic 2.x)

from __future__ import annotations
from typing import List, Optional, Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator

# =========================
# Enums & literals
# =========================

SourceKind = Literal["github", "medium", "other"]

# typed text fields of a project record; CLI overrides for these stay raw strings
STRING_FIELDS = ("source", "link", "title", "content", "owner", "repo")


# =========================
# Records
# =========================

class ProjectRecord(BaseModel):
    """A blog or repo entry. Template and override keys we don't know about are kept as-is."""
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    source: Optional[SourceKind] = None
    link: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    owner: Optional[str] = None
    repo: Optional[str] = None
    authorIds: List[str] = Field(default_factory=list)

    @field_validator("authorIds")
    @classmethod
    def _no_blank_ids(cls, v: List[str]) -> List[str]:
        if any(not (a or "").strip() for a in v):
            raise ValueError("authorIds must not contain blank ids")
        return v

    def to_json(self) -> dict:
        return self.model_dump(exclude_none=True)


class AuthorRecord(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    bio: Optional[str] = None
    photoURL: Optional[str] = None
    githubURL: Optional[str] = None
    mediumURL: Optional[str] = None
    location: Optional[str] = None

    def to_json(self) -> dict:
        return self.model_dump(exclude_none=True)
