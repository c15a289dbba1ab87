from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class TaskNoteBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200, description="Short note title (1-200 chars).")
    description: Optional[str] = Field(None, description="Optional free-form description.")

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, value):
        # Runs before min_length, so a blank title counts as missing.
        return value.strip() if isinstance(value, str) else value


class TaskNoteIn(TaskNoteBase):
    """
    Request body for create and update.

    Server-owned fields (id, createdAt) sent by clients are ignored.
    """


class TaskNoteOut(TaskNoteBase):
    """Schema returned for a task note."""
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int = Field(..., description="Database ID of the note.")
    created_at: datetime = Field(..., description="Creation timestamp (ISO-8601).")
