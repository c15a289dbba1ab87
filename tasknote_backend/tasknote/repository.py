"""
Data access for task notes.

Each method performs one persistence operation against the `task_notes` table
through the session handed to the repository at construction time.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from tasknote.models import TaskNote

logger = logging.getLogger(__name__)


class TaskNoteRepository:
    """Thin CRUD wrapper over a SQLAlchemy session."""

    def __init__(self, session: Session) -> None:
        self._session = session

    # PUBLIC_INTERFACE
    def list_all(self) -> List[TaskNote]:
        """Return every note, newest first."""
        stmt = select(TaskNote).order_by(TaskNote.created_at.desc(), TaskNote.id.desc())
        return list(self._session.scalars(stmt).all())

    # PUBLIC_INTERFACE
    def get_by_id(self, note_id: int) -> Optional[TaskNote]:
        """Return the note with the given id, or None when it does not exist."""
        return self._session.get(TaskNote, note_id)

    # PUBLIC_INTERFACE
    def create(self, note: TaskNote) -> TaskNote:
        """Insert a note; id and created_at are assigned on insert."""
        self._session.add(note)
        self._session.commit()
        self._session.refresh(note)
        return note

    # PUBLIC_INTERFACE
    def update(self, note: TaskNote) -> bool:
        """Write the mutable fields of an already-fetched note. Returns True if a row changed."""
        result = self._session.execute(
            update(TaskNote)
            .where(TaskNote.id == note.id)
            .values(title=note.title, description=note.description)
        )
        self._session.commit()
        return result.rowcount > 0

    # PUBLIC_INTERFACE
    def delete(self, note: TaskNote) -> bool:
        """Remove an already-fetched note. Returns True if a row was deleted."""
        result = self._session.execute(delete(TaskNote).where(TaskNote.id == note.id))
        self._session.commit()
        return result.rowcount > 0

    # PUBLIC_INTERFACE
    def commit(self) -> None:
        """Flush and commit changes made to notes loaded through this repository."""
        self._session.commit()
