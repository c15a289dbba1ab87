from fastapi import Depends
from sqlalchemy.orm import Session

from tasknote.db import get_db
from tasknote.repository import TaskNoteRepository


# PUBLIC_INTERFACE
def get_task_note_repository(db: Session = Depends(get_db)) -> TaskNoteRepository:
    """FastAPI dependency building a repository around the request's session."""
    return TaskNoteRepository(db)
