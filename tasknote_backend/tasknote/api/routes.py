import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Request, Response, status

from tasknote.api.deps import get_task_note_repository
from tasknote.models import TaskNote
from tasknote.repository import TaskNoteRepository
from tasknote.schemas import TaskNoteIn, TaskNoteOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tasknote", tags=["TaskNotes"])

_NOT_FOUND = {404: {"description": "Task note not found (empty body)."}}
_BAD_REQUEST = {400: {"description": "Request failed shape validation."}}

# Storage ids are 32-bit signed integers; anything wider is a malformed id.
NoteId = Annotated[int, Path(ge=-2**31, le=2**31 - 1)]


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[TaskNoteOut],
    summary="List task notes",
    description="Return all task notes ordered by creation time, newest first.",
)
def list_task_notes(repo: TaskNoteRepository = Depends(get_task_note_repository)) -> List[TaskNoteOut]:
    """List all task notes."""
    return repo.list_all()


# PUBLIC_INTERFACE
@router.get(
    "/{note_id}",
    response_model=TaskNoteOut,
    summary="Get task note",
    description="Fetch a single task note by ID.",
    responses={**_NOT_FOUND, **_BAD_REQUEST},
)
def get_task_note(note_id: NoteId, repo: TaskNoteRepository = Depends(get_task_note_repository)):
    """Get a task note by id."""
    note = repo.get_by_id(note_id)
    if note is None:
        logger.debug("Task note %s not found", note_id)
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return note


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TaskNoteOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create task note",
    description="Create a task note. The Location header points at the new resource.",
    responses=_BAD_REQUEST,
)
def create_task_note(
    payload: TaskNoteIn,
    request: Request,
    response: Response,
    repo: TaskNoteRepository = Depends(get_task_note_repository),
) -> TaskNoteOut:
    """Create a task note."""
    created = repo.create(TaskNote(title=payload.title, description=payload.description))
    logger.info("Created task note id=%s title_len=%s", created.id, len(created.title))
    response.headers["Location"] = str(request.url_for("get_task_note", note_id=created.id))
    return created


# PUBLIC_INTERFACE
@router.put(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update task note",
    description="Replace the title and description of an existing task note.",
    responses={**_NOT_FOUND, **_BAD_REQUEST},
)
def update_task_note(
    note_id: NoteId,
    payload: TaskNoteIn,
    repo: TaskNoteRepository = Depends(get_task_note_repository),
) -> Response:
    """Update a task note by id; id and createdAt are preserved."""
    note = repo.get_by_id(note_id)
    if note is None:
        logger.debug("Task note %s not found for update", note_id)
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    note.title = payload.title
    note.description = payload.description
    repo.commit()

    logger.info("Updated task note id=%s", note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# PUBLIC_INTERFACE
@router.delete(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete task note",
    description="Delete a task note by ID.",
    responses={**_NOT_FOUND, **_BAD_REQUEST},
)
def delete_task_note(note_id: NoteId, repo: TaskNoteRepository = Depends(get_task_note_repository)) -> Response:
    """Delete a task note by id."""
    note = repo.get_by_id(note_id)
    if note is None:
        logger.debug("Task note %s not found for delete", note_id)
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    if not repo.delete(note):
        logger.warning("Delete of task note id=%s affected no rows", note_id)
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    logger.info("Deleted task note id=%s", note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
