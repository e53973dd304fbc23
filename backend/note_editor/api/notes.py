import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response
from starlette.concurrency import run_in_threadpool

from note_editor import config
from note_editor.api.errors import wants_html
from note_editor.models.notes import NoteEditErrorBody, NoteLoaderData, NoteProjection, ValidationResult
from note_editor.storage.notes_store import NotesRepository, NotesStore
from note_editor.utils.form_payload import extract_note_fields, require_param
from note_editor.utils.note_validation import validate_note_edit
from note_editor.views.notes import note_href, render_note_edit_form, render_note_page

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users/{username}/notes", tags=["notes"])

DATA_DIR = config.data_dir()
store = NotesStore(DATA_DIR)


def get_notes_store() -> NotesRepository:
    return store


def load_note(notes: NotesRepository, note_id: str) -> NoteLoaderData:
    note = notes.find_note_by_id(note_id)
    if note is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")
    return NoteLoaderData(note=NoteProjection(title=note.title, content=note.content))


@router.get("/{note_id}", response_model=NoteLoaderData)
def view_note(
    username: str,
    note_id: str,
    request: Request,
    notes: NotesRepository = Depends(get_notes_store),
) -> NoteLoaderData | HTMLResponse:
    data = load_note(notes, note_id)
    if wants_html(request):
        return HTMLResponse(render_note_page(username, note_id, data.note.title, data.note.content))
    return data


@router.get("/{note_id}/edit", response_model=NoteLoaderData)
def edit_note_loader(
    username: str,
    note_id: str,
    request: Request,
    notes: NotesRepository = Depends(get_notes_store),
) -> NoteLoaderData | HTMLResponse:
    data = load_note(notes, note_id)
    if wants_html(request):
        return HTMLResponse(render_note_edit_form(data.note.title, data.note.content))
    return data


@router.post("/{note_id}/edit")
async def edit_note_action(
    username: str,
    note_id: str,
    request: Request,
    notes: NotesRepository = Depends(get_notes_store),
) -> Response:
    note_id = require_param(note_id, "noteId")

    form = await request.form()
    title, content = extract_note_fields(form)

    errors: ValidationResult = validate_note_edit(title, content)
    if errors.has_errors:
        logger.info(
            "Rejected edit of note %s: %s",
            note_id,
            sorted(name for name, msgs in errors.field_errors.model_dump().items() if msgs),
        )
        if wants_html(request):
            return HTMLResponse(
                render_note_edit_form(title, content, errors),
                status_code=status.HTTP_400_BAD_REQUEST,
            )
        body = NoteEditErrorBody(errors=errors)
        return JSONResponse(body.model_dump(by_alias=True), status_code=status.HTTP_400_BAD_REQUEST)

    # file store does blocking I/O; keep it off the event loop
    updated = await run_in_threadpool(notes.update_note, note_id, title, content)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")

    logger.info("Updated note %s for %s", note_id, username)
    return RedirectResponse(note_href(username, note_id), status_code=status.HTTP_303_SEE_OTHER)
