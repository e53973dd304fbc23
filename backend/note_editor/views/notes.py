"""HTML for the note pages.

Everything here is a pure function of its arguments: loader data and
validation results go in, markup comes out.
"""
from __future__ import annotations

from html import escape
from urllib.parse import quote
from typing import Optional, Sequence

from note_editor.models.notes import ValidationResult
from note_editor.utils.note_validation import CONTENT_MAX_LENGTH, TITLE_MAX_LENGTH

FORM_ID = "note-editor"

# keeps the layout still while errors come and go
_ERROR_SLOT_STYLE = "min-height: 32px; padding: 4px 16px 12px;"

# disables the submit button while the POST is in flight
_SUBMIT_SCRIPT = """
<script>
  document.getElementById("%(form_id)s").addEventListener("submit", function () {
    var button = document.querySelector('button[form="%(form_id)s"][type="submit"]');
    button.disabled = true;
    button.dataset.status = "pending";
    button.textContent = "Submitting...";
  });
</script>
"""


def _page(title: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html>
  <head><meta charset="utf-8"><title>{escape(title)}</title></head>
  <body style="font-family: sans-serif; padding: 24px;">
    {body}
  </body>
</html>
"""


def render_error_list(errors: Optional[Sequence[str]]) -> str:
    if not errors:
        return ""
    items = "".join(
        f'<li data-key="{index}" style="font-size: 10px; color: #b91c1c;">{escape(error)}</li>'
        for index, error in enumerate(errors)
    )
    return f'<ul style="display: flex; flex-direction: column; gap: 4px;">{items}</ul>'


def _error_slot(errors: Optional[Sequence[str]]) -> str:
    return f'<div style="{_ERROR_SLOT_STYLE}">{render_error_list(errors)}</div>'


def render_note_edit_form(
    title: str,
    content: str,
    errors: Optional[ValidationResult] = None,
) -> str:
    """The edit form, pre-filled with ``title``/``content``.

    The form posts back to the current URL. ``novalidate`` is set so the
    server's checks are the ones users see.
    """
    field_errors = errors.field_errors if errors else None
    form_errors = errors.form_errors if errors else None

    body = f"""
    <form id="{FORM_ID}" method="post" novalidate
          style="display: flex; flex-direction: column; gap: 16px;">
      <div>
        <label>Title</label>
        <input name="title" value="{escape(title)}" required maxlength="{TITLE_MAX_LENGTH}">
        {_error_slot(field_errors.title if field_errors else None)}
      </div>
      <div>
        <label>Content</label>
        <textarea name="content" required maxlength="{CONTENT_MAX_LENGTH}">{escape(content)}</textarea>
        {_error_slot(field_errors.content if field_errors else None)}
      </div>
      {_error_slot(form_errors)}
    </form>
    <div class="floating-toolbar">
      <button type="reset" form="{FORM_ID}">Reset</button>
      <button type="submit" form="{FORM_ID}" data-status="idle">Submit</button>
    </div>
    {_SUBMIT_SCRIPT % {"form_id": FORM_ID}}
    """
    return _page("Edit note", body)


def note_href(username: str, note_id: str, suffix: str = "") -> str:
    # segments may hold "#", "?" or "/" once decoded from the request path
    return f"/users/{quote(username, safe='')}/notes/{quote(note_id, safe='')}{suffix}"


def render_note_page(username: str, note_id: str, title: str, content: str) -> str:
    edit_href = escape(note_href(username, note_id, "/edit"))
    body = f"""
    <h2>{escape(title)}</h2>
    <p style="white-space: pre-wrap;">{escape(content)}</p>
    <a href="{edit_href}">Edit</a>
    """
    return _page(title, body)


def render_note_not_found(note_id: str) -> str:
    return _page("Note not found", f'<p>No note with the id "{escape(note_id)}" exists.</p>')


def render_status_error(status_code: int, detail: str) -> str:
    return _page(f"{status_code} {detail}", f"<h2>{status_code} {escape(detail)}</h2>")
