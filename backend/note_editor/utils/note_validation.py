from __future__ import annotations

from note_editor.models.notes import ValidationResult

TITLE_MAX_LENGTH = 100
CONTENT_MAX_LENGTH = 10_000

REQUIRED_MESSAGE = "This is required"


def text_length(value: str) -> int:
    # UTF-16 code units, the unit browsers use for maxlength
    return len(value.encode("utf-16-le", "surrogatepass")) // 2


def _field_errors(label: str, value: str, max_length: int) -> list[str]:
    if value == "":
        return [REQUIRED_MESSAGE]
    if text_length(value) > max_length:
        return [f"{label} must be {max_length} characters or less."]
    return []


def validate_note_edit(title: str, content: str) -> ValidationResult:
    """Check both fields of a note edit; never stops at the first bad field."""
    result = ValidationResult()
    result.field_errors.title.extend(_field_errors("Title", title, TITLE_MAX_LENGTH))
    result.field_errors.content.extend(_field_errors("Content", content, CONTENT_MAX_LENGTH))
    return result
