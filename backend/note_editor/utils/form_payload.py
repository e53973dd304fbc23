"""Typed extraction of route params and form fields.

Anything wrong here is a broken client, not a user typo, so it raises
``MalformedRequest`` instead of producing a validation message.
"""
from __future__ import annotations

from typing import Any, Optional

from starlette.datastructures import FormData


class MalformedRequest(Exception):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def require(condition: Any, message: str) -> None:
    if not condition:
        raise MalformedRequest(message)


def require_param(value: Optional[str], name: str) -> str:
    require(value, f"{name} param is required")
    return str(value)


def get_string_field(form: FormData, name: str) -> str:
    # first value wins when a field is repeated
    values = form.getlist(name)
    value = values[0] if values else None
    require(isinstance(value, str), f"{name} must be a string")
    return value


def extract_note_fields(form: FormData) -> tuple[str, str]:
    return get_string_field(form, "title"), get_string_field(form, "content")
