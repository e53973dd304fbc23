from __future__ import annotations

import logging
from typing import Callable, Mapping, Optional

from fastapi import Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from note_editor.utils.form_payload import MalformedRequest
from note_editor.views.notes import render_note_not_found, render_status_error

logger = logging.getLogger(__name__)

StatusHandler = Callable[[Mapping[str, str]], Optional[str]]


def wants_html(request: Request) -> bool:
    return "text/html" in request.headers.get("accept", "")


def _note_not_found(params: Mapping[str, str]) -> str | None:
    note_id = params.get("note_id")
    if note_id is None:
        return None
    return render_note_not_found(note_id)


# status code -> page renderer; a renderer may return None to fall through
STATUS_HANDLERS: dict[int, StatusHandler] = {
    404: _note_not_found,
}


def general_error_boundary(
    status_code: int,
    detail: str,
    params: Mapping[str, str],
    status_handlers: Mapping[int, StatusHandler] = STATUS_HANDLERS,
) -> str:
    handler = status_handlers.get(status_code)
    html = handler(params) if handler else None
    if html is None:
        html = render_status_error(status_code, detail)
    return html


async def http_error_boundary(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == 404:
        logger.info("Not found: %s (%s)", request.url.path, exc.detail)
    if not wants_html(request):
        return await http_exception_handler(request, exc)
    html = general_error_boundary(exc.status_code, str(exc.detail), request.path_params)
    return HTMLResponse(content=html, status_code=exc.status_code, headers=getattr(exc, "headers", None))


async def malformed_request_handler(request: Request, exc: MalformedRequest) -> Response:
    logger.warning("Malformed request to %s: %s", request.url.path, exc.message)
    return PlainTextResponse(exc.message, status_code=exc.status_code)
