import logging

import uvicorn
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from note_editor import config
from note_editor.api import notes
from note_editor.api.errors import http_error_boundary, malformed_request_handler
from note_editor.utils.form_payload import MalformedRequest

logging.basicConfig(level=config.log_level(), format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Note Editor")
app.include_router(notes.router)
app.add_exception_handler(StarletteHTTPException, http_error_boundary)
app.add_exception_handler(MalformedRequest, malformed_request_handler)


@app.get("/health")
def health():
    return {"ok": True}


def run() -> None:
    logger.info("Serving notes from %s", notes.DATA_DIR)
    uvicorn.run(app, host=config.server_host(), port=config.server_port(), log_level=config.log_level().lower())


if __name__ == "__main__":
    run()
