import json
import logging
import os
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _is_safe_note_id(note_id: str) -> bool:
    # ids come straight from the URL; keep them from escaping the notes dir
    return bool(note_id) and not any(ch in note_id for ch in "/\\") and ".." not in note_id


def _notes_dir(base_dir: Path) -> Path:
    return base_dir / "notes"


def _note_path(base_dir: Path, note_id: str) -> Path:
    if not _is_safe_note_id(note_id):
        raise ValueError("Invalid note_id")
    return _notes_dir(base_dir) / f"{note_id}.json"


def _atomic_write_json(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    with tmp_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
        f.flush()
        os.fsync(f.fileno())
    tmp_path.replace(path)


@dataclass(frozen=True)
class Note:
    id: str
    owner_username: str
    title: str
    content: str
    created_at: str
    updated_at: str
    version: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "owner_username": self.owner_username,
            "title": self.title,
            "content": self.content,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "version": self.version,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Note":
        return cls(
            id=str(raw["id"]),
            owner_username=raw["owner_username"],
            title=raw["title"],
            content=raw["content"],
            created_at=raw["created_at"],
            updated_at=raw["updated_at"],
            version=int(raw["version"]),
        )


class NotesRepository(Protocol):
    """What the edit route needs from note storage."""

    def find_note_by_id(self, note_id: str) -> Note | None: ...

    def update_note(self, note_id: str, title: str, content: str) -> Note | None: ...


class NotesStore:
    """One JSON file per note under ``<base_dir>/notes``."""

    def __init__(self, base_dir: Path):
        self.base_dir = base_dir

    def create_note(self, owner_username: str, title: str, content: str, note_id: str | None = None) -> Note:
        note_id = note_id or uuid.uuid4().hex
        now = _utc_now_iso()
        note = Note(
            id=note_id,
            owner_username=owner_username,
            title=title,
            content=content,
            created_at=now,
            updated_at=now,
            version=1,
        )
        _atomic_write_json(_note_path(self.base_dir, note_id), note.to_dict())
        logger.info("Created note %s for %s", note_id, owner_username)
        return note

    def find_note_by_id(self, note_id: str) -> Note | None:
        if not _is_safe_note_id(note_id):
            return None
        path = _note_path(self.base_dir, note_id)
        if not path.exists():
            return None
        raw = json.loads(path.read_text(encoding="utf-8"))
        return Note.from_dict(raw)

    def update_note(self, note_id: str, title: str, content: str) -> Note | None:
        if not _is_safe_note_id(note_id):
            return None
        path = _note_path(self.base_dir, note_id)
        if not path.exists():
            return None

        raw = json.loads(path.read_text(encoding="utf-8"))

        raw["title"] = title
        raw["content"] = content
        raw["updated_at"] = _utc_now_iso()
        raw["version"] = int(raw.get("version", 1)) + 1

        _atomic_write_json(path, raw)
        return Note.from_dict(raw)
