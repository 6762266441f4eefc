"""Data models for storyboards and their scenes."""

import threading
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone

from storyboard_builder.constants import SCRIPT_TITLE

_id_lock = threading.Lock()
_last_id = 0


def new_storyboard_id() -> str:
    """Millisecond timestamp id, bumped so ids never repeat within a process."""
    global _last_id
    with _id_lock:
        candidate = int(time.time() * 1000)
        if candidate <= _last_id:
            candidate = _last_id + 1
        _last_id = candidate
    return str(candidate)


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T09:30:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class Scene:
    id: str
    number: int            # 1-based position in the storyboard
    vo_script: str = ""    # voice-over copy
    files: list = field(default_factory=list)  # reserved, never filled by the parser
    notes: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "number": self.number,
            "voScript": self.vo_script,
            "files": list(self.files),
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Scene":
        files = data.get("files", [])
        if not isinstance(files, list):
            raise TypeError(f"scene files must be a list, got {type(files).__name__}")
        return cls(
            id=str(data["id"]),
            number=int(data["number"]),
            vo_script=str(data.get("voScript", "")),
            files=list(files),
            notes=str(data.get("notes", "")),
        )


@dataclass
class Storyboard:
    id: str = field(default_factory=new_storyboard_id)
    title: str = SCRIPT_TITLE
    scenes: list[Scene] = field(default_factory=list)
    last_edited: str = field(default_factory=utc_timestamp)

    def add_scene(self, vo_script: str = "", notes: str = "") -> Scene:
        """Append a scene numbered after the existing ones and return it."""
        number = len(self.scenes) + 1
        scene = Scene(id=f"{self.id}-{number}", number=number, vo_script=vo_script, notes=notes)
        self.scenes.append(scene)
        return scene

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "scenes": [s.to_dict() for s in self.scenes],
            "lastEdited": self.last_edited,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Storyboard":
        """Rebuild a storyboard from its persisted form.

        Raises KeyError, TypeError or ValueError on malformed records.
        """
        if not isinstance(data, dict):
            raise TypeError(f"storyboard record must be an object, got {type(data).__name__}")
        scenes = data.get("scenes", [])
        if not isinstance(scenes, list):
            raise TypeError("storyboard scenes must be a list")
        return cls(
            id=str(data["id"]),
            title=str(data.get("title", "")),
            scenes=[Scene.from_dict(s) for s in scenes],
            last_edited=str(data.get("lastEdited", "")),
        )
