"""File handles offered for attachment.

The attachment manager only needs a name, a size and a path; where the file
came from (a local path, a browser upload) is up to the caller.
"""

from __future__ import annotations

import os
import uuid
from pathlib import Path
from typing import Protocol

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename


class CandidateFile(Protocol):
    @property
    def name(self) -> str: ...

    @property
    def size(self) -> int: ...

    @property
    def path(self) -> str: ...


class LocalFile:
    """A file already on local disk. Size is read when asked for."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @classmethod
    def from_path(cls, path: str | Path) -> "LocalFile":
        return cls(path)

    @property
    def name(self) -> str:
        return self._path.name

    @property
    def size(self) -> int:
        return self._path.stat().st_size

    @property
    def path(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        return f"LocalFile({self.path!r})"


class UploadedFile:
    """A browser upload that will live under `upload_folder` once accepted."""

    def __init__(self, storage: FileStorage, upload_folder: str | Path):
        self._storage = storage
        self._name = storage.filename or "document"
        safe = secure_filename(self._name) or "document"
        self._path = Path(upload_folder) / f"{uuid.uuid4().hex[:8]}_{safe}"

    @property
    def name(self) -> str:
        return self._name

    @property
    def size(self) -> int:
        stream = self._storage.stream
        pos = stream.tell()
        stream.seek(0, os.SEEK_END)
        size = stream.tell()
        stream.seek(pos)
        return size

    @property
    def path(self) -> str:
        return str(self._path)

    @property
    def extension(self) -> str:
        return self._name.rsplit(".", 1)[-1].lower() if "." in self._name else ""

    def save(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._storage.save(str(self._path))

    def __repr__(self) -> str:
        return f"UploadedFile({self._name!r})"
