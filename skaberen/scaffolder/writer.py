"""Async filesystem access for generated artifacts.

All blocking calls are pushed to a worker thread with ``asyncio.to_thread`` so
that independent artifacts can be written concurrently from one event loop.
"""

from __future__ import annotations

import asyncio
from pathlib import Path


class FilesystemError(Exception):
    """Raised when a directory cannot be created or a file cannot be written."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}")


class ArtifactWriter:
    """Creates directories and writes artifact files under a target root."""

    async def exists(self, path: str | Path) -> bool:
        return await asyncio.to_thread(Path(path).exists)

    async def ensure_directory(self, path: str | Path) -> Path:
        """Create *path* and any missing parents.  Existing directories are fine."""
        dir_path = Path(path)
        try:
            await asyncio.to_thread(dir_path.mkdir, parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemError(dir_path, f"Cannot create directory ({exc.strerror or exc})") from exc
        return dir_path

    async def write(self, path: str | Path, content: str) -> Path:
        """Write *content* to *path*, replacing any existing file."""
        out = Path(path)
        try:
            await asyncio.to_thread(_write_file, out, content, "w")
        except OSError as exc:
            raise FilesystemError(out, f"Cannot write file ({exc.strerror or exc})") from exc
        return out

    async def write_if_absent(self, path: str | Path, content: str) -> bool:
        """Create *path* with *content* only if it does not exist yet.

        Returns:
            ``True`` if the file was written, ``False`` if it was already there.
        """
        out = Path(path)
        try:
            await asyncio.to_thread(_write_file, out, content, "x")
        except FileExistsError as exc:
            # Raised by mkdir when a parent segment is an existing file.
            if exc.filename is not None and Path(exc.filename) != out:
                raise FilesystemError(out, f"Cannot write file ({exc.strerror or exc})") from exc
            return False
        except OSError as exc:
            raise FilesystemError(out, f"Cannot write file ({exc.strerror or exc})") from exc
        return True


def _write_file(path: Path, content: str, mode: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open(mode, encoding="utf-8") as fh:
        fh.write(content)
