"""A file system backed by the operating system."""

from __future__ import annotations

import os
from pathlib import Path

from tsgoipc.errors import VfsOperationError
from tsgoipc.fs_base import FileSystemEntries, VirtualFileSystem


class RealFileSystem(VirtualFileSystem):
    """Delegates to the real file system, resolving relative paths against a base."""

    def __init__(self, base_dir: str | os.PathLike[str]) -> None:
        self.base_dir = Path(base_dir)

    @classmethod
    def with_cwd(cls) -> RealFileSystem:
        """Create a file system rooted at the current working directory."""
        try:
            cwd = os.getcwd()
        except OSError as exc:
            raise VfsOperationError("get_current_dir", ".", str(exc)) from exc
        return cls(cwd)

    def _resolve(self, path: str) -> Path:
        candidate = Path(path)
        return candidate if candidate.is_absolute() else self.base_dir / path

    def read_file(self, path: str) -> str | None:
        try:
            with open(self._resolve(path), encoding="utf-8", newline="") as handle:
                return handle.read()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise VfsOperationError("read_file", path, str(exc)) from exc

    def write_file(self, path: str, content: str) -> None:
        resolved = self._resolve(path)
        parent = resolved.parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise VfsOperationError("create_dir_all", str(parent), str(exc)) from exc
        try:
            with open(resolved, "w", encoding="utf-8", newline="") as handle:
                handle.write(content)
        except OSError as exc:
            raise VfsOperationError("write_file", path, str(exc)) from exc

    def file_exists(self, path: str) -> bool:
        return self._resolve(path).is_file()

    def directory_exists(self, path: str) -> bool:
        return self._resolve(path).is_dir()

    def realpath(self, path: str) -> str:
        resolved = self._resolve(path)
        try:
            return str(resolved.resolve(strict=True))
        except (OSError, RuntimeError):
            return str(resolved)

    def get_accessible_entries(self, path: str) -> FileSystemEntries | None:
        try:
            scanner = os.scandir(self._resolve(path))
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise VfsOperationError("read_dir", path, str(exc)) from exc

        entries = FileSystemEntries()
        with scanner:
            while True:
                try:
                    entry = next(scanner)
                except StopIteration:
                    break
                except OSError as exc:
                    raise VfsOperationError("read_dir_entry", path, str(exc)) from exc
                try:
                    is_file = entry.is_file(follow_symlinks=False)
                    is_dir = entry.is_dir(follow_symlinks=False)
                except OSError as exc:
                    raise VfsOperationError("get_file_type", entry.path, str(exc)) from exc
                if is_file:
                    entries.files.append(entry.name)
                elif is_dir:
                    entries.directories.append(entry.name)
        return entries