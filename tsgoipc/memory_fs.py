"""A file system held entirely in memory."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import dataclass

from tsgoipc.fs_base import FileSystemEntries, VirtualFileSystem


@dataclass(frozen=True)
class _File:
    content: str


@dataclass(frozen=True)
class _Directory:
    pass


_Node = _File | _Directory


def _normalize_path(path: str) -> str:
    """Drop empty and '.' segments, resolve '..', and make the path absolute."""
    components: list[str] = []
    for component in path.split("/"):
        if component in ("", "."):
            continue
        if component == "..":
            if components:
                components.pop()
        else:
            components.append(component)
    return "/" + "/".join(components)


def _path_components(path: str) -> list[str]:
    if path == "/":
        return []
    return path.lstrip("/").split("/")


class MemoryFileSystem(VirtualFileSystem):
    """In-memory file system, handy for tests and controlled environments.

    Files are stored under their full relative path; directories are stored
    under the name of each directory component.
    """

    def __init__(self) -> None:
        self._nodes: dict[str, _Node] = {}
        self._lock = threading.RLock()

    @classmethod
    def from_files(cls, files: Mapping[str, str]) -> MemoryFileSystem:
        """Build a file system from a mapping of paths to contents."""
        fs = cls()
        for path, content in files.items():
            fs.add_file(path, content)
        return fs

    def _ensure_directories(self, components: list[str]) -> None:
        with self._lock:
            for component in components:
                self._nodes.setdefault(component, _Directory())

    def _create_file(self, components: list[str], content: str) -> None:
        if not components:
            return
        with self._lock:
            self._nodes["/".join(components)] = _File(content)

    def _get_node(self, path: str) -> _Node | None:
        normalized = _normalize_path(path)
        if normalized == "/":
            return _Directory()
        with self._lock:
            return self._nodes.get(normalized.lstrip("/"))

    def _snapshot(self) -> list[tuple[str, _Node]]:
        with self._lock:
            return list(self._nodes.items())

    def add_file(self, path: str, content: str) -> None:
        """Add a file, creating entries for its parent directories."""
        components = _path_components(_normalize_path(path))
        self._ensure_directories(components[:-1])
        self._create_file(components, content)

    def add_directory(self, path: str) -> None:
        """Add a directory."""
        self._ensure_directories(_path_components(_normalize_path(path)))

    def read_file(self, path: str) -> str | None:
        node = self._get_node(path)
        return node.content if isinstance(node, _File) else None

    def write_file(self, path: str, content: str) -> None:
        self.add_file(path, content)

    def file_exists(self, path: str) -> bool:
        return isinstance(self._get_node(path), _File)

    def directory_exists(self, path: str) -> bool:
        if path in ("/", ""):
            return True
        return isinstance(self._get_node(path), _Directory)

    def realpath(self, path: str) -> str:
        return _normalize_path(path)

    def get_accessible_entries(self, path: str) -> FileSystemEntries | None:
        normalized = _normalize_path(path)
        items = self._snapshot()

        if normalized == "/":
            top_level = [(key, node) for key, node in items if "/" not in key]
            return FileSystemEntries(
                files=[key for key, node in top_level if isinstance(node, _File)],
                directories=[
                    key for key, node in top_level if isinstance(node, _Directory)
                ],
            )

        prefix = normalized.lstrip("/") + "/"
        files: list[str] = []
        directories: dict[str, None] = {}

        for key, node in items:
            if not key.startswith(prefix):
                continue
            remaining = key[len(prefix):]
            if "/" not in remaining:
                if isinstance(node, _File):
                    files.append(remaining)
            else:
                directories[remaining.split("/", 1)[0]] = None

        for key, node in items:
            if key.startswith(prefix) and isinstance(node, _Directory):
                remaining = key[len(prefix):]
                if "/" not in remaining:
                    directories[remaining] = None

        entries = FileSystemEntries(files=files, directories=list(directories))
        if not files and not directories and not self.directory_exists(path):
            return None
        return entries