"""The file-system interface the server calls back into."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class FileSystemEntries:
    """The files and directories found directly inside a directory."""

    files: list[str] = field(default_factory=list)
    directories: list[str] = field(default_factory=list)

    def to_json(self) -> dict[str, list[str]]:
        """Return the entries as a JSON-ready mapping."""
        return {"files": list(self.files), "directories": list(self.directories)}


class VirtualFileSystem(ABC):
    """Operations the server may ask of a file system."""

    @abstractmethod
    def read_file(self, path: str) -> str | None:
        """Return the file's contents, or None if it does not exist."""

    @abstractmethod
    def write_file(self, path: str, content: str) -> None:
        """Write content to a file."""

    @abstractmethod
    def file_exists(self, path: str) -> bool:
        """Return whether a file exists at path."""

    @abstractmethod
    def directory_exists(self, path: str) -> bool:
        """Return whether a directory exists at path."""

    @abstractmethod
    def realpath(self, path: str) -> str:
        """Return the canonical form of path."""

    @abstractmethod
    def get_accessible_entries(self, path: str) -> FileSystemEntries | None:
        """Return the directory's entries, or None if it cannot be read."""