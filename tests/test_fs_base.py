import json

import pytest

from tsgoipc.fs_base import FileSystemEntries, VirtualFileSystem


class _DictFileSystem(VirtualFileSystem):
    def __init__(self):
        self.files = {}

    def read_file(self, path):
        return self.files.get(path)

    def write_file(self, path, content):
        self.files[path] = content

    def file_exists(self, path):
        return path in self.files

    def directory_exists(self, path):
        return path == "/"

    def realpath(self, path):
        return path

    def get_accessible_entries(self, path):
        if path != "/":
            return None
        return FileSystemEntries(files=sorted(self.files), directories=[])


def test_to_json_has_both_keys():
    entries = FileSystemEntries(files=["a.ts"], directories=["src"])
    assert entries.to_json() == {"files": ["a.ts"], "directories": ["src"]}


def test_to_json_survives_json_round_trip():
    entries = FileSystemEntries(files=["x.ts", "y.ts"], directories=["lib"])
    restored = FileSystemEntries(**json.loads(json.dumps(entries.to_json())))
    assert restored == entries


def test_to_json_returns_copies():
    entries = FileSystemEntries(files=["a"], directories=[])
    data = entries.to_json()
    data["files"].append("b")
    assert entries.files == ["a"]


def test_default_entries_are_empty_and_independent():
    first = FileSystemEntries()
    second = FileSystemEntries()
    first.files.append("a")
    assert second.files == []
    assert first.to_json() == {"files": ["a"], "directories": []}


def test_interface_cannot_be_instantiated():
    with pytest.raises(TypeError):
        VirtualFileSystem()


def test_concrete_implementation_satisfies_interface():
    fs = _DictFileSystem()
    fs.write_file("/a.ts", "let a = 1;")
    assert fs.read_file("/a.ts") == "let a = 1;"
    assert fs.file_exists("/a.ts")
    assert fs.get_accessible_entries("/") == FileSystemEntries(
        files=["/a.ts"], directories=[]
    )
    assert fs.get_accessible_entries("/").to_json() == {
        "files": ["/a.ts"],
        "directories": [],
    }
    assert fs.get_accessible_entries("/missing") is None