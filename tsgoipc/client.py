"""Thread-safe client that runs the server transport on a background thread."""

from __future__ import annotations

import queue
import threading
from collections.abc import Callable
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Any

from tsgoipc.errors import (
    CallbackExecutionFailed,
    ClientError,
    TransportConnectionClosed,
    TransportError,
    VfsError,
)
from tsgoipc.fs_base import VirtualFileSystem
from tsgoipc.transport import TsgoTransport

FS_CALLBACK_NAMES = (
    "readFile",
    "fileExists",
    "directoryExists",
    "realpath",
    "getAccessibleEntries",
)

_SHUTDOWN = object()


@dataclass
class ClientOptions:
    """Settings for starting a :class:`Client`."""

    tsgo_path: str = "tsgo"
    cwd: str | None = None
    log_file: str | None = None
    fs: VirtualFileSystem | None = None


@dataclass
class _Command:
    call: Callable[[TsgoTransport], Any]
    future: Future


def _wrap(exc: Exception) -> Exception:
    """Wrap a lower-level failure in ClientError where it has a known cause."""
    if isinstance(exc, ClientError):
        return exc
    if isinstance(exc, (TransportError, VfsError, OSError, ValueError, TypeError)):
        return ClientError(exc)
    return exc


def _path_argument(method: str, args: Any) -> str:
    if not isinstance(args, str):
        raise CallbackExecutionFailed(method, "Expected string argument for path")
    return args


def _register_fs_callbacks(transport: TsgoTransport, fs: VirtualFileSystem) -> None:
    def read_file(args: Any) -> str | None:
        return fs.read_file(_path_argument("readFile", args))

    def file_exists(args: Any) -> bool:
        return fs.file_exists(_path_argument("fileExists", args))

    def directory_exists(args: Any) -> bool:
        return fs.directory_exists(_path_argument("directoryExists", args))

    def realpath(args: Any) -> str:
        return fs.realpath(_path_argument("realpath", args))

    def get_accessible_entries(args: Any) -> dict[str, list[str]] | None:
        entries = fs.get_accessible_entries(_path_argument("getAccessibleEntries", args))
        return None if entries is None else entries.to_json()

    transport.register_callback("readFile", read_file)
    transport.register_callback("fileExists", file_exists)
    transport.register_callback("directoryExists", directory_exists)
    transport.register_callback("realpath", realpath)
    transport.register_callback("getAccessibleEntries", get_accessible_entries)


def _worker_loop(transport: TsgoTransport, commands: queue.Queue) -> None:
    while True:
        command = commands.get()
        if command is _SHUTDOWN:
            transport.close()
            return
        if not command.future.set_running_or_notify_cancel():
            continue
        try:
            result = command.call(transport)
        except Exception as exc:
            command.future.set_exception(_wrap(exc))
        else:
            command.future.set_result(result)


class Client:
    """Starts the server and serialises requests to it through one worker thread.

    The client may be shared between threads; every call blocks until its
    own response has arrived.
    """

    def __init__(self, options: ClientOptions | None = None) -> None:
        options = options if options is not None else ClientOptions()
        try:
            transport = TsgoTransport(options.tsgo_path, options.cwd)
        except TransportError as exc:
            raise ClientError(exc) from exc

        try:
            if options.fs is not None:
                _register_fs_callbacks(transport, options.fs)
            names = list(FS_CALLBACK_NAMES) if options.fs is not None else []
            transport.configure(options.log_file, names)
        except Exception as exc:
            transport.close()
            wrapped = _wrap(exc)
            if wrapped is exc:
                raise
            raise wrapped from exc

        self._commands: queue.Queue = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False
        self._worker = threading.Thread(
            target=_worker_loop,
            args=(transport, self._commands),
            name="tsgoipc-client",
            daemon=True,
        )
        self._worker.start()

    def _submit(self, call: Callable[[TsgoTransport], Any]) -> Any:
        future: Future = Future()
        with self._lock:
            if self._closed:
                raise ClientError(TransportConnectionClosed())
            self._commands.put(_Command(call, future))
        return future.result()

    def request(self, method: str, payload: Any = None) -> Any:
        """Send a JSON request and return the decoded response."""
        return self._submit(lambda transport: transport.request(method, payload))

    def request_value(self, method: str, payload: Any = None) -> Any:
        """Send a JSON request and return the raw JSON response value."""
        return self._submit(lambda transport: transport.request(method, payload))

    def echo(self, message: str) -> str:
        """Ask the server to echo a string back."""
        result = self.request_value("echo", message)
        if not isinstance(result, str):
            raise ClientError(
                TypeError(f"expected a string response, got {type(result).__name__}")
            )
        return result

    def echo_binary(self, data: bytes) -> bytes:
        """Ask the server to echo a JSON document given as bytes."""
        return self._submit(lambda transport: transport.request_binary("echo", data))

    def close(self) -> None:
        """Shut the worker down and wait for the server to exit."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._commands.put(_SHUTDOWN)
        if threading.current_thread() is not self._worker:
            self._worker.join()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()