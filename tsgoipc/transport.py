"""Binary message protocol and the process transport that speaks it."""

from __future__ import annotations

import json
import subprocess
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from tsgoipc.errors import (
    CallbackExecutionFailed,
    IncompleteMessage,
    InvalidBinaryPayload,
    InvalidMessageType,
    InvalidProtocolArrayLength,
    InvalidProtocolUtf8,
    InvalidResponse,
    ServerError,
    TransportConnectionClosed,
    TransportError,
    TransportProcessHandleUnavailable,
    TransportProcessStartFailed,
    UnknownCallback,
)

Callback = Callable[[Any], Any]

_READ_CHUNK = 65536

_FIXARRAY_MIN = 0x90
_FIXARRAY_MAX = 0x9F
_ARRAY16 = 0xDC
_ARRAY32 = 0xDD
_UINT8 = 0xCC
_BIN8 = 0xC4
_BIN16 = 0xC5
_BIN32 = 0xC6


class MessageType(IntEnum):
    """Kinds of message exchanged with the server."""

    Request = 1
    CallResponse = 2
    CallError = 3
    Response = 4
    Error = 5
    Call = 6


def _dump_json(value: Any) -> str:
    return json.dumps(
        value, separators=(",", ":"), ensure_ascii=False, sort_keys=True, allow_nan=False
    )


def _write_bin(out: bytearray, data: bytes) -> None:
    size = len(data)
    if size < 1 << 8:
        out += bytes((_BIN8, size))
    elif size < 1 << 16:
        out.append(_BIN16)
        out += size.to_bytes(2, "big")
    elif size < 1 << 32:
        out.append(_BIN32)
        out += size.to_bytes(4, "big")
    else:
        raise TransportError(f"MessagePack encoding error: binary of {size} bytes is too long")
    out += data


class _Reader:
    """Sequential reader over a byte buffer that reports truncation."""

    def __init__(self, buffer: bytes | bytearray | memoryview) -> None:
        self._data = memoryview(bytes(buffer))
        self.position = 0

    def take(self, count: int) -> bytes:
        end = self.position + count
        if end > len(self._data):
            raise IncompleteMessage()
        chunk = bytes(self._data[self.position:end])
        self.position = end
        return chunk

    def byte(self) -> int:
        return self.take(1)[0]

    def uint(self, width: int) -> int:
        return int.from_bytes(self.take(width), "big")

    def array_len(self) -> int:
        marker = self.byte()
        if _FIXARRAY_MIN <= marker <= _FIXARRAY_MAX:
            return marker & 0x0F
        if marker == _ARRAY16:
            return self.uint(2)
        if marker == _ARRAY32:
            return self.uint(4)
        raise TransportError(
            f"MessagePack decode error: expected array marker, got 0x{marker:02x}"
        )

    def u8(self) -> int:
        marker = self.byte()
        if marker != _UINT8:
            raise TransportError(
                f"MessagePack decode error: expected uint8 marker, got 0x{marker:02x}"
            )
        return self.byte()

    def bin(self) -> bytes:
        marker = self.byte()
        if marker == _BIN8:
            size = self.byte()
        elif marker == _BIN16:
            size = self.uint(2)
        elif marker == _BIN32:
            size = self.uint(4)
        else:
            raise TransportError(
                f"MessagePack decode error: expected binary marker, got 0x{marker:02x}"
            )
        return self.take(size)


def _utf8(data: bytes, field: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidProtocolUtf8(field, str(exc)) from exc


@dataclass
class ProtocolMessage:
    """A message: its type, a method name and a JSON payload."""

    message_type: MessageType
    method: str
    payload: Any = None

    def encode(self) -> bytes:
        """Encode as a three-element MessagePack array."""
        out = bytearray([0x93, _UINT8, int(self.message_type)])
        _write_bin(out, self.method.encode("utf-8"))
        _write_bin(out, _dump_json(self.payload).encode("utf-8"))
        return bytes(out)

    @classmethod
    def decode(cls, buffer: bytes | bytearray | memoryview) -> ProtocolMessage:
        """Decode a message from the start of buffer."""
        return cls._decode_prefix(buffer)[0]

    @classmethod
    def _decode_prefix(
        cls, buffer: bytes | bytearray | memoryview
    ) -> tuple[ProtocolMessage, int]:
        reader = _Reader(buffer)
        length = reader.array_len()
        if length != 3:
            raise InvalidProtocolArrayLength(length)

        type_value = reader.u8()
        try:
            message_type = MessageType(type_value)
        except ValueError:
            raise InvalidMessageType(type_value) from None

        method = _utf8(reader.bin(), "method name")
        payload_text = _utf8(reader.bin(), "payload")
        payload = json.loads(payload_text) if payload_text else None
        return cls(message_type, method, payload), reader.position


_RETRYABLE = (
    IncompleteMessage,
    InvalidProtocolArrayLength,
    InvalidMessageType,
    InvalidProtocolUtf8,
)


class TsgoTransport:
    """Runs the server process and exchanges protocol messages over its pipes."""

    def __init__(self, tsgo_path: str, cwd: str | None = None) -> None:
        args = [tsgo_path, "--api", "-cwd", cwd if cwd is not None else "."]
        try:
            self._process = subprocess.Popen(
                args,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
            )
        except OSError as exc:
            raise TransportProcessStartFailed(
                f"Failed to spawn tsgo process '{tsgo_path}': {exc}"
            ) from exc

        if self._process.stdin is None:
            raise TransportProcessHandleUnavailable("stdin")
        if self._process.stdout is None:
            raise TransportProcessHandleUnavailable("stdout")

        self._stdin = self._process.stdin
        self._stdout = self._process.stdout
        self._buffer = bytearray()
        self._callbacks: dict[str, Callback] = {}
        self._closed = False

    def configure(
        self, log_file: str | None = None, callback_names: Iterable[str] = ()
    ) -> None:
        """Send the configuration request naming the callbacks offered."""
        self.request("configure", {"logFile": log_file, "callbacks": list(callback_names)})

    def register_callback(self, name: str, callback: Callback) -> None:
        """Register a function the server may call by name."""
        self._callbacks[name] = callback

    def request(self, method: str, payload: Any = None) -> Any:
        """Send a request and return the response payload."""
        self._send(ProtocolMessage(MessageType.Request, method, payload))
        return self._await_response()

    def request_binary(self, method: str, payload: bytes) -> bytes:
        """Send a JSON-encoded request and return the JSON-encoded response."""
        try:
            text = bytes(payload).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidBinaryPayload(f"Invalid UTF-8 in binary payload: {exc}") from exc
        result = self.request(method, json.loads(text))
        return _dump_json(result).encode("utf-8")

    def close(self) -> None:
        """Close the server's input and wait for it to exit."""
        if self._closed:
            return
        self._closed = True
        try:
            self._stdin.close()
        except OSError:
            pass
        try:
            self._process.wait()
        except OSError:
            pass

    def __enter__(self) -> TsgoTransport:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _await_response(self) -> Any:
        while True:
            message = self._read_message()
            if message.message_type is MessageType.Response:
                return message.payload
            if message.message_type is MessageType.Error:
                raise ServerError(_dump_json(message.payload))
            if message.message_type is MessageType.Call:
                self._handle_callback(message.method, message.payload)
                continue
            raise InvalidResponse("Response or Error", message.message_type.name)

    def _handle_callback(self, method: str, args: Any) -> None:
        callback = self._callbacks.get(method)
        if callback is None:
            self._send(
                ProtocolMessage(
                    MessageType.CallError, method, f"Unknown callback method: {method}"
                )
            )
            raise UnknownCallback(method)
        try:
            result = callback(args)
        except Exception as exc:
            raise CallbackExecutionFailed(method, str(exc)) from exc
        self._send(ProtocolMessage(MessageType.CallResponse, method, result))

    def _send(self, message: ProtocolMessage) -> None:
        if self._closed:
            raise TransportConnectionClosed()
        self._stdin.write(message.encode())
        self._stdin.flush()

    def _read_message(self) -> ProtocolMessage:
        if self._closed:
            raise TransportConnectionClosed()
        while True:
            try:
                message, consumed = ProtocolMessage._decode_prefix(self._buffer)
            except _RETRYABLE:
                pass
            else:
                del self._buffer[:consumed]
                return message

            chunk = self._stdout.read1(_READ_CHUNK)
            if not chunk:
                raise TransportConnectionClosed()
            self._buffer += chunk