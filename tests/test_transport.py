import io
import json
from unittest.mock import patch

import pytest

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
    TransportProcessStartFailed,
    UnknownCallback,
)
from tsgoipc.transport import MessageType, ProtocolMessage, TsgoTransport


class _Sink(io.BytesIO):
    def __init__(self):
        super().__init__()
        self.written = b""
        self.was_closed = False

    def write(self, data):
        self.written += bytes(data)
        return len(data)

    def close(self):
        self.was_closed = True


class _Trickle:
    """A stdout that hands out one byte per read."""

    def __init__(self, data):
        self._data = data

    def read1(self, size=-1):
        chunk, self._data = self._data[:1], self._data[1:]
        return chunk


class _FakeProcess:
    def __init__(self, output, trickle=False):
        self.stdin = _Sink()
        self.stdout = _Trickle(output) if trickle else io.BytesIO(output)
        self.waited = False

    def wait(self):
        self.waited = True
        return 0


def _msg(message_type, method, payload):
    return ProtocolMessage(message_type, method, payload).encode()


def _transport(output, trickle=False):
    fake = _FakeProcess(output, trickle)
    with patch("tsgoipc.transport.subprocess.Popen", return_value=fake) as popen:
        transport = TsgoTransport("tsgo-bin", None)
    return transport, fake, popen


def test_binary_format_requirements():
    encoded = ProtocolMessage(MessageType.Request, "echo", "test").encode()
    assert encoded[0] == 0x93
    assert encoded[1] == 0xCC
    assert encoded[2] == 0x01
    assert encoded[3] == 0xC4
    assert encoded[4] == 0x04
    assert encoded[5:9] == b"echo"
    assert encoded[9] == 0xC4
    assert encoded[10] == 0x06
    assert encoded[11:17] == b'"test"'
    assert len(encoded) == 17


@pytest.mark.parametrize(
    "payload, text",
    [
        ("test", b'"test"'),
        (42, b"42"),
        (True, b"true"),
        (None, b"null"),
        ([1, 2, 3, "test"], b'[1,2,3,"test"]'),
        ({"nested": {"deep": True}, "key": "value"}, b'{"key":"value","nested":{"deep":true}}'),
    ],
)
def test_encode_payload_as_compact_json(payload, text):
    encoded = ProtocolMessage(MessageType.Request, "echo", payload).encode()
    assert encoded == b"\x93\xcc\x01\xc4\x04echo" + bytes([0xC4, len(text)]) + text


def test_decode_response_message():
    data = b'\x93\xcc\x04\xc4\x04echo\xc4\x06"test"'
    decoded = ProtocolMessage.decode(data)
    assert decoded.message_type is MessageType.Response
    assert decoded.method == "echo"
    assert decoded.payload == "test"


def test_decode_empty_payload_is_null():
    decoded = ProtocolMessage.decode(b"\x93\xcc\x04\xc4\x04echo\xc4\x00")
    assert decoded.payload is None


@pytest.mark.parametrize(
    "payload",
    ["test", 42, True, None, [1, 2, 3, "test"], {"key": "value", "nested": {"deep": True}}],
)
def test_encode_decode_roundtrip(payload):
    original = ProtocolMessage(MessageType.Request, "test_method", payload)
    assert ProtocolMessage.decode(original.encode()) == original


@pytest.mark.parametrize("message_type", list(MessageType))
def test_all_message_types(message_type):
    message = ProtocolMessage(message_type, "test", "data")
    decoded = ProtocolMessage.decode(message.encode())
    assert decoded.message_type is message_type
    assert decoded.method == "test"
    assert decoded.payload == "data"


def test_long_payload_uses_bin16():
    payload = "x" * 300
    encoded = ProtocolMessage(MessageType.Request, "m", payload).encode()
    assert encoded[6:9] == b"\xc5\x01\x2e"
    assert ProtocolMessage.decode(encoded).payload == payload


def test_decode_malformed_data():
    with pytest.raises(IncompleteMessage):
        ProtocolMessage.decode(b"")
    with pytest.raises(IncompleteMessage):
        ProtocolMessage.decode(b"\x93")

    with pytest.raises(InvalidProtocolArrayLength) as wrong_length:
        ProtocolMessage.decode(b"\x92\xcc\x01\xc4\x04echo")
    assert wrong_length.value.actual == 2

    with pytest.raises(InvalidMessageType) as invalid_type:
        ProtocolMessage.decode(b"\x93\xcc\x99\xc4\x04echo\xc4\x04test")
    assert invalid_type.value.message_type == 0x99


def test_decode_wrong_marker():
    with pytest.raises(TransportError, match="MessagePack decode error"):
        ProtocolMessage.decode(b"\x01")


def test_decode_invalid_utf8_method():
    with pytest.raises(InvalidProtocolUtf8) as err:
        ProtocolMessage.decode(b"\x93\xcc\x04\xc4\x01\xff\xc4\x00")
    assert err.value.field == "method name"


def test_spawn_arguments():
    _, _, popen = _transport(b"")
    assert popen.call_args.args[0] == ["tsgo-bin", "--api", "-cwd", "."]


def test_spawn_failure():
    with patch("tsgoipc.transport.subprocess.Popen", side_effect=FileNotFoundError("gone")):
        with pytest.raises(TransportProcessStartFailed) as err:
            TsgoTransport("missing-bin", "/tmp")
    assert "missing-bin" in err.value.reason


def test_request_returns_response_payload():
    transport, fake, _ = _transport(_msg(MessageType.Response, "echo", {"a": 1}))
    assert transport.request("echo", "hi") == {"a": 1}
    assert fake.stdin.written == _msg(MessageType.Request, "echo", "hi")


def test_request_reads_partial_chunks():
    transport, _, _ = _transport(_msg(MessageType.Response, "echo", "slow"), trickle=True)
    assert transport.request("echo", "slow") == "slow"


def test_request_server_error():
    transport, _, _ = _transport(_msg(MessageType.Error, "bad", "boom"))
    with pytest.raises(ServerError) as err:
        transport.request("bad", None)
    assert err.value.server_message == '"boom"'


def test_request_unexpected_type():
    transport, _, _ = _transport(_msg(MessageType.Request, "x", None))
    with pytest.raises(InvalidResponse) as err:
        transport.request("x", None)
    assert err.value.actual == "Request"


def test_request_connection_closed():
    transport, _, _ = _transport(b"")
    with pytest.raises(TransportConnectionClosed):
        transport.request("echo", "x")


def test_callback_is_answered():
    output = _msg(MessageType.Call, "fileExists", "/a.ts") + _msg(
        MessageType.Response, "echo", "done"
    )
    transport, fake, _ = _transport(output)
    seen = []

    def file_exists(path):
        seen.append(path)
        return True

    transport.register_callback("fileExists", file_exists)
    assert transport.request("echo", "go") == "done"
    assert seen == ["/a.ts"]
    assert fake.stdin.written == _msg(MessageType.Request, "echo", "go") + _msg(
        MessageType.CallResponse, "fileExists", True
    )


def test_unknown_callback():
    transport, fake, _ = _transport(_msg(MessageType.Call, "readFile", "/x"))
    with pytest.raises(UnknownCallback) as err:
        transport.request("echo", "go")
    assert err.value.method == "readFile"
    assert fake.stdin.written.endswith(
        _msg(MessageType.CallError, "readFile", "Unknown callback method: readFile")
    )


def test_callback_failure():
    transport, _, _ = _transport(_msg(MessageType.Call, "readFile", "/x"))

    def failing(_):
        raise ValueError("no access")

    transport.register_callback("readFile", failing)
    with pytest.raises(CallbackExecutionFailed) as err:
        transport.request("echo", "go")
    assert err.value.method == "readFile"
    assert err.value.reason == "no access"


def test_configure_sends_settings():
    transport, fake, _ = _transport(_msg(MessageType.Response, "configure", None))
    transport.configure(None, ["readFile", "realpath"])
    sent = ProtocolMessage.decode(fake.stdin.written)
    assert sent.method == "configure"
    assert sent.payload == {"logFile": None, "callbacks": ["readFile", "realpath"]}


def test_request_binary_roundtrip():
    transport, fake, _ = _transport(_msg(MessageType.Response, "echo", {"b": [1, 2]}))
    result = transport.request_binary("echo", b'{"b":[1,2]}')
    assert json.loads(result) == {"b": [1, 2]}
    assert result == b'{"b":[1,2]}'
    assert ProtocolMessage.decode(fake.stdin.written).payload == {"b": [1, 2]}


def test_request_binary_invalid_utf8():
    transport, _, _ = _transport(b"")
    with pytest.raises(InvalidBinaryPayload) as err:
        transport.request_binary("echo", b"\xff\xfe")
    assert "Invalid UTF-8" in err.value.reason


def test_close_and_context_manager():
    fake = _FakeProcess(b"")
    with patch("tsgoipc.transport.subprocess.Popen", return_value=fake):
        with TsgoTransport("tsgo-bin", ".") as transport:
            pass
    assert fake.stdin.was_closed
    assert fake.waited
    with pytest.raises(TransportConnectionClosed):
        transport.request("echo", "late")