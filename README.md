# tsgoipc

A Python client for the `tsgo` API server. It starts `tsgo --api -cwd <dir>`
as a subprocess and talks to it over stdin/stdout, one MessagePack-framed
message at a time. It can also answer the server's file-system callbacks from
a virtual file system. The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

### Talking to the server

```python
from tsgoipc.client import Client, ClientOptions

with Client(ClientOptions(tsgo_path="tsgo", cwd=".")) as client:
    assert client.echo("hello") == "hello"
    config = client.request_value("parseConfigFile", {"fileName": "/tsconfig.json"})
```

`ClientOptions` has four fields:

- `tsgo_path`, which defaults to `"tsgo"`.
- `cwd`, which is passed as `-cwd` and defaults to `"."`.
- `log_file`, which is sent in the `configure` request.
- `fs`, an optional `VirtualFileSystem`.

The client runs the transport on one background thread, so several threads can
share it. Each call blocks until its own response arrives. The client offers
these calls:

- `request(method, payload)` and `request_value(method, payload)` send a JSON
  payload and return the decoded JSON response.
- `echo(message)` returns the echoed string.
- `echo_binary(data)` takes a JSON document as UTF-8 bytes and returns the
  response as JSON bytes.
- `close()` stops the worker and waits for the server process to exit. Leaving
  the `with` block does the same.

Failures raise `tsgoipc.errors.ClientError`. Its `cause` attribute holds the
underlying error:

- `ServerError` when the server rejects a request.
- `TransportConnectionClosed` when the connection ends, or when the client has
  already been closed.
- `TransportProcessStartFailed` when the process cannot be started.
- `CallbackExecutionFailed` or `UnknownCallback` when a server callback fails.

All of these are subclasses of `TransportError`.

### Serving files to the server

If `ClientOptions.fs` is set, the client registers five callbacks:
`readFile`, `fileExists`, `directoryExists`, `realpath` and
`getAccessibleEntries`. It names them in its `configure` request, so the server
reads files through your file system.

```python
from tsgoipc.client import Client, ClientOptions
from tsgoipc.memory_fs import MemoryFileSystem

fs = MemoryFileSystem.from_files({
    "/tsconfig.json": '{"include": ["src/**/*"]}',
    "/src/index.ts": "export const x = 1;\n",
})
assert fs.file_exists("/src/index.ts")
assert fs.directory_exists("/src")
assert fs.realpath("./src/../tsconfig.json") == "/tsconfig.json"

with Client(ClientOptions(fs=fs)) as client:
    client.request_value("parseConfigFile", {"fileName": "/tsconfig.json"})
```

`MemoryFileSystem` keeps everything in memory:

- `add_file`, `add_directory` and `write_file` add entries.
- `read_file` returns `None` for missing files.
- `get_accessible_entries` returns a `FileSystemEntries` with `files` and
  `directories` lists, or `None` if the directory does not exist.

`tsgoipc.real_fs.RealFileSystem(base_dir)` works against files on disk. It
resolves relative paths against `base_dir`, and `RealFileSystem.with_cwd()`
uses the current directory as that base. Its `write_file` creates any missing
parent directories. Failures other than "not found" raise `VfsOperationError`.

To provide your own file system, subclass `tsgoipc.fs_base.VirtualFileSystem`.

### Using the transport directly

`tsgoipc.transport.TsgoTransport(tsgo_path, cwd)` is the single-threaded layer
under the client. It has these methods:

- `configure(log_file, callback_names)`
- `register_callback(name, callback)`
- `request(method, payload)`
- `request_binary(method, payload)`
- `close()`

It can also be used as a context manager.

### Working with the wire format

```python
from tsgoipc.transport import MessageType, ProtocolMessage

raw = ProtocolMessage(MessageType.Request, "echo", "test").encode()
assert raw[:5] == b"\x93\xcc\x01\xc4\x04"
message = ProtocolMessage.decode(raw)
assert message.method == "echo" and message.payload == "test"
```

A message is a three-element array made of three parts:

- a `uint8` message type
- the method name as binary data
- the payload as compact JSON text in binary data

`ProtocolMessage.decode` raises `InvalidProtocolArrayLength`,
`InvalidMessageType`, `InvalidProtocolUtf8` or `IncompleteMessage` for
malformed input.

### Syntax kinds

`tsgoipc.syntax.SyntaxKind` is an `IntEnum` of the numeric syntax kinds that
the server uses. It runs from `Unknown` (0) to `Count`, and `NodeList` is
`0xFFFFFFFF`.

## What it does not do

- The package does not decode the server's binary-encoded syntax trees.
  `SyntaxKind` only lists the kind numbers.
- It has no typed wrappers for project, symbol or type responses. Those come
  back as plain JSON values.
- It provides no command-line program.