# ecrt

A small runtime library built around explicit status codes and byte streams
that you can plug in. Every failure raises one exception type,
`ecrt.error.EcrError`. The exception carries a `Status` code.

## Modules

- `ecrt.error`
  - `Status` is an `IntEnum` of the codes `SUCCESS`, `UNKNOWN`, `SYSTEM`,
    `NOT_SUPPORTED`, `INVALID_ARGUMENT`, `TYPE_OVERFLOW`, `IO`, `EOF` and
    `FULL_BUFFER`.
  - `EcrError(status, errnum=0)` keeps `status` and `errnum`, and its message
    comes from `status_string()`.
  - `status_string(status, errnum=0)` returns a short description of a status.
    For `SYSTEM`, it describes the system error number instead.
  - `system_error(exc)` turns an `OSError` into an `EcrError`. The errors
    `EINVAL`, `ENOTSUP`, `EIO`, `ENOBUFS` and `EOVERFLOW` map to their own
    statuses. Every other error becomes `SYSTEM`.
  - `require_version(version, minimum)` raises `NOT_SUPPORTED` when `version` is
    below `minimum`.
- `ecrt.allocator`
  - `Allocator` is an abstract class with `allocate(size)` and `free(mem)`.
  - `StandardAllocator` hands out `bytearray` blocks. It raises
    `INVALID_ARGUMENT` for a negative size.
- `ecrt.buffer`
  - `Buffer` is a dataclass with the fields `memory`, `capacity`, `position` and
    `length`. The rule `0 <= position <= length <= capacity` must hold.
  - `Buffer.allocate(allocator, capacity)` creates an empty buffer.
  - `Buffer.wrap(memory)` creates a buffer that spans existing memory.
  - `free(allocator)` releases the memory and resets the buffer.
  - The properties `remaining` and `pending`, and the method `consumed()`, give
    views of the data.
- `ecrt.stream`
  - `Stream` is the base class for streams. It offers:
    - single reads and writes: `readbuf`, `read`, `writebuf`, `write`;
    - "full" reads and writes that loop until the whole buffer is done:
      `readbuf_full`, `read_full`, `writebuf_full`, `write_full`;
    - `close()`;
    - `getpos()`;
    - `setpos(position, direction)`, which takes a `StreamDirection`
      (`SKIP`, `REWIND`, `START` or `END`).
  - Subclasses implement the primitives `_readbuf`, `_writebuf`, `_close`,
    `_getpos` and `_setpos`. A primitive that is not implemented raises
    `NOT_SUPPORTED`.
  - A full read or write of an empty buffer raises `FULL_BUFFER`.
  - When `read`, `write`, `read_full` or `write_full` fails, the raised error has
    a `transferred` attribute. It holds the number of bytes moved before the
    failure.
  - Streams are context managers and close on exit.
- `ecrt.fd`
  - `FdStream(fd)` is a stream over a file descriptor, used as is. Its
    `fileno()` method returns that descriptor.
  - `from_fd(fd)` duplicates the descriptor first.
  - `stdin_stream()`, `stdout_stream()` and `stderr_stream()` return shared
    streams over descriptors 0, 1 and 2.
  - Reading at end of input raises `EOF`.
- `ecrt.file`
  - `open_file(pathname, mode)` opens a file as an `FdStream`. The `mode` uses
    the `FileMode` flags `READ_ONLY`, `WRITE_ONLY`, `READ_WRITE`, `APPEND` and
    `CREATE`.
  - A missing access mode raises `INVALID_ARGUMENT`, and so does `APPEND`
    without write access.
  - Files created with `CREATE` get permissions `0600`.
- `ecrt.formatted`
  - `stream_printf(stream, format, *args)` applies `%`-formatting and writes the
    whole result to the stream. It returns the number of bytes written.
  - `stream_vprintf(stream, format, args)` does the same, taking the arguments
    as a sequence.
  - Text is encoded as UTF-8.
  - If the format and its arguments don't match, the call raises
    `INVALID_ARGUMENT`.

## Installation

```
pip install .
```

## Example

```python
from ecrt.file import FileMode, open_file
from ecrt.formatted import stream_printf

with open_file("out.txt", FileMode.WRITE_ONLY | FileMode.CREATE) as stream:
    stream_printf(stream, "%s has %d items\n", "list", 3)
```

## Commands

`ecrt-helloworld` prints `Hello World!` to standard output. It exits with 1 if
the write fails.

`ecrt-echo` does one read of up to 8192 bytes from standard input and writes
those bytes to standard output:

```
echo hi | ecrt-echo
```

`ecrt-echo` exits with 0 on success. It exits with 1 when the read fails, which
includes empty input, and with 2 when the write fails.

## Limitations

- Streams are unbuffered, and every call goes straight to the descriptor.
- There is no text-mode or line-oriented reading.
- `ecrt-echo` copies only the first chunk of its input. It does not copy the
  whole stream.

## Tests

```
pip install .[test]
pytest
```