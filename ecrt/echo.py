"""Copy one read of standard input to standard output."""

from __future__ import annotations

from typing import Sequence

from ecrt.error import EcrError
from ecrt.fd import stdin_stream, stdout_stream

_BUFFER_SIZE = 8192


def main(argv: Sequence[str] | None = None) -> int:
    """Echo up to 8192 bytes from one read of stdin.

    Returns 1 if reading fails (including end of input), 2 if writing fails.
    """
    memory = bytearray(_BUFFER_SIZE)
    try:
        length = stdin_stream().read(memory)
    except EcrError:
        return 1
    try:
        stdout_stream().write_full(memoryview(memory)[:length])
    except EcrError:
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())