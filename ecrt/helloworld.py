"""Print a greeting to standard output."""

from __future__ import annotations

from typing import Sequence

from ecrt.error import EcrError
from ecrt.fd import stdout_stream
from ecrt.formatted import stream_printf


def main(argv: Sequence[str] | None = None) -> int:
    """Write ``Hello World!`` to stdout; return 1 if that fails."""
    try:
        stream_printf(stdout_stream(), "Hello World!\n")
    except EcrError:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())