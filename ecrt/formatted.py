"""printf-style output to streams."""

from __future__ import annotations

from typing import Any, Sequence

from ecrt.error import EcrError, Status
from ecrt.stream import Stream


def _render(format: str | bytes, args: Sequence[Any]) -> bytes:
    try:
        text = format % tuple(args)
    except (TypeError, ValueError, KeyError) as exc:
        raise EcrError(Status.INVALID_ARGUMENT) from exc
    if isinstance(text, str):
        return text.encode("utf-8")
    return bytes(text)


def stream_vprintf(stream: Stream, format: str | bytes, args: Sequence[Any]) -> int:
    """Format ``args`` with ``format`` and write the whole result to ``stream``.

    Text is encoded as UTF-8.  Returns the number of bytes written.  A
    format that does not match its arguments raises ``INVALID_ARGUMENT``;
    empty output raises ``FULL_BUFFER``, as any empty full write does.
    """
    return stream.write_full(_render(format, args))


def stream_printf(stream: Stream, format: str | bytes, *args: Any) -> int:
    """Like :func:`stream_vprintf`, taking the arguments positionally."""
    return stream_vprintf(stream, format, args)