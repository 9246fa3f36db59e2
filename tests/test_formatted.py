import pytest

from ecrt.error import EcrError, Status
from ecrt.formatted import stream_printf, stream_vprintf
from ecrt.stream import Stream


class _Sink(Stream):
    """Collects written bytes, accepting at most ``chunk`` bytes per call."""

    def __init__(self, chunk=3):
        self.chunk = chunk
        self.data = bytearray()
        self.calls = 0

    def _writebuf(self, buffer):
        self.calls += 1
        piece = bytes(buffer.pending[: self.chunk])
        self.data += piece
        buffer.position += len(piece)


def test_plain_text_is_written_whole():
    sink = _Sink()
    assert stream_printf(sink, "Hello World!\n") == len(b"Hello World!\n")
    assert bytes(sink.data) == b"Hello World!\n"
    assert sink.calls > 1


def test_formats_integers_and_strings():
    sink = _Sink()
    stream_printf(sink, "%s=%d", "n", 42)
    assert bytes(sink.data) == b"n=42"


def test_percent_escape():
    sink = _Sink()
    stream_printf(sink, "100%%")
    assert bytes(sink.data) == b"100%"


def test_vprintf_matches_printf():
    a, b = _Sink(), _Sink(chunk=1)
    stream_printf(a, "%05.1f|%-4s|%x", 3.14159, "ab", 255)
    stream_vprintf(b, "%05.1f|%-4s|%x", [3.14159, "ab", 255])
    assert a.data == b.data
    assert len(a.data) > 0


def test_text_is_utf8():
    sink = _Sink()
    count = stream_printf(sink, "%s", "é")
    assert bytes(sink.data) == "é".encode("utf-8")
    assert count == 2


def test_bytes_format():
    sink = _Sink()
    stream_printf(sink, b"%s-%d", b"x", 7)
    assert bytes(sink.data) == b"x-7"


def test_empty_output_reports_full_buffer():
    sink = _Sink()
    with pytest.raises(EcrError) as info:
        stream_printf(sink, "%s", "")
    assert info.value.status == Status.FULL_BUFFER
    assert sink.calls == 0


@pytest.mark.parametrize(
    "fmt, args",
    [("%d", ("x",)), ("%s %s", ("only",)), ("%s", ("a", "b"))],
)
def test_mismatched_format_is_invalid(fmt, args):
    sink = _Sink()
    with pytest.raises(EcrError) as info:
        stream_vprintf(sink, fmt, args)
    assert info.value.status == Status.INVALID_ARGUMENT
    assert sink.data == bytearray()


def test_stream_error_propagates():
    class _Closed(Stream):
        pass

    with pytest.raises(EcrError) as info:
        stream_printf(_Closed(), "text")
    assert info.value.status == Status.NOT_SUPPORTED