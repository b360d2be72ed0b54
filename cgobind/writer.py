"""Output stage for generated sources: drops blank lines on the way to disk."""

import io
import re
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Optional

_NEWLINE_RUN = re.compile(rb"\n{2,}")


class BlankLineStrippingWriter:
    """Write-through filter that removes empty lines from a byte stream.

    Newlines seen at the start of a line are dropped, which removes leading
    blank lines and collapses every run of newlines to one. The only state
    carried between writes is whether the last emitted byte ended a line, so
    the output does not depend on how the input is chunked. ``close``
    terminates a trailing partial line once any content has been written.

    Short writes by the sink are retried until the chunk is taken. A failure
    of the sink (or a sink that stops accepting data) is propagated as is and
    leaves the writer unusable: any later ``write`` or ``close`` raises the
    same exception again.

    Not safe for concurrent writers.
    """

    def __init__(self, sink: BinaryIO, *, close_sink: bool = False):
        self.sink = sink
        self.close_sink = close_sink
        self.at_line_start = True
        self.seen_content = False
        self.closed = False
        self._error: Optional[Exception] = None

    def __enter__(self) -> "BlankLineStrippingWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
        else:
            self._release()

    def writable(self) -> bool:
        return True

    def write(self, data: bytes) -> int:
        if isinstance(data, str):
            raise TypeError("write() argument must be a bytes-like object, not str")
        self._check_writable()
        data = bytes(data)
        out = data.lstrip(b"\n") if self.at_line_start else data
        out = _NEWLINE_RUN.sub(b"\n", out)
        if out:
            self._emit(out)
            self.at_line_start = out.endswith(b"\n")
            self.seen_content = True
        return len(data)

    def flush(self) -> None:
        self._check_writable()
        flush = getattr(self.sink, "flush", None)
        if flush is not None:
            flush()

    def close(self) -> None:
        if self.closed:
            return
        try:
            if self._error is not None:
                raise self._error
            if self.seen_content and not self.at_line_start:
                self._emit(b"\n")
                self.at_line_start = True
            flush = getattr(self.sink, "flush", None)
            if flush is not None:
                flush()
        finally:
            self._release()

    def _check_writable(self) -> None:
        if self._error is not None:
            raise self._error
        if self.closed:
            raise ValueError("I/O operation on closed writer")

    def _emit(self, chunk: bytes) -> None:
        view = memoryview(chunk)
        try:
            while view:
                written = self.sink.write(view)
                # Buffered sinks return None or take everything at once.
                if written is None:
                    break
                if written <= 0:
                    raise OSError(f"sink accepted no data, {len(view)} bytes left unwritten")
                view = view[written:]
        except Exception as exc:
            self._error = exc
            raise

    def _release(self) -> None:
        if self.closed:
            return
        self.closed = True
        if self.close_sink:
            self.sink.close()


def strip_blank_lines(data: bytes) -> bytes:
    buffer = io.BytesIO()
    writer = BlankLineStrippingWriter(buffer)
    writer.write(data)
    writer.close()
    return buffer.getvalue()


@contextmanager
def open_output(path) -> Iterator[BlankLineStrippingWriter]:
    """Open ``path`` for writing generated code through a stripping writer."""
    with open(path, "wb") as f:
        with BlankLineStrippingWriter(f) as writer:
            yield writer
