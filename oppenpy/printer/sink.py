"""Output sinks."""

import io
from typing import Protocol, runtime_checkable

from oppenpy.errors import InvalidConfigurationError


@runtime_checkable
class OutputSink(Protocol):
    """Append-only text output, such as `io.StringIO`."""

    def write(self, text: str, /) -> object: ...

    def getvalue(self) -> str: ...


@runtime_checkable
class ErasableSink(OutputSink, Protocol):
    """Output that can take back the last characters written."""

    def erase(self, count: int, /) -> None: ...


class StringSink:
    """In-memory sink supporting bounded backward erasure."""

    def __init__(self) -> None:
        self._chunks: list[str] = []

    def write(self, text: str, /) -> None:
        if text:
            self._chunks.append(text)

    def erase(self, count: int, /) -> None:
        """Remove the last `count` characters (fewer if less were written)."""
        while count > 0 and self._chunks:
            last = self._chunks[-1]
            if len(last) <= count:
                self._chunks.pop()
                count -= len(last)
            else:
                self._chunks[-1] = last[:-count]
                count = 0

    def getvalue(self) -> str:
        return "".join(self._chunks)


class TextStreamSink:
    """Erasable view over an `io.StringIO`, whose positions count characters."""

    def __init__(self, stream: io.StringIO) -> None:
        self.stream = stream

    def write(self, text: str, /) -> None:
        self.stream.write(text)

    def erase(self, count: int, /) -> None:
        self.stream.seek(max(self.stream.tell() - count, 0))
        self.stream.truncate()

    def getvalue(self) -> str:
        return self.stream.getvalue()


def as_erasable(sink: OutputSink) -> ErasableSink:
    """Return `sink` itself when it can erase, a `TextStreamSink` over an `io.StringIO`."""
    if isinstance(sink, ErasableSink):
        return sink
    if isinstance(sink, io.StringIO):
        return TextStreamSink(sink)
    raise InvalidConfigurationError(
        f"trim_trailing_whitespaces requires a sink supporting erase(count), got {sink!r}"
    )
