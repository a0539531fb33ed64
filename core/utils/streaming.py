"""Utilities for streaming file content with Range support."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

import anyio

from config import DEFAULT_BUFFER_SIZE
from core.errors import ReadFailureError
from core.protocols import ByteSource
from core.ranges import ByteInterval
from core.utils.logger import log


class FileStreamer:
    """Lazy, single-pass sequence of chunks read from a byte source.

    The streamer owns the source: it is closed once the sequence is
    exhausted, fails, or is abandoned by its consumer. Nothing is read until
    the consumer asks for the next chunk, so at most ``buffer_size`` bytes
    are held per stream.

    Usage:
        streamer = FileStreamer(resource, ByteInterval(100, 199))
        for chunk in streamer:
            send(chunk)
    """

    def __init__(
        self,
        source: ByteSource,
        interval: ByteInterval | None = None,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ):
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.source = source
        self.interval = interval
        self.buffer_size = buffer_size
        self.bytes_sent = 0
        self._started = False

    def __iter__(self) -> Iterator[bytes]:
        if self._started:
            raise RuntimeError("FileStreamer can only be iterated once")
        self._started = True
        if self.interval is None:
            # A fresh source is already at offset 0
            return self._iter_interval(ByteInterval.whole(self.source.size), seek=False)
        return self._iter_interval(self.interval, seek=True)

    async def __aiter__(self) -> AsyncIterator[bytes]:
        """Yield the same chunks, doing each blocking read in a worker thread."""
        chunks = iter(self)
        try:
            while True:
                chunk = await anyio.to_thread.run_sync(next, chunks, None)
                if chunk is None:
                    break
                yield chunk
        finally:
            chunks.close()
            self.close()

    def close(self) -> None:
        self.source.close()

    def _read(self, size: int) -> bytes:
        try:
            return self.source.read(size)
        except OSError as e:
            log("Read failed mid-stream", level="ERROR", bytes_sent=self.bytes_sent, error=str(e))
            raise ReadFailureError(
                "Read failed mid-stream",
                original_error=e,
                context={"bytes_sent": self.bytes_sent},
            ) from e

    def _iter_interval(self, interval: ByteInterval, seek: bool) -> Iterator[bytes]:
        try:
            if interval.is_empty:
                return

            if seek:
                try:
                    self.source.seek(interval.start)
                except OSError as e:
                    log("Seek failed", level="ERROR", offset=interval.start, error=str(e))
                    raise ReadFailureError(
                        "Seek failed",
                        original_error=e,
                        context={"offset": interval.start},
                    ) from e

            # Bounded by the size read at open, even if the file grows meanwhile
            bytes_to_read = interval.length
            while bytes_to_read > 0:
                data = self._read(min(self.buffer_size, bytes_to_read))
                if not data:
                    break

                self.bytes_sent += len(data)
                bytes_to_read -= len(data)
                yield data
        finally:
            self.close()


def stream_file(
    source: ByteSource, buffer_size: int = DEFAULT_BUFFER_SIZE
) -> FileStreamer:
    """Stream the first ``source.size`` bytes of a freshly opened source."""
    return FileStreamer(source, None, buffer_size)


def stream_range(
    source: ByteSource,
    interval: ByteInterval,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> FileStreamer:
    """Stream exactly the bytes ``[interval.start, interval.end]`` of a source.

    Args:
        source: Seekable byte source (closed when streaming ends).
        interval: Inclusive byte interval; an inverted one yields nothing.
        buffer_size: Maximum chunk size in bytes.
    """
    return FileStreamer(source, interval, buffer_size)
