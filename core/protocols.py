"""Core protocols for the streaming layer.

The streamer only needs something it can seek, read and close, so tests
can substitute in-memory or failing readers for real file handles.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteSource(Protocol):
    """A seekable binary source with a known total length."""

    size: int

    def seek(self, offset: int) -> int:
        """Move the read cursor to an absolute byte offset."""
        ...

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes; an empty result means end of data."""
        ...

    def close(self) -> None:
        """Release the underlying handle. Safe to call more than once."""
        ...
