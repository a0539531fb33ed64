"""Per-request media resource: one open file handle with a known size."""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO

from core.errors import ResourceUnavailableError
from core.utils.logger import get_logger
from core.utils.media import resolve_content_type

logger = get_logger(__name__)


class MediaResource:
    """An open, seekable media file owned by a single request.

    Usage:
        resource = MediaResource.open(path)
        try:
            resource.seek(100)
            data = resource.read(8192)
        finally:
            resource.close()

    Each request opens its own instance; handles and cursors are never shared.
    """

    def __init__(self, path: Path, handle: BinaryIO, size: int):
        self.path = path
        self.size = size
        self.content_type = resolve_content_type(path.name)
        self._handle = handle

    @classmethod
    def open(cls, path: str | Path) -> MediaResource:
        """Open ``path`` for reading and stat it.

        Raises:
            ResourceUnavailableError: If the file cannot be opened or its
                size cannot be read.
        """
        path = Path(path)
        try:
            handle = path.open("rb")
        except OSError as e:
            raise ResourceUnavailableError(
                f"Cannot open media file: {path}",
                original_error=e,
                context={"path": str(path), "errno": e.errno},
            ) from e

        try:
            size = os.fstat(handle.fileno()).st_size
        except OSError as e:
            handle.close()
            raise ResourceUnavailableError(
                f"Cannot read size of media file: {path}",
                original_error=e,
                context={"path": str(path), "errno": e.errno},
            ) from e

        logger.debug(f"Opened {path} ({size} bytes)")
        return cls(path, handle, size)

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def seek(self, offset: int) -> int:
        return self._handle.seek(offset)

    def read(self, size: int) -> bytes:
        return self._handle.read(size)

    def close(self) -> None:
        if not self._handle.closed:
            self._handle.close()
            logger.debug(f"Closed {self.path}")

    def __enter__(self) -> MediaResource:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
