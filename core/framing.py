"""Response framing for full, partial and unsatisfiable media responses."""

from __future__ import annotations

from dataclasses import dataclass

from core.ranges import ByteInterval

ACCEPT_RANGES = "bytes"


@dataclass(frozen=True)
class ResponseFraming:
    """Status line and headers of a media response, computed before streaming."""

    status: int
    content_type: str
    content_length: int
    content_range: str
    accept_ranges: str = ACCEPT_RANGES

    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": self.content_type,
            "Accept-Ranges": self.accept_ranges,
            "Content-Length": str(self.content_length),
            "Content-Range": self.content_range,
        }


def build_full(resource_size: int, content_type: str) -> ResponseFraming:
    """Framing for a 200 response carrying the whole resource.

    An empty resource has no last byte, so its range is reported as
    ``bytes */0``.
    """
    if resource_size > 0:
        content_range = f"bytes 0-{resource_size - 1}/{resource_size}"
    else:
        content_range = f"bytes */{resource_size}"
    return ResponseFraming(
        status=200,
        content_type=content_type,
        content_length=resource_size,
        content_range=content_range,
    )


def build_partial(
    interval: ByteInterval, resource_size: int, content_type: str
) -> ResponseFraming:
    """Framing for a 206 response.

    ``Content-Range`` reports the interval exactly as given, even if fewer
    bytes end up being read. ``Content-Length`` is zero for an inverted
    interval.
    """
    return ResponseFraming(
        status=206,
        content_type=content_type,
        content_length=interval.length,
        content_range=f"bytes {interval.start}-{interval.end}/{resource_size}",
    )


def build_unsatisfiable(resource_size: int, content_type: str) -> ResponseFraming:
    """Framing for a 416 response with an empty body."""
    return ResponseFraming(
        status=416,
        content_type=content_type,
        content_length=0,
        content_range=f"bytes */{resource_size}",
    )
