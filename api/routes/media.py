"""Media streaming route with HTTP Range support."""

from typing import Annotated

import anyio
from fastapi import Depends, Request
from fastapi.responses import Response, StreamingResponse

from api.deps import get_settings
from config import Settings
from core.errors import RangeNotSatisfiableError
from core.framing import build_full, build_partial, build_unsatisfiable
from core.ranges import ensure_satisfiable, parse_range
from core.resource import MediaResource
from core.utils.logger import logger
from core.utils.streaming import stream_file, stream_range


async def stream_media(
    request: Request,
    config: Annotated[Settings, Depends(get_settings)],
) -> Response:
    """Streams the configured media file with HTTP Range support for seeking.

    Args:
        request: The incoming HTTP request, possibly carrying a Range header.
        config: Settings naming the media file and chunk size.

    Returns:
        A 200 StreamingResponse for the whole file, a 206 for a byte range,
        or an empty 416 response for a range outside the file.

    Raises:
        ResourceUnavailableError: If the file cannot be opened or stat'ed.
    """
    resource = await anyio.to_thread.run_sync(MediaResource.open, config.media_path)

    range_header = request.headers.get("range")
    if range_header is None:
        framing = build_full(resource.size, resource.content_type)
        body = stream_file(resource, config.buffer_size)
        logger.info(f"Serving {resource.path.name} in full ({resource.size} bytes)")
    else:
        requested = parse_range(range_header, resource.size)
        try:
            interval = ensure_satisfiable(requested, resource.size)
        except RangeNotSatisfiableError as e:
            resource.close()
            logger.warning(f"{e} (header: {range_header!r})")
            framing = build_unsatisfiable(e.resource_size, resource.content_type)
            return Response(status_code=framing.status, headers=framing.headers())

        framing = build_partial(interval, resource.size, resource.content_type)
        body = stream_range(resource, interval, config.buffer_size)
        logger.info(f"Serving {resource.path.name} {framing.content_range}")

    return StreamingResponse(
        body,
        status_code=framing.status,
        headers=framing.headers(),
    )
