"""Health check route."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from api.deps import get_settings
from config import Settings

router = APIRouter()


@router.get("/health")
async def health(config: Annotated[Settings, Depends(get_settings)]) -> dict[str, Any]:
    """Report whether the configured media file is currently available."""
    return {
        "status": "ok",
        "media_path": str(config.media_path),
        "media_available": config.media_path.is_file(),
    }
