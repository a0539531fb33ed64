"""API dependency injection components."""

from fastapi import Request

from config import Settings


def get_settings(request: Request) -> Settings:
    """Retrieve the settings the application was created with."""
    return request.app.state.settings
