"""FastAPI dependencies."""

from fastapi import Request

from .repositories import Storage


def get_storage(request: Request) -> Storage:
    """Storage instance attached to the application at startup."""
    return request.app.state.storage
