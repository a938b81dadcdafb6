from __future__ import annotations

from fastapi import Request

from ..db.repository import BirdRepository


def get_repository(request: Request) -> BirdRepository:
    """Repository built for this app instance at startup."""
    return request.app.state.repository
