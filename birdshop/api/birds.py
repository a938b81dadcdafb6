from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from ..core.dependencies import get_repository
from ..db.repository import BirdRepository
from ..models.schemas import Bird, BirdCreate

router = APIRouter(prefix="/birds", tags=["birds"])


@router.get("", response_model=List[Bird])
async def list_birds(repository: BirdRepository = Depends(get_repository)) -> List[Bird]:
    """List every bird in the catalog."""
    return await repository.find_all()


@router.post("", response_model=Bird, status_code=status.HTTP_201_CREATED)
async def create_bird(
    payload: BirdCreate,
    repository: BirdRepository = Depends(get_repository),
) -> Bird:
    """Add a bird. Any id in the payload is discarded; storage assigns a new one."""
    return await repository.save(payload.model_copy(update={"id": None}))
