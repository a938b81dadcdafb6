from fastapi import APIRouter

from .birds import router as birds_router

api_router = APIRouter()

api_router.include_router(birds_router)
