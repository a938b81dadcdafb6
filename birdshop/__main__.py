import uvicorn

from .core.config import settings

uvicorn.run("birdshop.main:app", host=settings.HOST, port=settings.PORT)
