"""
Sample catalog data inserted at startup.

Can also be run by hand against the configured store::

    python -m birdshop.seed [--force]
"""
from __future__ import annotations

import argparse
import asyncio
import logging
from typing import List

from .core.config import settings
from .core.logging_config import configure_logging
from .db.repository import BirdRepository, close_repository, open_repository
from .models.schemas import Bird, BirdCreate

logger = logging.getLogger(__name__)

SAMPLE_BIRDS: List[BirdCreate] = [
    BirdCreate(name="Blue Jay", description="Beautiful Blue Jay with vibrant colors",
               price=1999.99, image_path="./images/blue-jay.jpg"),
    BirdCreate(name="Owl", description="Majestic owl with keen eyesight",
               price=1499.99, image_path="./images/owl.jpg"),
    BirdCreate(name="Parrot", description="Colorful talking parrot",
               price=1299.99, image_path="./images/parrot.jpg"),
    BirdCreate(name="Parakeet", description="Colorful and playful Budgerigar",
               price=49.99, image_path="./images/Parakeet.jpg"),
    BirdCreate(name="Cockatiel", description="Sweet and gentle Cockatiel",
               price=79.99, image_path="./images/Cockatiel.jpg"),
    BirdCreate(name="Canary", description="Melodious Yellow Canary",
               price=39.99, image_path="./images/canary.jpg"),
]


async def seed_birds(repository: BirdRepository, only_if_empty: bool = True) -> List[Bird]:
    """Insert the sample birds and return what was saved.

    With ``only_if_empty`` the store is left alone when it already has rows.
    """
    if only_if_empty:
        existing = await repository.find_all()
        if existing:
            logger.info(f"Skipping seed, {len(existing)} birds already stored")
            return []

    saved = [await repository.save(bird) for bird in SAMPLE_BIRDS]
    logger.info(f"Seeded {len(saved)} sample birds")
    return saved


async def _main(force: bool) -> None:
    repository = await open_repository(settings)
    try:
        saved = await seed_birds(repository, only_if_empty=not force)
    finally:
        await close_repository(repository)
    print(f"Inserted {len(saved)} birds")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the bird catalog with sample data")
    parser.add_argument("--force", action="store_true", help="seed even if the table is not empty")
    args = parser.parse_args()

    configure_logging(settings.LOG_LEVEL)
    asyncio.run(_main(args.force))
