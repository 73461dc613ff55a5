"""Bird business logic.

Every operation that takes an id resolves it through find_bird, which
raises NotFoundError for unknown ids. Nothing in this module checks for
a missing bird itself; the exception handler in main.py answers for all
of them.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import NotFoundError
from app.logging import get_logger
from app.models import Bird
from app.repositories.bird import delete_bird, get_bird, insert_bird, list_birds, save_bird
from app.schemas.bird import BirdParams

logger = get_logger(__name__)


async def find_bird(db: AsyncSession, bird_id: int) -> Bird:
    """Return the stored bird with this id or raise NotFoundError."""
    bird = await get_bird(db, bird_id)
    if bird is None:
        raise NotFoundError("Bird", bird_id)
    return bird


async def get_birds(db: AsyncSession) -> list[Bird]:
    return await list_birds(db)


async def create_bird(db: AsyncSession, params: BirdParams) -> Bird:
    """Create a bird from the permitted fields; unsent fields take their defaults."""
    bird = await insert_bird(db, params.model_dump())
    logger.info("bird_created", bird_id=bird.id)
    return bird


async def update_bird(db: AsyncSession, bird_id: int, params: BirdParams) -> Bird:
    """Apply only the fields the client sent.

    The lookup runs first, so an unknown id fails before anything is written.
    """
    bird = await find_bird(db, bird_id)
    changes = params.model_dump(exclude_unset=True)
    for field, value in changes.items():
        setattr(bird, field, value)
    bird = await save_bird(db, bird)
    logger.info("bird_updated", bird_id=bird.id, fields=sorted(changes))
    return bird


async def increment_likes(db: AsyncSession, bird_id: int) -> Bird:
    """Add one to the stored like count.

    Read-modify-write: concurrent increments are only safe if the database
    serializes writes to the row.
    """
    bird = await find_bird(db, bird_id)
    bird.likes = bird.likes + 1
    bird = await save_bird(db, bird)
    logger.info("bird_liked", bird_id=bird.id, likes=bird.likes)
    return bird


async def destroy_bird(db: AsyncSession, bird_id: int) -> None:
    bird = await find_bird(db, bird_id)
    await delete_bird(db, bird)
    logger.info("bird_deleted", bird_id=bird_id)
