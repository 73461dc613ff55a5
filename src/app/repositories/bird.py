"""Bird data-access layer.

Pure query functions — no business logic, no HTTP concerns.
Each function takes a session and returns models or None. Nothing here
commits; the request-scoped session in get_db owns the transaction.
"""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Bird

# birds.id is a 32-bit INTEGER on Postgres; larger ids cannot exist.
MAX_BIRD_ID = 2**31 - 1


async def list_birds(db: AsyncSession) -> list[Bird]:
    """Return all birds ordered by id."""
    result = await db.execute(select(Bird).order_by(Bird.id))
    return list(result.scalars().all())


async def get_bird(db: AsyncSession, bird_id: int) -> Bird | None:
    """Return the bird with the given id, or None.

    Ids outside the primary-key range are never stored, so they return None
    without a query the driver would reject.

    populate_existing reloads the row even if the session already holds the
    object, so callers always see the stored values.
    """
    if not 1 <= bird_id <= MAX_BIRD_ID:
        return None
    return await db.get(Bird, bird_id, populate_existing=True)


async def insert_bird(db: AsyncSession, fields: dict[str, Any]) -> Bird:
    """Insert a bird and return it with server-generated columns loaded."""
    bird = Bird(**fields)
    db.add(bird)
    await db.flush()
    await db.refresh(bird)
    return bird


async def save_bird(db: AsyncSession, bird: Bird) -> Bird:
    """Flush pending changes on a bird and reload it."""
    await db.flush()
    await db.refresh(bird)
    return bird


async def delete_bird(db: AsyncSession, bird: Bird) -> None:
    await db.delete(bird)
    await db.flush()
