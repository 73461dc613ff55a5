"""Service-level tests for bird lookups and mutations, without HTTP."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DomainError, NotFoundError
from app.models import Bird
from app.schemas.bird import BirdParams
from app.services.bird import (
    create_bird,
    destroy_bird,
    find_bird,
    get_birds,
    increment_likes,
    update_bird,
)


@pytest.mark.asyncio
async def test_find_bird_returns_stored_bird(db: AsyncSession, robin: Bird) -> None:
    bird = await find_bird(db, robin.id)
    assert bird.id == robin.id
    assert bird.name == "Robin"


@pytest.mark.asyncio
async def test_find_bird_raises_not_found(db: AsyncSession) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        await find_bird(db, 42)

    assert exc_info.value.entity == "Bird"
    assert exc_info.value.identifier == 42
    assert exc_info.value.message == "Bird not found"
    assert isinstance(exc_info.value, DomainError)


@pytest.mark.asyncio
async def test_create_bird_drops_unknown_fields(db: AsyncSession) -> None:
    params = BirdParams.model_validate({"name": "Jay", "foo": "bar"})
    bird = await create_bird(db, params)

    assert bird.id is not None
    assert bird.name == "Jay"
    assert bird.likes == 0
    assert "foo" not in params.model_dump()


@pytest.mark.asyncio
async def test_update_bird_only_touches_sent_fields(db: AsyncSession, robin: Bird) -> None:
    bird = await update_bird(db, robin.id, BirdParams.model_validate({"species": "T. m."}))

    assert bird.species == "T. m."
    assert bird.name == "Robin"
    assert bird.likes == 5


@pytest.mark.asyncio
async def test_update_bird_unknown_id_raises(db: AsyncSession) -> None:
    with pytest.raises(NotFoundError):
        await update_bird(db, 42, BirdParams.model_validate({"name": "Ghost"}))

    assert await get_birds(db) == []


@pytest.mark.asyncio
async def test_increment_likes_rereads_stored_value(db: AsyncSession, robin: Bird) -> None:
    assert (await increment_likes(db, robin.id)).likes == 6
    assert (await increment_likes(db, robin.id)).likes == 7


@pytest.mark.asyncio
async def test_destroy_bird_removes_it(db: AsyncSession, robin: Bird) -> None:
    bird_id = robin.id
    await destroy_bird(db, bird_id)

    with pytest.raises(NotFoundError):
        await find_bird(db, bird_id)


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", [increment_likes, destroy_bird], ids=["like", "delete"])
async def test_id_operations_raise_not_found(db: AsyncSession, operation: object) -> None:
    with pytest.raises(NotFoundError):
        await operation(db, 42)  # type: ignore[operator]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "bird_id", [0, -1, 2**31, 2**70], ids=["zero", "negative", "int32_overflow", "huge"]
)
async def test_find_bird_out_of_range_id_raises_not_found(db: AsyncSession, bird_id: int) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        await find_bird(db, bird_id)

    assert exc_info.value.identifier == bird_id
