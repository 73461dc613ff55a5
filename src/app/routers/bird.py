"""Bird endpoints."""

from typing import Any

from fastapi import APIRouter, Response

from app.dependencies import BirdId, DB
from app.schemas.bird import BirdParams, BirdResponse
from app.schemas.error import ErrorResponse
from app.services import bird as bird_service

router = APIRouter(prefix="/birds", tags=["birds"])

NOT_FOUND: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorResponse, "description": "Bird not found"},
}


@router.get("", response_model=list[BirdResponse], status_code=200)
async def list_birds(db: DB) -> list[BirdResponse]:
    """List every stored bird."""
    birds = await bird_service.get_birds(db)
    return [BirdResponse.model_validate(bird) for bird in birds]


@router.post("", response_model=BirdResponse, status_code=201)
async def create_bird(db: DB, params: BirdParams) -> BirdResponse:
    """Create a bird from the permitted fields; anything else in the body is dropped."""
    bird = await bird_service.create_bird(db, params)
    return BirdResponse.model_validate(bird)


@router.get("/{bird_id}", response_model=BirdResponse, status_code=200, responses=NOT_FOUND)
async def show_bird(db: DB, bird_id: BirdId) -> BirdResponse:
    """Return one bird."""
    bird = await bird_service.find_bird(db, bird_id)
    return BirdResponse.model_validate(bird)


@router.patch("/{bird_id}", response_model=BirdResponse, status_code=200, responses=NOT_FOUND)
async def update_bird(db: DB, bird_id: BirdId, params: BirdParams) -> BirdResponse:
    """Partially update a bird; fields missing from the body are left as they are."""
    bird = await bird_service.update_bird(db, bird_id, params)
    return BirdResponse.model_validate(bird)


@router.patch(
    "/{bird_id}/like", response_model=BirdResponse, status_code=200, responses=NOT_FOUND
)
async def increment_likes(db: DB, bird_id: BirdId) -> BirdResponse:
    """Add one like to the stored count."""
    bird = await bird_service.increment_likes(db, bird_id)
    return BirdResponse.model_validate(bird)


@router.delete("/{bird_id}", status_code=204, response_class=Response, responses=NOT_FOUND)
async def delete_bird(db: DB, bird_id: BirdId) -> Response:
    """Delete a bird and return an empty 204."""
    await bird_service.destroy_bird(db, bird_id)
    return Response(status_code=204)
