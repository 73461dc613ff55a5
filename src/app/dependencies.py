"""Shared FastAPI dependencies and parameter types.

Kept out of main.py so routers can import them without a circular import.
"""

from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db

DB = Annotated[AsyncSession, Depends(get_db)]

# Taken from the path as-is; existence is checked by the service lookup.
BirdId = Annotated[int, Path(description="Bird id")]
