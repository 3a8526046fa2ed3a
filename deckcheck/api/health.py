"""
Health check endpoints.

Liveness, plus a readiness probe that reports database connectivity and
whether a card index has been loaded.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from deckcheck.db.database import get_session
from deckcheck.services.deck_session import DeckSession, get_deck_session

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    database: str | None = None
    card_index: int | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness probe. Does not check dependencies."""
    return HealthResponse(status="healthy")


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(
    response: Response,
    session: Annotated[AsyncSession, Depends(get_session)],
    deck: Annotated[DeckSession, Depends(get_deck_session)],
) -> HealthResponse:
    """
    Readiness probe.

    Returns 503 if the database is unavailable. An empty card index is
    still ready: every deck line resolves, just to Unfound rows.
    """
    try:
        await session.execute(text("SELECT 1"))
    except Exception:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(status="not ready", database="disconnected")

    return HealthResponse(status="ready", database="connected", card_index=deck.index_size)
