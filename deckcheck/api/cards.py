"""
Card database API endpoints.

Reports on and refreshes the local copy of the Scryfall card data.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from deckcheck.db.database import get_session
from deckcheck.db.operations import count_cards
from deckcheck.jobs.download_cards import sync_cards
from deckcheck.models.failure import FailureResponse
from deckcheck.services.deck_session import DeckSession, get_deck_session
from deckcheck.services.preferences import DatabasePreferences, get_total_cards, get_updated_at

router = APIRouter(prefix="/cards", tags=["cards"])


class CardStatusResponse(BaseModel):
    """Response model for card database status."""

    updated_at: str
    total_cards: int
    stored_cards: int
    loaded_cards: int


class SyncResponse(BaseModel):
    """Response model for sync operation."""

    updated_at: str
    stored_cards: int


@router.get("/status", response_model=CardStatusResponse)
async def card_status(
    session: Annotated[AsyncSession, Depends(get_session)],
    deck: Annotated[DeckSession, Depends(get_deck_session)],
) -> CardStatusResponse:
    """
    Get card database status.

    total_cards is the size of the last downloaded bulk file; stored_cards
    counts distinct printings in the local store.
    """
    store = DatabasePreferences(session)
    return CardStatusResponse(
        updated_at=await get_updated_at(store),
        total_cards=await get_total_cards(store),
        stored_cards=await count_cards(session),
        loaded_cards=deck.index_size,
    )


@router.post(
    "/sync",
    response_model=SyncResponse,
    responses={502: {"model": FailureResponse}},
)
async def sync_card_database(
    session: Annotated[AsyncSession, Depends(get_session)],
    deck: Annotated[DeckSession, Depends(get_deck_session)],
) -> SyncResponse:
    """
    Download fresh Scryfall bulk data and swap it in.

    The deck list is re-resolved against the new data, which resets
    checklist progress.
    """
    result = await sync_cards(session)
    deck.set_card_index(result.cards)
    return SyncResponse(updated_at=result.updated_at, stored_cards=result.stored)
