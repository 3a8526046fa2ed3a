"""
Preferences API endpoints.

Display toggles the client restores between visits.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from deckcheck.db.database import get_session
from deckcheck.services.deck_session import DeckSession, get_deck_session
from deckcheck.services.preferences import (
    DatabasePreferences,
    get_hide_complete,
    get_show_deck,
    save_hide_complete,
    save_show_deck,
)

router = APIRouter(prefix="/preferences", tags=["preferences"])


class PreferencesResponse(BaseModel):
    """Response model for display preferences."""

    show_deck: bool
    hide_complete: bool
    deck_visible: bool


class PreferencesUpdateRequest(BaseModel):
    """Request model for changing display preferences. Omitted fields are unchanged."""

    show_deck: bool | None = None
    hide_complete: bool | None = None


async def _current(store: DatabasePreferences, deck: DeckSession) -> PreferencesResponse:
    show_deck = await get_show_deck(store)
    return PreferencesResponse(
        show_deck=show_deck,
        hide_complete=await get_hide_complete(store),
        # The deck box stays open until there is a deck to hide
        deck_visible=show_deck or not deck.deck_text,
    )


@router.get("", response_model=PreferencesResponse)
async def get_preferences(
    session: Annotated[AsyncSession, Depends(get_session)],
    deck: Annotated[DeckSession, Depends(get_deck_session)],
) -> PreferencesResponse:
    """Get display preferences."""
    return await _current(DatabasePreferences(session), deck)


@router.patch("", response_model=PreferencesResponse)
async def update_preferences(
    request: PreferencesUpdateRequest,
    session: Annotated[AsyncSession, Depends(get_session)],
    deck: Annotated[DeckSession, Depends(get_deck_session)],
) -> PreferencesResponse:
    """Update display preferences."""
    store = DatabasePreferences(session)
    if request.show_deck is not None:
        await save_show_deck(store, request.show_deck)
    if request.hide_complete is not None:
        await save_hide_complete(store, request.hide_complete)
    return await _current(store, deck)
