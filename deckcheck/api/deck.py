"""
Deck API endpoints.

Provides the deck view: resolved cards grouped by the chosen sort key,
with checklist progress per card and per group.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from deckcheck.db.database import get_session
from deckcheck.models.card import DeckCard
from deckcheck.models.failure import FailureResponse
from deckcheck.services.card_grouper import SortKey
from deckcheck.services.deck_session import DeckSession, get_deck_session
from deckcheck.services.preferences import DatabasePreferences, save_deck, save_sort_key

router = APIRouter(prefix="/deck", tags=["deck"])


class DeckCardResponse(BaseModel):
    """One resolved card row with its acquisition flags."""

    id: str
    name: str
    set: str
    rarity: str
    type: str
    colors: list[str] = Field(default_factory=list)
    amount: int
    flags: list[bool] = Field(default_factory=list)


class GroupResponse(BaseModel):
    """One group of the deck view, most-needed cards first."""

    key: str
    complete: bool
    cards: list[DeckCardResponse]


class DeckViewResponse(BaseModel):
    """Response model for the full deck view."""

    deck_text: str
    sort: SortKey
    groups: list[GroupResponse]
    unfound: list[DeckCardResponse]
    total_rows: int
    unique_cards: int
    incomplete_cards: int


class DeckTextRequest(BaseModel):
    """Request model for replacing the deck list."""

    text: str = Field(
        ...,
        description="Pasted deck list, one '<quantity> <card name>' per line",
        examples=["4 Lightning Bolt (M10) 146\n2x Plains"],
    )


class SortRequest(BaseModel):
    """Request model for changing the grouping."""

    sort: SortKey


class ToggleRequest(BaseModel):
    """Request model for flipping one acquisition flag."""

    name: str
    index: int = Field(..., description="Zero-based copy index")


def _card_response(card: DeckCard, flags: tuple[bool, ...]) -> DeckCardResponse:
    return DeckCardResponse(
        id=card.id,
        name=card.name,
        set=card.set,
        rarity=card.rarity,
        type=card.type,
        colors=list(card.colors),
        amount=card.amount,
        flags=list(flags),
    )


def build_view_response(deck: DeckSession) -> DeckViewResponse:
    """Render the session's current state for the client."""
    checklist = deck.checklist.checklist

    groups = [
        GroupResponse(
            key=key,
            complete=deck.is_group_complete(key),
            cards=[
                _card_response(card, checklist.flags.get(card.name, ()))
                for card in deck.ordered_cards(key)
            ],
        )
        for key in deck.grouping.ordered_keys
    ]

    return DeckViewResponse(
        deck_text=deck.deck_text,
        sort=deck.sort_key,
        groups=groups,
        unfound=[_card_response(card, checklist.flags.get(card.name, ())) for card in deck.unfound],
        total_rows=len(deck.cards),
        unique_cards=checklist.unique_card_count,
        incomplete_cards=checklist.incomplete_count,
    )


@router.get("", response_model=DeckViewResponse)
async def get_deck(
    deck: Annotated[DeckSession, Depends(get_deck_session)],
) -> DeckViewResponse:
    """Get the current deck view."""
    return build_view_response(deck)


@router.put("", response_model=DeckViewResponse)
async def update_deck(
    request: DeckTextRequest,
    deck: Annotated[DeckSession, Depends(get_deck_session)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> DeckViewResponse:
    """
    Replace the deck list.

    The list is saved for the next startup and the checklist starts over.
    """
    await save_deck(DatabasePreferences(session), request.text)
    deck.set_deck_text(request.text)
    return build_view_response(deck)


@router.put("/sort", response_model=DeckViewResponse)
async def update_sort(
    request: SortRequest,
    deck: Annotated[DeckSession, Depends(get_deck_session)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> DeckViewResponse:
    """Regroup the deck view. Checklist progress is kept."""
    await save_sort_key(DatabasePreferences(session), request.sort)
    deck.set_sort_key(request.sort)
    return build_view_response(deck)


@router.post(
    "/checklist/toggle",
    response_model=DeckViewResponse,
    responses={400: {"model": FailureResponse}, 404: {"model": FailureResponse}},
)
async def toggle_card(
    request: ToggleRequest,
    deck: Annotated[DeckSession, Depends(get_deck_session)],
) -> DeckViewResponse:
    """
    Flip one copy of a card between needed and acquired.

    Returns 404 for an unknown card and 400 for an out-of-range copy index.
    """
    deck.toggle(request.name, request.index)
    return build_view_response(deck)
