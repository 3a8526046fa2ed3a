"""
Database CRUD operations.

Provides async functions for the stored card index and preferences.
"""

from collections.abc import Iterable

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from deckcheck.models.card import Card
from deckcheck.models.db import CardDB, PreferenceDB

# --- Card Operations ---


async def replace_cards(session: AsyncSession, cards: Iterable[Card]) -> int:
    """
    Replace the stored card index with new card data.

    Deletes every existing printing, then inserts the new ones in order.
    Printings with a duplicate id keep the first occurrence.

    Returns the number of stored printings.
    """
    await session.execute(delete(CardDB))

    seen: set[str] = set()
    for card in cards:
        if card.id in seen:
            continue
        seen.add(card.id)
        session.add(
            CardDB(
                id=card.id,
                name=card.name,
                set_name=card.set,
                rarity=card.rarity,
                type=card.type,
                colors=list(card.colors),
                position=len(seen),
            )
        )

    await session.flush()
    return len(seen)


def card_to_model(db_card: CardDB) -> Card:
    """Convert a database card to a domain model."""
    return Card(
        id=db_card.id,
        colors=tuple(db_card.colors or ()),
        name=db_card.name,
        set=db_card.set_name,
        rarity=db_card.rarity,
        type=db_card.type,
    )


async def get_all_cards(session: AsyncSession) -> list[Card]:
    """Get every stored printing in the order it was synced."""
    result = await session.execute(select(CardDB).order_by(CardDB.position))
    return [card_to_model(c) for c in result.scalars().all()]


async def count_cards(session: AsyncSession) -> int:
    """Number of stored printings."""
    result = await session.execute(select(func.count()).select_from(CardDB))
    return int(result.scalar_one())


# --- Preference Operations ---


async def get_preference(session: AsyncSession, key: str) -> str | None:
    """Get a stored preference value, or None if it was never set."""
    result = await session.execute(select(PreferenceDB).where(PreferenceDB.key == key))
    preference = result.scalar_one_or_none()
    return preference.value if preference else None


async def set_preference(session: AsyncSession, key: str, value: str) -> PreferenceDB:
    """Insert or update a preference value."""
    result = await session.execute(select(PreferenceDB).where(PreferenceDB.key == key))
    preference = result.scalar_one_or_none()

    if preference:
        preference.value = value
    else:
        preference = PreferenceDB(key=key, value=value)
        session.add(preference)

    await session.flush()
    return preference
