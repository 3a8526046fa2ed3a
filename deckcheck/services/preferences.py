"""
User preferences.

A plain key-value store (get/set of strings) with typed accessors for the
keys the application shell restores on startup.
"""

import logging
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from deckcheck.db.operations import get_preference, set_preference
from deckcheck.services.card_grouper import SortKey

logger = logging.getLogger(__name__)

PREVIOUS_DECK = "previous-deck"
SORT = "sort"
SHOW_DECK = "show-deck"
HIDE_COMPLETE = "hide-complete"
UPDATED_AT = "updated-at"
TOTAL_CARDS = "total-cards"


class PreferenceStore(Protocol):
    """Key-value preferences backend."""

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...


class DatabasePreferences:
    """Preferences stored in the preferences table."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, key: str) -> str | None:
        return await get_preference(self._session, key)

    async def set(self, key: str, value: str) -> None:
        await set_preference(self._session, key, value)


class InMemoryPreferences:
    """Preferences kept in a dict. Lost when the process exits."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values = dict(values or {})

    async def get(self, key: str) -> str | None:
        return self._values.get(key)

    async def set(self, key: str, value: str) -> None:
        self._values[key] = value


# Toggles are stored as "1"/"0"


def _encode_flag(value: bool) -> str:
    return "1" if value else "0"


def _decode_flag(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    try:
        return bool(int(value))
    except ValueError:
        return default


async def get_previous_deck(store: PreferenceStore) -> str:
    return await store.get(PREVIOUS_DECK) or ""


async def save_deck(store: PreferenceStore, deck_text: str) -> None:
    await store.set(PREVIOUS_DECK, deck_text)


async def get_sort_key(store: PreferenceStore) -> SortKey:
    """Stored sort key; unknown or missing values fall back to Set."""
    value = await store.get(SORT)
    if value is None:
        return SortKey.SET
    try:
        return SortKey(value)
    except ValueError:
        logger.warning("Ignoring unknown stored sort key %r", value)
        return SortKey.SET


async def save_sort_key(store: PreferenceStore, sort_key: SortKey) -> None:
    await store.set(SORT, sort_key.value)


async def get_show_deck(store: PreferenceStore) -> bool:
    return _decode_flag(await store.get(SHOW_DECK), default=True)


async def save_show_deck(store: PreferenceStore, value: bool) -> None:
    await store.set(SHOW_DECK, _encode_flag(value))


async def get_hide_complete(store: PreferenceStore) -> bool:
    return _decode_flag(await store.get(HIDE_COMPLETE), default=True)


async def save_hide_complete(store: PreferenceStore, value: bool) -> None:
    await store.set(HIDE_COMPLETE, _encode_flag(value))


async def get_updated_at(store: PreferenceStore) -> str:
    """When the synced bulk data was published by Scryfall ("" if never synced)."""
    return await store.get(UPDATED_AT) or ""


async def get_total_cards(store: PreferenceStore) -> int:
    value = await store.get(TOTAL_CARDS)
    if value is None:
        return 0
    try:
        return int(value)
    except ValueError:
        return 0


async def save_sync_metadata(store: PreferenceStore, updated_at: str, total_cards: int) -> None:
    await store.set(UPDATED_AT, updated_at)
    await store.set(TOTAL_CARDS, str(total_cards))
