import pytest

from deckcheck.services.card_grouper import SortKey
from deckcheck.services.preferences import (
    HIDE_COMPLETE,
    SORT,
    TOTAL_CARDS,
    InMemoryPreferences,
    get_hide_complete,
    get_previous_deck,
    get_show_deck,
    get_sort_key,
    get_total_cards,
    get_updated_at,
    save_deck,
    save_hide_complete,
    save_show_deck,
    save_sort_key,
    save_sync_metadata,
)


@pytest.fixture
def store() -> InMemoryPreferences:
    return InMemoryPreferences()


class TestDefaults:
    async def test_defaults_when_unset(self, store: InMemoryPreferences) -> None:
        assert await get_previous_deck(store) == ""
        assert await get_sort_key(store) is SortKey.SET
        assert await get_show_deck(store) is True
        assert await get_hide_complete(store) is True
        assert await get_updated_at(store) == ""
        assert await get_total_cards(store) == 0

    async def test_unknown_sort_falls_back(self) -> None:
        store = InMemoryPreferences({SORT: "Price"})

        assert await get_sort_key(store) is SortKey.SET

    async def test_garbage_values_fall_back(self) -> None:
        store = InMemoryPreferences({HIDE_COMPLETE: "yes", TOTAL_CARDS: "lots"})

        assert await get_hide_complete(store) is True
        assert await get_total_cards(store) == 0


class TestRoundTrip:
    async def test_deck_text(self, store: InMemoryPreferences) -> None:
        await save_deck(store, "4 Lightning Bolt")

        assert await get_previous_deck(store) == "4 Lightning Bolt"

    async def test_sort_key(self, store: InMemoryPreferences) -> None:
        await save_sort_key(store, SortKey.RARITY)

        assert await store.get(SORT) == "Rarity"
        assert await get_sort_key(store) is SortKey.RARITY

    async def test_toggles_stored_as_digits(self, store: InMemoryPreferences) -> None:
        await save_show_deck(store, False)
        await save_hide_complete(store, False)

        assert await store.get("show-deck") == "0"
        assert await get_show_deck(store) is False
        assert await get_hide_complete(store) is False

    async def test_sync_metadata(self, store: InMemoryPreferences) -> None:
        await save_sync_metadata(store, updated_at="2026-10-19T09:05:00Z", total_cards=101234)

        assert await get_updated_at(store) == "2026-10-19T09:05:00Z"
        assert await get_total_cards(store) == 101234
