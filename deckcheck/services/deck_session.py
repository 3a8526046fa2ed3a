"""
Deck session: the single owner of deck view state.

Keeps the current inputs (deck text, card index, sort key), the resolved
cards and the ChecklistManager together. Every input change recomputes
synchronously before returning, so a rebuild always finishes before the
next toggle or query is served.
"""

import logging
from collections.abc import Iterable
from dataclasses import replace
from functools import lru_cache

from deckcheck.models.card import Card, DeckCard
from deckcheck.models.checklist import Checklist
from deckcheck.services.card_grouper import CardGrouping, SortKey, group_cards
from deckcheck.services.card_resolver import CardResolver
from deckcheck.services.checklist import ChecklistManager
from deckcheck.services.deck_pipeline import DeckView, build_deck_view

logger = logging.getLogger(__name__)


class DeckSession:
    """Current deck view plus checklist progress."""

    def __init__(
        self,
        deck_text: str = "",
        cards: Iterable[Card] = (),
        sort_key: SortKey = SortKey.SET,
    ) -> None:
        self._deck_text = deck_text
        self._resolver = CardResolver(cards)
        self._sort_key = sort_key
        self._checklist = ChecklistManager()
        self._view = self._recompute()

    @property
    def deck_text(self) -> str:
        return self._deck_text

    @property
    def sort_key(self) -> SortKey:
        return self._sort_key

    @property
    def index_size(self) -> int:
        return len(self._resolver)

    @property
    def cards(self) -> list[DeckCard]:
        return self._view.cards

    @property
    def grouping(self) -> CardGrouping:
        return self._view.grouping

    @property
    def unfound(self) -> list[DeckCard]:
        return self._view.unfound

    @property
    def checklist(self) -> ChecklistManager:
        return self._checklist

    def _recompute(self) -> DeckView:
        view = build_deck_view(self._deck_text, self._resolver, self._sort_key)
        self._checklist.load(view.checklist)
        logger.debug(
            "Recomputed deck view: %d rows, %d unfound, %d groups",
            len(view.cards),
            len(view.unfound),
            len(view.grouping.ordered_keys),
        )
        return view

    def set_deck_text(self, deck_text: str) -> DeckView:
        """Replace the deck list. Checklist progress is discarded."""
        self._deck_text = deck_text
        self._view = self._recompute()
        return self._view

    def set_card_index(self, cards: Iterable[Card]) -> DeckView:
        """Swap in a new card index. Checklist progress is discarded."""
        self._resolver = CardResolver(cards)
        logger.info("Card index replaced: %d printings", len(self._resolver))
        self._view = self._recompute()
        return self._view

    def set_sort_key(self, sort_key: SortKey) -> DeckView:
        """
        Regroup by a new key.

        The resolved cards do not depend on the sort key, so checklist
        progress is kept.
        """
        self._sort_key = sort_key
        self._view = replace(self._view, grouping=group_cards(self._view.cards, sort_key))
        return self._view

    def toggle(self, name: str, index: int) -> Checklist:
        """Flip one acquisition flag. See ChecklistManager.toggle."""
        return self._checklist.toggle(name, index)

    def is_group_complete(self, group_key: str) -> bool:
        return self._checklist.is_group_complete(group_key, self._view.grouping)

    def ordered_cards(self, group_key: str) -> list[DeckCard]:
        return self._checklist.ordered_cards(group_key, self._view.grouping)


@lru_cache(maxsize=1)
def get_deck_session() -> DeckSession:
    """
    Get the process-wide deck session.

    Created empty on first use; the app lifespan fills in stored cards
    and the restored deck list.
    """
    return DeckSession()
