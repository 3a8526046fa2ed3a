"""
Checklist management.

Owns the current Checklist snapshot for one resolved card list and answers
completion questions against a CardGrouping.

States:
    Unbuilt: no card list seen yet (snapshot is None)
    Built: snapshot tied to the last card list passed to rebuild()
"""

import logging
from collections.abc import Iterable

from deckcheck.models.card import DeckCard
from deckcheck.models.checklist import Checklist, ChecklistError
from deckcheck.models.failure import FailureKind
from deckcheck.services.card_grouper import CardGrouping

logger = logging.getLogger(__name__)


class ChecklistManager:
    """Holds the current checklist and replaces it on every rebuild or toggle."""

    def __init__(self) -> None:
        self._checklist: Checklist | None = None

    @property
    def is_built(self) -> bool:
        return self._checklist is not None

    @property
    def checklist(self) -> Checklist:
        """Current snapshot; an empty checklist while unbuilt."""
        if self._checklist is None:
            return Checklist()
        return self._checklist

    def rebuild(self, cards: Iterable[DeckCard]) -> Checklist:
        """Discard all flags and build a fresh checklist for this card list."""
        return self.load(Checklist.build(cards))

    def load(self, checklist: Checklist) -> Checklist:
        """Replace the current snapshot wholesale."""
        self._checklist = checklist
        logger.debug(
            "Rebuilt checklist: %d cards, %d copies",
            self._checklist.unique_card_count,
            self._checklist.incomplete_count,
        )
        return self._checklist

    def toggle(self, name: str, index: int) -> Checklist:
        """
        Flip one acquisition flag.

        Raises:
            ChecklistError: If unbuilt, or the name/index does not exist.
                State is left unchanged.
        """
        if self._checklist is None:
            raise ChecklistError(
                kind=FailureKind.NOT_FOUND,
                message="No deck has been loaded yet",
                suggestion="Paste a deck list first.",
                status_code=404,
            )
        self._checklist = self._checklist.toggle(name, index)
        return self._checklist

    def flags(self, name: str) -> tuple[bool, ...]:
        return self.checklist.get(name)

    def unique_card_count(self) -> int:
        return self.checklist.unique_card_count

    def incomplete_count(self) -> int:
        return self.checklist.incomplete_count

    def is_group_complete(self, group_key: str, grouping: CardGrouping) -> bool:
        """True if every copy of every card in the group has been acquired."""
        checklist = self.checklist
        return all(checklist.is_card_complete(card.name) for card in _bucket(group_key, grouping))

    def ordered_cards(self, group_key: str, grouping: CardGrouping) -> list[DeckCard]:
        """Group cards, most copies needed first. Ties keep group order."""
        checklist = self.checklist
        return sorted(
            _bucket(group_key, grouping),
            key=lambda card: -len(checklist.flags.get(card.name, ())),
        )


def _bucket(group_key: str, grouping: CardGrouping) -> list[DeckCard]:
    if group_key not in grouping:
        raise ChecklistError(
            kind=FailureKind.NOT_FOUND,
            message=f"No group named '{group_key}'",
            detail=f"Grouped by {grouping.sort_key.value}",
            status_code=404,
        )
    return grouping[group_key]
