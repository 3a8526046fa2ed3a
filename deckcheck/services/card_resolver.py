"""
Card Resolution Service.

Maps parsed deck list lines to concrete printings from the card index.

INVARIANTS:
1. Every parsed line yields at least one DeckCard (never raises)
2. Basic lands never touch the index
3. Unknown names become visible "Unfound" rows instead of being dropped
4. Name lookup is exact and case-sensitive

KNOWN QUIRK:
A name printed in N distinct sets resolves to N DeckCards, each carrying
the full requested amount. Summing amounts across printings therefore
over-counts; consumers that need copy totals should work per name.
"""

import logging
from collections.abc import Iterable

from deckcheck.models.card import Card, DeckCard, ParsedLine
from deckcheck.parsers.deck_list import parse_deck_text

logger = logging.getLogger(__name__)

BASIC_LANDS = frozenset({"Plains", "Mountain", "Island", "Swamp", "Forest", "Wastes"})

BASIC_LAND_SET = "Basic Lands"
BASIC_LAND_RARITY = "basicland"
BASIC_LAND_TYPE = "Basic Land"

UNFOUND = "Unfound"


def basic_land_card(parsed: ParsedLine) -> DeckCard:
    """Synthetic row for a basic land."""
    return DeckCard(
        id=parsed.raw_name,
        colors=(),
        name=parsed.raw_name,
        set=BASIC_LAND_SET,
        rarity=BASIC_LAND_RARITY,
        type=BASIC_LAND_TYPE,
        amount=parsed.amount,
    )


def unfound_card(parsed: ParsedLine) -> DeckCard:
    """Sentinel row for a name the index does not know."""
    return DeckCard(
        id=parsed.raw_name,
        colors=(),
        name=parsed.raw_name,
        set=UNFOUND,
        rarity=UNFOUND,
        type=UNFOUND,
        amount=parsed.amount,
    )


class CardResolver:
    """
    Resolves ParsedLine -> DeckCard list using a card index.

    The index is read-only here; build a new resolver when it changes.
    """

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        """
        Initialize resolver with the reference card index.

        Args:
            cards: Every known printing, in index order
        """
        self._by_name: dict[str, list[Card]] = {}
        self._size = 0
        for card in cards:
            self._by_name.setdefault(card.name, []).append(card)
            self._size += 1

    def __len__(self) -> int:
        """Number of printings in the index."""
        return self._size

    def printings(self, name: str) -> list[Card]:
        """All printings with exactly this name, in index order."""
        return list(self._by_name.get(name, ()))

    def resolve(self, parsed: ParsedLine) -> list[DeckCard]:
        """
        Resolve one parsed line.

        Returns:
            One DeckCard per distinct set the name was printed in (first
            printing per set wins), or a single synthetic row for basic
            lands and unknown names.
        """
        if parsed.raw_name in BASIC_LANDS:
            return [basic_land_card(parsed)]

        matches = self._by_name.get(parsed.raw_name)
        if not matches:
            logger.debug("No printing found for %r", parsed.raw_name)
            return [unfound_card(parsed)]

        seen_sets: set[str] = set()
        resolved: list[DeckCard] = []
        for card in matches:
            if card.set in seen_sets:
                continue
            seen_sets.add(card.set)
            resolved.append(DeckCard.from_card(card, parsed.amount))

        return resolved

    def resolve_lines(self, lines: Iterable[ParsedLine]) -> list[DeckCard]:
        """Flat resolved list for several parsed lines, in input order."""
        resolved: list[DeckCard] = []
        for parsed in lines:
            resolved.extend(self.resolve(parsed))
        return resolved

    def resolve_deck(self, text: str) -> list[DeckCard]:
        """Parse and resolve a whole deck list."""
        return self.resolve_lines(parse_deck_text(text))
