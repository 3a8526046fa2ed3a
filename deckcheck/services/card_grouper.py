"""
Card grouping for the deck view.

Buckets resolved cards by the caller's sort key and orders the bucket keys.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum

from deckcheck.models.card import DeckCard
from deckcheck.services.card_resolver import UNFOUND

COLORLESS = "Colorless"


class SortKey(str, Enum):
    """Dimension the deck view is grouped by."""

    SET = "Set"
    COLOR = "Color"
    RARITY = "Rarity"
    TYPE = "Type"


@dataclass
class CardGrouping:
    """
    Cards bucketed by group key.

    Attributes:
        sort_key: Dimension used for grouping
        groups: Group key -> cards, in original relative order
        ordered_keys: Group keys sorted lexicographically
    """

    sort_key: SortKey
    groups: dict[str, list[DeckCard]] = field(default_factory=dict)
    ordered_keys: list[str] = field(default_factory=list)

    def __getitem__(self, key: str) -> list[DeckCard]:
        return self.groups[key]

    def __contains__(self, key: object) -> bool:
        return key in self.groups


def color_key(card: DeckCard) -> str:
    return "".join(card.colors) or COLORLESS


_KEY_FUNCTIONS: dict[SortKey, Callable[[DeckCard], str]] = {
    SortKey.SET: lambda card: card.set,
    SortKey.COLOR: color_key,
    SortKey.RARITY: lambda card: card.rarity,
    SortKey.TYPE: lambda card: card.type,
}


def unique_by_name(cards: Iterable[DeckCard]) -> list[DeckCard]:
    """First card per name, in original order."""
    seen: set[str] = set()
    unique: list[DeckCard] = []
    for card in cards:
        if card.name not in seen:
            seen.add(card.name)
            unique.append(card)
    return unique


def group_cards(cards: Iterable[DeckCard], sort_key: SortKey) -> CardGrouping:
    """
    Group resolved cards by a sort key.

    Set grouping keeps every printing so each set bucket lists what can be
    pulled from it. Color, rarity and type describe the card rather than
    the printing, so those groupings keep only the first printing per name.
    """
    cards = list(cards)
    if sort_key is not SortKey.SET:
        cards = unique_by_name(cards)

    key_for = _KEY_FUNCTIONS[sort_key]
    groups: dict[str, list[DeckCard]] = {}
    for card in cards:
        groups.setdefault(key_for(card), []).append(card)

    return CardGrouping(sort_key=sort_key, groups=groups, ordered_keys=sorted(groups))


def unfound_cards(cards: Iterable[DeckCard]) -> list[DeckCard]:
    """Cards whose names did not resolve against the index."""
    return [card for card in cards if card.set == UNFOUND]
