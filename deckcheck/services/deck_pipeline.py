"""
Deck view pipeline.

Turns (deck text, card index, sort key) into everything the view needs.
Pure: the same inputs always produce an equal DeckView.
"""

from dataclasses import dataclass, field

from deckcheck.models.card import DeckCard
from deckcheck.models.checklist import Checklist
from deckcheck.services.card_grouper import CardGrouping, SortKey, group_cards, unfound_cards
from deckcheck.services.card_resolver import CardResolver


@dataclass
class DeckView:
    """
    One full recomputation of the deck view.

    Attributes:
        cards: Flat resolved list, in deck list order
        grouping: Cards bucketed by the sort key
        unfound: Rows whose names did not resolve
        checklist: Fresh checklist for these cards (all flags False)
    """

    cards: list[DeckCard]
    grouping: CardGrouping
    unfound: list[DeckCard] = field(default_factory=list)
    checklist: Checklist = field(default_factory=Checklist)


def build_deck_view(deck_text: str, resolver: CardResolver, sort_key: SortKey) -> DeckView:
    """Run the whole pipeline for one set of inputs."""
    cards = resolver.resolve_deck(deck_text)
    return DeckView(
        cards=cards,
        grouping=group_cards(cards, sort_key),
        unfound=unfound_cards(cards),
        checklist=Checklist.build(cards),
    )
