import pytest

from deckcheck.models.card import Card
from deckcheck.services.card_resolver import CardResolver


@pytest.fixture
def sample_cards() -> list[Card]:
    """Small card index with reprints across sets."""
    return [
        Card(
            id="bolt-m10",
            colors=("R",),
            name="Lightning Bolt",
            set="Magic 2010",
            rarity="common",
            type="Instant",
        ),
        Card(
            id="bolt-m11",
            colors=("R",),
            name="Lightning Bolt",
            set="Magic 2011",
            rarity="common",
            type="Instant",
        ),
        Card(
            id="bolt-m10-promo",
            colors=("R",),
            name="Lightning Bolt",
            set="Magic 2010",
            rarity="rare",
            type="Instant",
        ),
        Card(
            id="bolt-2xm",
            colors=("R",),
            name="Lightning Bolt",
            set="Double Masters",
            rarity="uncommon",
            type="Instant",
        ),
        Card(
            id="counterspell-lea",
            colors=("U",),
            name="Counterspell",
            set="Limited Edition Alpha",
            rarity="uncommon",
            type="Instant",
        ),
        Card(
            id="sol-ring-cmd",
            colors=(),
            name="Sol Ring",
            set="Commander",
            rarity="uncommon",
            type="Artifact",
        ),
        Card(
            id="nicol-bolas-m19",
            colors=("U", "B", "R"),
            name="Nicol Bolas, the Ravager",
            set="Core Set 2019",
            rarity="mythic",
            type="Legendary Creature",
        ),
    ]


@pytest.fixture
def resolver(sample_cards: list[Card]) -> CardResolver:
    return CardResolver(sample_cards)


@pytest.fixture
def sample_deck_text() -> str:
    """Sample pasted deck list."""
    return """Deck
4 Lightning Bolt (M10) 146
1 Sol Ring [Commander]
2x Counterspell
3 Nicol Bolas, the Ravager
10 Mountain
1 Totally Made Up Card

Sideboard
2 Counterspell"""
