from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Card:
    """
    One printing from the reference card database.

    Attributes:
        id: Opaque printing identifier (Scryfall id)
        colors: Color codes (W, U, B, R, G); order carries no meaning
        name: Card name exactly as printed
        set: Full set name of the printing (e.g., "Magic 2010")
        rarity: Rarity string ("common", "uncommon", "rare", "mythic")
        type: Primary type, without the subtypes after the em-dash
    """

    id: str
    colors: tuple[str, ...]
    name: str
    set: str
    rarity: str
    type: str


@dataclass(frozen=True, slots=True)
class DeckCard(Card):
    """A card printing with the number of copies the deck list asks for."""

    amount: int

    @classmethod
    def from_card(cls, card: Card, amount: int) -> "DeckCard":
        return cls(
            id=card.id,
            colors=card.colors,
            name=card.name,
            set=card.set,
            rarity=card.rarity,
            type=card.type,
            amount=amount,
        )


@dataclass(frozen=True, slots=True)
class ParsedLine:
    """Quantity and candidate card name read from one deck list line."""

    amount: int
    raw_name: str
