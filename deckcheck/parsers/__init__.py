from deckcheck.parsers.deck_list import parse_deck_line, parse_deck_text

__all__ = [
    "parse_deck_line",
    "parse_deck_text",
]
