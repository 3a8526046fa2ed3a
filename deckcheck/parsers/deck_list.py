"""
Parser for pasted deck lists.

Each line reads:
    <quantity>[x] <card name> [(<set>) <collector number>] [[<tag>]]

Example:
    4 Lightning Bolt (M10) 146
    2x Plains
    1 Sol Ring [Commander]

Anything that does not start with a quantity (section headers, comments,
blank lines) is skipped silently.
"""

import re

from deckcheck.models.card import ParsedLine

# Quantity must be plain ASCII digits; int() alone would also accept "+4" or "4_0"
QUANTITY_PATTERN = re.compile(r"[0-9]+")

# Printing details start at whichever of these comes first
NAME_TERMINATORS = ("(", "[")


def parse_deck_line(line: str) -> ParsedLine | None:
    """
    Parse one deck list line.

    Args:
        line: Raw line of text

    Returns:
        ParsedLine, or None if the line carries no card.

    Handles:
        - "4 Lightning Bolt" and "4x Lightning Bolt"
        - Set/collector suffixes: "4 Lightning Bolt (M10) 146"
        - Bracketed tags: "1 Sol Ring [Commander]"
        - Irregular spacing between words
    """
    tokens = line.split()
    if len(tokens) < 2:
        return None

    quantity = tokens[0].removesuffix("x")
    if not QUANTITY_PATTERN.fullmatch(quantity):
        return None

    amount = int(quantity)
    if amount <= 0:
        return None

    name = " ".join(tokens[1:])
    cuts = [index for index in (name.find(t) for t in NAME_TERMINATORS) if index != -1]
    if cuts:
        name = name[: min(cuts)]
    name = name.strip()

    if not name:
        return None

    return ParsedLine(amount=amount, raw_name=name)


def parse_deck_text(text: str) -> list[ParsedLine]:
    """
    Parse a whole deck list.

    Args:
        text: Newline-separated deck list

    Returns:
        One ParsedLine per line that names a card, in input order.
        Empty list if the input is empty or whitespace.
    """
    if not text or not text.strip():
        return []

    parsed: list[ParsedLine] = []
    for line in text.split("\n"):
        entry = parse_deck_line(line)
        if entry is not None:
            parsed.append(entry)

    return parsed
