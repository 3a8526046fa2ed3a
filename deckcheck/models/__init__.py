from deckcheck.models.card import Card, DeckCard, ParsedLine
from deckcheck.models.checklist import Checklist, ChecklistError
from deckcheck.models.failure import (
    FailureDetail,
    FailureKind,
    FailureResponse,
    KnownError,
)

__all__ = [
    "Card",
    "Checklist",
    "ChecklistError",
    "DeckCard",
    "FailureDetail",
    "FailureKind",
    "FailureResponse",
    "KnownError",
    "ParsedLine",
]
