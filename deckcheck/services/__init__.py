"""
DeckCheck services.

Resolution, grouping and checklist tracking for pasted deck lists.
"""

from deckcheck.services.card_database import (
    BulkDataReference,
    CardDatabaseError,
    DownloadResult,
    download_card_data,
    load_cards,
    scryfall_to_card,
)
from deckcheck.services.card_grouper import (
    CardGrouping,
    SortKey,
    group_cards,
    unfound_cards,
)
from deckcheck.services.card_resolver import BASIC_LANDS, CardResolver
from deckcheck.services.checklist import ChecklistManager
from deckcheck.services.deck_pipeline import DeckView, build_deck_view
from deckcheck.services.deck_session import DeckSession, get_deck_session

__all__ = [
    # Resolution
    "BASIC_LANDS",
    "CardResolver",
    # Grouping
    "CardGrouping",
    "SortKey",
    "group_cards",
    "unfound_cards",
    # Checklist
    "ChecklistManager",
    # Pipeline
    "DeckSession",
    "DeckView",
    "build_deck_view",
    "get_deck_session",
    # Card data
    "BulkDataReference",
    "CardDatabaseError",
    "DownloadResult",
    "download_card_data",
    "load_cards",
    "scryfall_to_card",
]
