from deckcheck.db.database import get_session, init_db
from deckcheck.db.operations import (
    card_to_model,
    count_cards,
    get_all_cards,
    get_preference,
    replace_cards,
    set_preference,
)

__all__ = [
    "card_to_model",
    "count_cards",
    "get_all_cards",
    "get_preference",
    "get_session",
    "init_db",
    "replace_cards",
    "set_preference",
]
