from deckcheck.api.cards import router as cards_router
from deckcheck.api.deck import router as deck_router
from deckcheck.api.health import router as health_router
from deckcheck.api.preferences import router as preferences_router

__all__ = [
    "cards_router",
    "deck_router",
    "health_router",
    "preferences_router",
]
