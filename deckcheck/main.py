import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from deckcheck.api import (
    cards_router,
    deck_router,
    health_router,
    preferences_router,
)
from deckcheck.config import settings
from deckcheck.db.database import async_session_factory, init_db
from deckcheck.db.operations import get_all_cards
from deckcheck.models.failure import KnownError
from deckcheck.services.deck_session import get_deck_session
from deckcheck.services.preferences import DatabasePreferences, get_previous_deck, get_sort_key

logger = logging.getLogger(__name__)


async def restore_session() -> None:
    """Load stored cards, the last deck list and the sort key into the deck session."""
    async with async_session_factory() as session:
        cards = await get_all_cards(session)
        store = DatabasePreferences(session)
        deck_text = await get_previous_deck(store)
        sort_key = await get_sort_key(store)

    deck = get_deck_session()
    deck.set_sort_key(sort_key)
    deck.set_card_index(cards)
    deck.set_deck_text(deck_text)
    logger.info("Restored deck session: %d printings, %d deck rows", len(cards), len(deck.cards))


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    await init_db()
    await restore_session()
    yield


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("deckcheck"),
    lifespan=lifespan,
)


@app.exception_handler(KnownError)
async def known_error_handler(_request: Request, exc: KnownError) -> JSONResponse:
    """Return known failures as a FailureResponse with the error's status code."""
    logger.warning("%s: %s", exc.kind.value, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(mode="json"),
    )


app.include_router(cards_router)
app.include_router(deck_router)
app.include_router(health_router)
app.include_router(preferences_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
