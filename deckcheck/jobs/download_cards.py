"""
Download Scryfall card database.

Run this job to download the latest card data and store it as the local
card index.
"""

import asyncio
import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from deckcheck.db.database import async_session_factory, init_db
from deckcheck.db.operations import replace_cards
from deckcheck.models.card import Card
from deckcheck.services.card_database import download_card_data, load_cards
from deckcheck.services.preferences import DatabasePreferences, save_sync_metadata

logger = logging.getLogger(__name__)


@dataclass
class SyncResult:
    """Outcome of a card database sync."""

    cards: list[Card]
    stored: int
    updated_at: str


async def sync_cards(session: AsyncSession) -> SyncResult:
    """
    Download bulk data and replace the stored card index.

    The caller owns the transaction; nothing is committed here.
    """
    download = await download_card_data()
    cards = load_cards(download.path)
    stored = await replace_cards(session, cards)

    await save_sync_metadata(
        DatabasePreferences(session),
        updated_at=download.reference.updated_at,
        total_cards=len(cards),
    )
    logger.info("Stored %d printings (bulk data updated %s)", stored, download.reference.updated_at)

    return SyncResult(cards=cards, stored=stored, updated_at=download.reference.updated_at)


async def run_download() -> None:
    """Download the Scryfall card database into the local card store."""
    logger.info("Downloading Scryfall card database...")

    await init_db()
    try:
        async with async_session_factory() as session:
            result = await sync_cards(session)
            await session.commit()
        logger.info("Card database ready: %d printings", result.stored)
    except Exception as e:
        logger.error("Failed to download card database: %s", e)
        raise


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(run_download())


if __name__ == "__main__":
    main()
