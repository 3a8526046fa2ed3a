"""
Card database service.

Downloads Scryfall bulk data and reduces each printing to a Card.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import httpx

from deckcheck.config import settings
from deckcheck.models.card import Card
from deckcheck.models.failure import FailureKind, KnownError

logger = logging.getLogger(__name__)

# Scryfall separates supertypes/types from subtypes with an em-dash
TYPE_SEPARATOR = "—"

BULK_FILE_NAME = "default-cards.json"


class CardDatabaseError(KnownError):
    """Raised when the reference card data cannot be fetched or read."""

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(
            kind=FailureKind.EXTERNAL_API_ERROR,
            message=message,
            detail=detail,
            suggestion="Try syncing the card database again later.",
            status_code=502,
        )


@dataclass(frozen=True)
class BulkDataReference:
    """Entry from the Scryfall bulk-data index."""

    type: str
    download_uri: str
    updated_at: str


@dataclass(frozen=True)
class DownloadResult:
    """Where a bulk file was saved and which bulk entry it came from."""

    path: Path
    reference: BulkDataReference


def primary_type(type_line: str | None) -> str:
    """
    Type line without subtypes.

    Examples:
        "Creature — Goblin Wizard" -> "Creature"
        "Instant" -> "Instant"
    """
    return (type_line or "").split(TYPE_SEPARATOR)[0].strip()


def scryfall_to_card(raw: dict[str, Any]) -> Card:
    """Reduce one Scryfall card object to the fields the deck view uses."""
    return Card(
        id=raw["id"],
        colors=tuple(raw.get("colors") or ()),
        name=raw["name"],
        set=raw.get("set_name", ""),
        rarity=raw.get("rarity", ""),
        type=primary_type(raw.get("type_line")),
    )


async def fetch_bulk_data_reference(client: httpx.AsyncClient) -> BulkDataReference:
    """
    Look up the current bulk file in the Scryfall bulk-data index.

    Raises:
        CardDatabaseError: If the index cannot be fetched or has no entry
            of the configured type
    """
    try:
        response = await client.get(settings.scryfall_bulk_api)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPError as e:
        raise CardDatabaseError("Could not reach the Scryfall bulk-data index", str(e)) from e

    for item in data.get("data", []):
        if item.get("type") == settings.bulk_data_type:
            return BulkDataReference(
                type=item["type"],
                download_uri=item["download_uri"],
                updated_at=item.get("updated_at", ""),
            )

    raise CardDatabaseError(f"Could not find {settings.bulk_data_type} bulk data URL")


async def download_card_data(output_path: Path | None = None) -> DownloadResult:
    """
    Download the latest Scryfall bulk card file.

    Args:
        output_path: Where to save the file. Defaults to data/default-cards.json

    Returns:
        DownloadResult with the saved path and bulk entry metadata.

    Raises:
        CardDatabaseError: If the bulk data cannot be found or downloaded
    """
    if output_path is None:
        output_path = settings.data_dir / BULK_FILE_NAME

    output_path.parent.mkdir(parents=True, exist_ok=True)

    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        reference = await fetch_bulk_data_reference(client)
        logger.info("Downloading %s (updated %s)", reference.download_uri, reference.updated_at)

        # Stream download (file is several hundred MB)
        try:
            async with client.stream(
                "GET", reference.download_uri, timeout=settings.download_timeout
            ) as response:
                response.raise_for_status()
                with open(output_path, "wb") as f:
                    async for chunk in response.aiter_bytes(8192):
                        f.write(chunk)
        except httpx.HTTPError as e:
            raise CardDatabaseError("Failed to download card data", str(e)) from e

    return DownloadResult(path=output_path, reference=reference)


def load_cards(path: Path | None = None) -> list[Card]:
    """
    Load cards from a downloaded bulk file.

    Args:
        path: Path to JSON file. Defaults to data/default-cards.json

    Returns:
        Every printing in file order.

    Raises:
        FileNotFoundError: If the file doesn't exist
        CardDatabaseError: If the file is not valid bulk card JSON
    """
    if path is None:
        path = settings.data_dir / BULK_FILE_NAME

    if not path.exists():
        raise FileNotFoundError(
            f"Card data not found at {path}. "
            "Run `python -m deckcheck.jobs.download_cards` first."
        )

    try:
        with open(path, encoding="utf-8") as f:
            raw_cards = json.load(f)
    except json.JSONDecodeError as e:
        raise CardDatabaseError(f"Card data at {path} is corrupted", str(e)) from e

    if not isinstance(raw_cards, list):
        raise CardDatabaseError(f"Card data at {path} is not a list of cards")

    cards: list[Card] = []
    skipped = 0
    for raw in raw_cards:
        if not raw.get("id") or not raw.get("name"):
            skipped += 1
            continue
        cards.append(scryfall_to_card(raw))

    if skipped:
        logger.warning("Skipped %d card entries without id or name", skipped)

    return cards
