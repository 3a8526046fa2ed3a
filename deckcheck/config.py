from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DECKCHECK_")

    app_name: str = "DeckCheck"
    debug: bool = False

    database_url: str = "sqlite+aiosqlite:///./deckcheck.db"

    scryfall_bulk_api: str = "https://api.scryfall.com/bulk-data"
    bulk_data_type: str = "default_cards"

    data_dir: Path = Path(__file__).parent.parent / "data"

    # Seconds. The bulk file is large, so downloads get their own budget.
    http_timeout: float = 30.0
    download_timeout: float = 300.0


settings = Settings()
