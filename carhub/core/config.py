from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Carhub"
    app_env: str = "development"
    frontend_url: str = "http://localhost:3000"

    # Database (SQLite via aiosqlite for local dev)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./carhub.db",
        alias="DATABASE_URL",
    )
    create_tables: bool = Field(default=True, alias="CREATE_TABLES")

    # Outbound collaborators (vehicles app)
    pricing_base_url: str = Field(
        default="http://localhost:8082", alias="PRICING_BASE_URL",
    )
    maps_base_url: str | None = Field(
        default=None, alias="MAPS_BASE_URL",
    )  # unset -> addresses are synthesized locally
    http_timeout: float = Field(default=10.0, alias="HTTP_TIMEOUT")

    # Pricing app startup data
    seed_prices: bool = Field(default=True, alias="SEED_PRICES")
    price_seed_count: int = Field(default=19, alias="PRICE_SEED_COUNT")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def maps_enabled(self) -> bool:
        """Geocoding goes over the network only when a maps backend is configured."""
        return bool(self.maps_base_url)

settings = Settings()
