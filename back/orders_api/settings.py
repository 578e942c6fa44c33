from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    """
    App configuration.

    Values come from the environment, then `config.env` and `.env` at the
    repository root (or the current directory).
    """

    model_config = SettingsConfigDict(
        env_file=(
            str(_PROJECT_ROOT / "config.env"),
            str(_PROJECT_ROOT / ".env"),
            "config.env",
            ".env",
        ),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    mongo_url: str = Field(default="mongodb://localhost:27017", validation_alias="MONGO_URL")
    mongo_db_name: str = Field(default="restaurant", validation_alias="MONGO_DB_NAME")
    orders_collection: str = Field(default="orders", validation_alias="ORDERS_COLLECTION")
    mongo_timeout_ms: int = Field(default=5000, validation_alias="MONGO_TIMEOUT_MS")

    # Comma-separated top-level fields every new order must carry.
    # Use "userId,client,products,status" for the products-based schema.
    order_required_fields: str = Field(
        default="items,total,customerName",
        validation_alias="ORDER_REQUIRED_FIELDS",
    )

    secret_key: str = Field(default="CHANGE_THIS_IN_PRODUCTION", validation_alias="SECRET_KEY")
    algorithm: str = Field(default="HS256", validation_alias="ALGORITHM")

    cors_origins: str = Field(
        default="http://localhost:4200",
        validation_alias="CORS_ORIGINS"
    )

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @property
    def required_order_fields(self) -> list[str]:
        return [
            field.strip()
            for field in self.order_required_fields.split(",")
            if field.strip()
        ]


settings = Settings()
