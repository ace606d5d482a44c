from dotenv import load_dotenv
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class DatabaseSettings(BaseModel):
    connection: str | None = None  # falls back to Settings.DATABASE_URL
    table: str = "cart"


class CartSettings(BaseModel):
    identifier: str = "cart"
    tax: float = 0
    database: DatabaseSettings = DatabaseSettings()
    destroy_on_logout: bool = False


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore"
    )

    LOG_LEVEL: str = "INFO"
    LOGS_JOURNAL_NAME: str | None = None

    DATABASE_URL: str = "sqlite:///./cart.db"

    CART: CartSettings = CartSettings()

    @property
    def cart_database_url(self) -> str:
        return self.CART.database.connection or self.DATABASE_URL


settings = Settings()
