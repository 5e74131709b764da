from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # App
    APP_NAME: str = "PokeBet"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Demo accounts
    STARTING_BALANCE_CENTS: int = 100_000  # $1,000 for every new user
    MAX_DEPOSIT_CENTS: int = 1_000_000  # $10,000 per add-funds request

    # Price simulation: set for reproducible market movement
    PRICE_SEED: int | None = None


settings = Settings()
