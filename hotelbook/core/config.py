from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    SUPABASE_URL: str | None = None
    SUPABASE_ANON_KEY: str | None = None

    DATA_BACKEND: str = "memory"  # "memory" | "supabase"
    HTTP_TIMEOUT_SECONDS: float = 10.0

    SITE_NAME: str = "Royal Stays"
    CURRENCY_SYMBOL: str = "₹"
    BOOKING_CONFIRMATION_ROUTE: str = "/booking-confirmation"

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()
