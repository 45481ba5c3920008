from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_TITLE: str = "Team Roster API"

    # --- DB ---
    DATABASE_URL: str = "sqlite:///./roster.sqlite"
    SQL_ECHO: bool = False

    # --- Logging ---
    LOG_LEVEL: str = "INFO"

    # Read overrides from a local .env file
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
