from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SPLITBOOK_", env_file=".env", extra="ignore")

    # In-memory by default: nothing survives a restart.
    DATABASE_URL: str = "sqlite+aiosqlite:///:memory:"
    SQL_ECHO: bool = False
    LOG_LEVEL: str = "INFO"


settings = Settings()
