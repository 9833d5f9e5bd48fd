from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB: str = "wanderlust"
    MONGO_TIMEOUT_MS: int = 5000

    model_config = SettingsConfigDict(
        extra="ignore",
        env_file=".env",
    )

settings = Settings()
