from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import computed_field

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # App
    app_name: str = "Media Reference Service"
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    # DB settings
    db_user: str
    db_pass: str
    db_host: str
    db_port: int
    db_name: str

    # Auth
    jwt_secret: str
    jwt_issuer: str = "media"
    jwt_audience: str = "media-clients"
    jwt_expires_minutes: int = 60

    # Redis (type registry cache)
    redis_url: str = "redis://localhost:6379/0"
    cache_ttl_seconds: int = 120

    # Media
    seed_default_media_types: bool = True
    oembed_timeout_seconds: int = 10

    @computed_field
    @property
    def database_url(self) -> str:
        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_pass}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )

settings = Settings()
