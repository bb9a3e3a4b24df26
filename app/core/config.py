from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    APP_NAME: str = "Survey API"
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # Empty means "not configured": health still answers, writes fail
    DATABASE_URL: str = ""
    DB_SSLMODE: str = "require"
    DB_CONNECT_TIMEOUT: int = 10
    DB_STATEMENT_TIMEOUT_MS: int = 15000
    DB_POOL_TIMEOUT: int = 30
    AUTO_CREATE_TABLES: bool = True

    # Comma-separated; empty -> allow all
    CORS_ORIGIN: str = "*"

    # Empty disables ip hashing
    IP_HASH_SALT: str = ""

    @property
    def database_url(self) -> str:
        url = self.DATABASE_URL.strip()
        # Heroku-style URLs are rejected by SQLAlchemy 1.4+
        if url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql://", 1)
        return url

    @property
    def cors_origins(self) -> list[str]:
        origins = [o.strip() for o in self.CORS_ORIGIN.split(",") if o.strip()]
        return origins or ["*"]

settings = Settings()
