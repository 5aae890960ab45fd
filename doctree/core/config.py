from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./doctree.db"
    database_echo: bool = False
    log_level: str = "INFO"

    # Удалять документ, если узел для него создать не удалось
    compensate_orphaned_documents: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DOCTREE_", extra="ignore")

settings = Settings()
