from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "docadmin"
    db_username: str = "docadmin"
    db_password: str = "secret"
    db_pool_min_size: int = 1
    db_pool_max_size: int = 2

    documents_table: str = "documents"
    app_state_table: str = "app_state"

    upload_max_size_bytes: int = 50 * 1024 * 1024
    upload_min_size_bytes: int = 1024
