from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    http_host: str = "0.0.0.0"
    http_port: int = 8000

    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "handnotes"
    db_username: str = "handnotes"
    db_password: str = "secret"
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10
    db_apply_schema_on_startup: bool = False

    storage_backend: str = "s3"
    storage_bucket: str = "handnotes"
    storage_endpoint_url: str = ""
    storage_region: str = ""
    storage_access_key_id: str = ""
    storage_secret_access_key: str = ""
    storage_public_base_url: str = ""
    storage_local_root: str = "/app/files"

    transcription_provider: str = "openai"
    openai_api_key: str = ""
    openai_model_name: str = "gpt-4.1-mini"
    openai_base_url: str = ""
    openai_timeout_seconds: int = 60

    image_fetch_timeout_seconds: int = 30
