from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="BILLED_", extra="ignore")

    store_backend: str = "memory"

    storage_backend: str = "local"
    storage_local_path: str = "./attachments"
    storage_prefix: str = "justificatifs"

    max_attachment_size: int = 10 * 1024 * 1024  # 10 MB

    session_key: str = "user"

    log_level: str = "INFO"
    log_json: bool = False


settings = Settings()
