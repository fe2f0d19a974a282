from pydantic_settings import BaseSettings, SettingsConfigDict

from thoughtflow.note_store import DEFAULT_STORAGE_KEY


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="THOUGHTFLOW_")

    # Storage settings
    storage_key: str = DEFAULT_STORAGE_KEY
    local_blob_store_path: str = "data/blobs.json"

    # Related-note settings
    related_max_results: int = 3
    related_min_word_length: int = 4  # words must be strictly longer than this
    preview_length: int = 100

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


settings = Settings()
