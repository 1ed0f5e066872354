from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="NOTEGRAPH_", env_file=".env", extra="ignore")

    # Vault settings
    vault_path: Path = Path("data/vault")
    max_content_notes: int = 2000  # Cap on how many notes' content is loaded per build

    # Graph settings
    hub_min_connections: int = 5
    hub_percentile: float = 0.1

    # Web server settings
    cors_origins: list[str] = ["*"]

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


settings = Settings()
