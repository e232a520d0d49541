from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 8000
    personas_dir: str = str(_PACKAGE_DIR / "personas" / "data")
    log_level: str = "INFO"
    api_key: str = ""  # Empty = auth disabled (local dev); set to enable API key validation
    session_path: str = ".critic/session.json"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
