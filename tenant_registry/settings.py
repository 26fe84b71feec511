# tenant_registry/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
import logging
from pathlib import Path

# Handlers and format are configured once, in main.py
logger = logging.getLogger(__name__)

# This settings.py file is at <project root>/tenant_registry/settings.py
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
DOTENV_PATH = PROJECT_ROOT / ".env"

if DOTENV_PATH.exists():
    logger.info(f"SETTINGS.PY: .env file FOUND at explicit path: {DOTENV_PATH}")
else:
    logger.info(
        f"SETTINGS.PY: .env file NOT FOUND at explicit path: {DOTENV_PATH}. "
        "Will rely on OS env vars or defaults."
    )

SUPPORTED_STORAGE_BACKENDS = ("sqlite", "memory")


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    app_name: str = "Tenant Registry"
    debug_mode: bool = False
    storage_backend: str = Field(
        default="sqlite",
        description="Tenant store backend: 'sqlite' or 'memory'."
    )

    # SQLite configuration
    sqlite_db_path: str = "./tenant_registry_data.sqlite3"

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=DOTENV_PATH if DOTENV_PATH.exists() else None,
        extra="ignore",
        env_file_encoding='utf-8'
    )


settings = Settings()

logger.info(
    f"SETTINGS.PY: Post-Settings() settings.debug_mode: "
    f"{settings.debug_mode} (Type: {type(settings.debug_mode)})"
)
logger.info(
    f"SETTINGS.PY: Post-Settings() settings.storage_backend: "
    f"'{settings.storage_backend}' (Type: {type(settings.storage_backend)})"
)
logger.info(
    f"SETTINGS.PY: Post-Settings() settings.sqlite_db_path: "
    f"'{settings.sqlite_db_path}'"
)
