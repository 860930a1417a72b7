from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    # Application settings
    app_name: str = "CMS Bootstrap"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # Database settings
    database_url: str = "sqlite+aiosqlite:///./cms.db"

    # Plugin discovery
    app_root: str = "src"
    plugin_paths: list[str] = ["src/Plugin", "plugins"]

    # Snapshot artifact
    tmp_dir: str = "tmp"
    snapshot_filename: str = "snapshot.json"

    # Admin trigger; rebuild endpoint is disabled while unset
    admin_token: str | None = None

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def snapshot_path(self) -> Path:
        return Path(self.tmp_dir) / self.snapshot_filename


settings = Settings()
