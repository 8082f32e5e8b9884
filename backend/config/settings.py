"""
Application settings and configuration management.
Values come from environment variables (prefix TAKEDOWN_) or a .env file.
"""
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from core.utils import DATA_DIR

BUNDLED_WEIGHT_CATEGORIES = DATA_DIR / "weight_categories.json"


class Settings(BaseSettings):
    """Application settings - all values overridable from environment variables."""

    # Application settings
    app_name: str = "Takedown Roster Manager"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"

    # Weight category resource
    weight_categories_path: str = str(BUNDLED_WEIGHT_CATEGORIES)

    # Roster files
    roster_directory: str = "."
    roster_file_extension: str = ".txt"

    # Logging settings
    log_level: str = "INFO"
    log_format: str = "[%(asctime)s][%(levelname)7s] %(name)s: %(message)s"
    log_file: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="TAKEDOWN_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    def roster_path_for(self, team_name: str, directory: Optional[str] = None) -> Path:
        """Build the default roster file path for a new team."""
        base = Path(directory or self.roster_directory)
        return base / f"{team_name}{self.roster_file_extension}"


# Global settings instance
settings = Settings()
