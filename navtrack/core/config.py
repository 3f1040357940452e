"""Configuration management for the NavTrack framework."""

import os

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables
load_dotenv()


class TrackerConfig(BaseSettings):
    """Configuration class for the navigation tracker."""

    model_config = SettingsConfigDict(
        env_prefix="NAVTRACK_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore unexpected env vars rather than raising errors
    )

    # Inference timing
    min_check_interval_ms: int = Field(default=300, ge=0, description="Minimum ms between two accepted checks")
    settle_delay_ms: int = Field(default=300, ge=0, description="Delay after a click before checking the screen")
    initial_screen: str = Field(default="Home Screen")

    # Results
    results_dir: str = Field(default="test-results")
    results_filename: str = Field(default="navigation-tracking.json")
    backup_filename: str = Field(default="navigation-tracking-backup.json")
    reset_results_dir: bool = Field(default=True, description="Wipe the results directory when a tracker starts")

    # Logging
    log_level: str = Field(default="INFO")
    log_dir: str = Field(default="logs")
    log_to_file: bool = Field(default=True)

    def validate_config(self) -> bool:
        """Validate configuration values."""
        if not self.initial_screen:
            raise ValueError("Initial screen name must not be empty")

        if self.results_filename == self.backup_filename:
            raise ValueError("Results and backup file names must differ")

        return True

    def get_results_path(self) -> str:
        """Get the full path to the results directory."""
        return os.path.join(os.getcwd(), self.results_dir)


# Global configuration instance
config = TrackerConfig()
