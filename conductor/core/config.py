"""Configuration management for the conductor engine."""

from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load environment variables
load_dotenv()


class Config(BaseSettings):
    """Timing budgets, adb settings and logging options.

    Every field can be overridden through a ``CONDUCTOR_``-prefixed
    environment variable or a ``.env`` file.
    """

    # Settle detection
    settle_grace_ms: int = Field(default=1000, description="Delay before the first settle sample")
    settle_interval_ms: int = Field(default=200, description="Delay between settle samples")
    settle_max_samples: int = Field(default=10, description="Samples taken before giving up on settling")

    # Tapping
    tap_attempts: int = Field(default=3, description="Taps per cycle when retrying on no change")
    visibility_attempts: int = Field(default=10)
    visibility_interval_ms: int = Field(default=1000)

    # Lookup
    default_timeout_ms: int = Field(default=5000)

    # Android Configuration
    adb_path: str = Field(default="adb")
    adb_command_timeout_s: Optional[float] = Field(default=30.0)
    android_device_id: Optional[str] = Field(default=None)
    hierarchy_dump_path: str = Field(default="/sdcard/window_dump.xml")

    # Framework Configuration
    log_level: str = Field(default="INFO")
    log_dir: Optional[str] = Field(default="logs", description="Directory for log files, None disables them")

    class Config:
        """Pydantic configuration for environment loading."""

        env_file = ".env"
        env_prefix = "CONDUCTOR_"
        case_sensitive = False
        extra = "ignore"

    def validate_config(self) -> bool:
        """Validate configuration values."""
        for name in ("settle_grace_ms", "settle_interval_ms", "visibility_interval_ms", "default_timeout_ms"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")

        for name in ("settle_max_samples", "tap_attempts", "visibility_attempts"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")

        return True


# Global configuration instance
config = Config()
