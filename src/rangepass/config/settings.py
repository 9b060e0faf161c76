"""
Configuration management for password generation.
"""

from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings


class GeneratorSettings(BaseSettings):
    """Generator settings with environment variable support (RANGEPASS_*)."""

    # Password defaults
    default_length: int = Field(default=20, ge=0, description="Password length when none is given")
    default_include: str = Field(default="!-~", description="Include spec when none is given")
    default_exclude: Optional[str] = Field(default=None, description="Exclude spec when none is given")

    # Sampling
    chunk_size: int = Field(default=100, gt=0, description="Entropy bytes drawn per round")

    # Entropy
    entropy_strategy: Literal["auto", "strong", "weak"] = Field(
        default="auto", description="Entropy source selection strategy"
    )
    entropy_device: str = Field(default="/dev/urandom", description="OS entropy device path")
    allow_weak_fallback: bool = Field(
        default=True, description="Let 'auto' fall back to the pseudo-random generator"
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")

    model_config = {
        "env_file": ".env",
        "env_prefix": "RANGEPASS_",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @classmethod
    def load_from_file(cls, config_path: Path) -> "GeneratorSettings":
        """Load settings from YAML; values in the file override RANGEPASS_* variables."""
        if not config_path.exists():
            return cls()

        config_data = yaml.safe_load(config_path.read_text()) or {}
        if not isinstance(config_data, dict):
            raise ValueError(f"Settings file {config_path} must contain a mapping")
        return cls(**config_data)

    def save_to_file(self, config_path: Path) -> None:
        """Write the effective settings as YAML, in field order."""
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(yaml.safe_dump(self.model_dump(mode="json"), sort_keys=False))

    def update_setting(self, key: str, value: Any) -> None:
        """Update a single setting in memory."""
        if key not in type(self).model_fields:
            raise ValueError(f"Unknown setting: {key}")
        setattr(self, key, value)
