"""Configuration management."""

from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Library settings
    library_file: Optional[Path] = Field(
        default=None,
        description="YAML file seeding the prompt library (built-in library if unset)",
    )

    # Output settings
    output_format: Literal["table", "yaml", "json"] = Field(
        default="table",
        description="Default output format for analysis results",
    )
    show_all_results: bool = Field(
        default=False,
        description="List per-phrase classification records after the grouped view",
    )

    class Config:
        """Pydantic settings configuration."""
        env_prefix = "PROMPT_BUILDER_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
