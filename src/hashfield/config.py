"""Application configuration: settings schema and config.yaml loader"""

import codecs
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    db_url:   str = "sqlite:///hashfield.db"
    encoding: str = Field(default="utf-8", description="Codec used to turn canonical text into hash input bytes")

    @field_validator("encoding")
    @classmethod
    def _known_codec(cls, v: str) -> str:
        try:
            return codecs.lookup(v).name
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then apply non-None overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
