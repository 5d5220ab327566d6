"""
Settings — Load and validate WordLevel configuration from YAML.

Settings are read once per session from the packaged default.yaml, or
from the file named by WORDLEVEL_CONFIG.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator

# Packaged resources
PACKAGE_DIR = Path(__file__).parent.parent
DEFAULT_CONFIG_PATH = PACKAGE_DIR / "config" / "default.yaml"
DEFAULT_WORDLIST_DIR = PACKAGE_DIR / "wordlists"

CONFIG_ENV_VAR = "WORDLEVEL_CONFIG"


class WordlistLevel(BaseModel):
    """One entry of the level selector."""

    name: str = Field(..., description="Display name shown to the writer")
    file: str = Field(..., description="Word list path or http(s) URL")


class Settings(BaseModel):
    """Complete WordLevel settings."""

    debounce_ms: int = Field(750, ge=0, description="Quiet period before re-checking input")
    tagger: str = Field("spacy", description="Tagger backend name")
    spacy_model: str = Field("en_core_web_sm", description="spaCy model for the spacy tagger")
    http_timeout: float = Field(10.0, gt=0, description="Timeout for HTTP word lists, in seconds")
    wordlist_dir: str = Field("", description="Base directory for relative word list files")
    max_sessions: int = Field(200, ge=1, description="Web sessions kept before the least recently used is closed")
    session_idle_seconds: float = Field(1800.0, gt=0, description="Web sessions idle this long are closed")
    wordlists: list[WordlistLevel] = Field(default_factory=list)

    @field_validator("wordlist_dir")
    @classmethod
    def _expand_dir(cls, value: str) -> str:
        return str(Path(value).expanduser()) if value else ""

    @property
    def wordlist_base(self) -> Path:
        """Directory relative word list files are resolved against."""
        return Path(self.wordlist_dir) if self.wordlist_dir else DEFAULT_WORDLIST_DIR

    def get_level(self, name: str) -> Optional[WordlistLevel]:
        """Find a level by display name (case-insensitive)."""
        wanted = name.strip().lower()
        for level in self.wordlists:
            if level.name.lower() == wanted:
                return level
        return None


def load_settings(path: Path | str | None = None) -> Settings:
    """
    Load settings from a YAML file.

    Args:
        path: Settings file. Defaults to $WORDLEVEL_CONFIG, then the
            packaged default.yaml.

    Returns:
        Validated Settings

    Raises:
        FileNotFoundError: If the settings file doesn't exist
        pydantic.ValidationError: If the file has the wrong shape
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return Settings.model_validate(data)
