# mnx/config.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Project root: .../mnx-binding
BASE_DIR = Path(__file__).resolve().parents[1]

DEFAULT_MAX_INPUT_BYTES = 64 * 1024 * 1024


class Settings(BaseSettings):
    """
    MNX codec settings.

    Reads from:
    - environment variables
    - .env in project root

    Every setting is only a default; ``decode``/``encode``/``loads``/``dumps``
    accept per-call overrides.
    """

    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # ---- Decoding ----
    # False: unknown keys are dropped silently; True: they raise SchemaError
    strict_keys: bool = Field(default=False, validation_alias="MNX_STRICT_KEYS")

    # Upper bound for text handed to loads(); callers bound work through it
    max_input_bytes: int = Field(
        default=DEFAULT_MAX_INPUT_BYTES, validation_alias="MNX_MAX_INPUT_BYTES"
    )

    # ---- Encoding ----
    # False: absent optionals are written as null; True: they are left out
    omit_absent: bool = Field(default=False, validation_alias="MNX_OMIT_ABSENT")

    json_indent: Optional[int] = Field(default=None, validation_alias="MNX_JSON_INDENT")

    def model_post_init(self, __context) -> None:
        if self.max_input_bytes <= 0:
            self.max_input_bytes = DEFAULT_MAX_INPUT_BYTES

        if self.json_indent is not None and self.json_indent < 0:
            self.json_indent = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
