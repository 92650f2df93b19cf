"""Runtime settings, read from the environment (and an optional .env file)."""

from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

found = find_dotenv(filename=".env", usecwd=True)
if found:
    load_dotenv(found)


class Settings(BaseModel):
    # Stamped into exported snapshots
    app_name: str = Field(default_factory=lambda: os.getenv("DANHXUNG_APP_NAME", "Smart Family Tree"))
    app_version: str = Field(default_factory=lambda: os.getenv("DANHXUNG_APP_VERSION", "1.0.0"))
    export_version: str = Field(default_factory=lambda: os.getenv("DANHXUNG_EXPORT_VERSION", "1.0.0"))

    log_level: str = Field(default_factory=lambda: os.getenv("DANHXUNG_LOG_LEVEL", "WARNING"))


settings = Settings()
