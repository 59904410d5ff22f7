# Author: Bradley R. Kinnard — env vars or bust

"""
Settings via pydantic-settings. Reads REPRODUCIBLE_* from env, falls back to .env file.
Names mirror the maven plugin properties (reproducible.skip etc) so build scripts port over.
"""

import codecs
import locale
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="REPRODUCIBLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # ignore unknown env vars
    )

    encoding: str | None = None  # None = platform default, like project.build.sourceEncoding unset
    generated_directory: Path = Path("target/generated-sources")
    skip: bool = False
    log_level: str = "INFO"
    max_payload_bytes: int = 5_000_000  # http only, 5MB is a very fat ObjectFactory

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, v: str | None) -> str | None:
        if v is not None:
            try:
                codecs.lookup(v)
            except LookupError as e:
                raise ValueError(str(e)) from e
        return v

    def resolved_encoding(self) -> str:
        return self.encoding or locale.getpreferredencoding(False)


@lru_cache
def get_settings() -> Settings:
    """built on first use, never at import, so bad env vars surface where callers can catch them"""
    return Settings()
