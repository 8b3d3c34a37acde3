import codecs

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    report_interval_seconds: float = Field(default=10.0, gt=0)
    input_encoding: str = "utf-8"

    @field_validator("input_encoding")
    @classmethod
    def _line_splittable_encoding(cls, value: str) -> str:
        # LineReader splits raw bytes on b"\n" before decoding
        try:
            codecs.lookup(value)
            newline = "\n".encode(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding '{value}'") from exc
        except UnicodeError as exc:
            raise ValueError(f"encoding '{value}' must be ASCII-compatible") from exc
        if newline != b"\n":
            raise ValueError(f"encoding '{value}' must be ASCII-compatible")
        return value
