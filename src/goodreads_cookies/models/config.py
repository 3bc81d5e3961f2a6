"""Output document and runtime settings for goodreads-cookies."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_OUTPUT = Path("goodreads_config.json")


class GoodreadsConfig(BaseModel):
    """The JSON document consumed by the Goodreads-to-Libby tagging tool.

    Both fields are required and non-empty, so an instance that exists can
    always be written safely.
    """

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., min_length=1, description="Numeric Goodreads user ID")
    cookies: str = Field(
        ..., min_length=1, description="Cookie header, name-sorted pairs joined by '; '"
    )

    def write(self, path: Path) -> Path:
        """Serialize the config to ``path``, replacing any existing file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return path


class ExtractorSettings(BaseSettings):
    """Runtime settings with environment variable support.

    Settings can be provided via:
    1. Environment variables (prefixed with GOODREADS_COOKIES_)
    2. .env file
    3. Command-line options, which take precedence

    Example:
        export GOODREADS_COOKIES_FIREFOX_DIR=~/snap/firefox/common/.mozilla/firefox
        export GOODREADS_COOKIES_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="GOODREADS_COOKIES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    output: Path = Field(default=DEFAULT_OUTPUT, description="Destination config path")
    firefox_dir: Path | None = Field(
        default=None, description="Firefox directory; platform default when unset"
    )
    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_file: Path | None = Field(default=None, description="Optional log file path")
