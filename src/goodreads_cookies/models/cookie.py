"""Pydantic models for cookie rows read from a browser cookie store."""

from pydantic import BaseModel, ConfigDict


class CookieRecord(BaseModel):
    """A single row of the Firefox ``moz_cookies`` table."""

    model_config = ConfigDict(frozen=True)

    host: str
    name: str
    value: str

    def as_pair(self) -> str:
        """Render the cookie as a ``name=value`` pair."""
        return f"{self.name}={self.value}"
