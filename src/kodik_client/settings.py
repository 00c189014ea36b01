"""Environment-driven configuration for kodik-client.

Values are read from ``KODIK_*`` environment variables and an optional
``.env`` file in the working directory.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from kodik_client.core.models import KodikVideo, SourceConfig
from kodik_client.core.protocols import RawRecordToVideo
from kodik_client.exceptions import ConfigurationError


class KodikSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="KODIK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    token: str = ""
    scheme: str = "https"
    host: str = "kodikapi.com"
    base_path: str = ""
    origin: str = "kodik"
    timeout: float = Field(default=10.0, gt=0)
    cache_path: Path | None = None
    cache_ttl: float = Field(default=24 * 60 * 60, gt=0)

    @field_validator("host")
    @classmethod
    def validate_host(cls, value: str) -> str:
        value = value.strip().strip("/")
        if not value:
            raise ValueError("KODIK_HOST must not be empty")
        return value

    def to_source_config(
        self,
        video_factory: RawRecordToVideo = KodikVideo.from_record,
    ) -> SourceConfig:
        """Build the :class:`SourceConfig` consumed by the client.

        Raises
        ------
        ConfigurationError
            If no token is configured.
        """
        token = self.token.strip()
        if not token:
            raise ConfigurationError(
                "Kodik API token is not configured.",
                hint="Set the KODIK_TOKEN environment variable or add it to .env.",
            )
        return SourceConfig(
            token=token,
            scheme=self.scheme,
            host=self.host,
            base_path=self.base_path,
            origin=self.origin,
            video_factory=video_factory,
        )


@lru_cache(maxsize=1)
def get_settings() -> KodikSettings:
    """Load settings once per process.

    Raises :class:`ConfigurationError` when a variable has an invalid value.
    """
    try:
        return KodikSettings()
    except ValidationError as exc:
        raise ConfigurationError("Invalid Kodik settings.", hint=str(exc)) from exc
