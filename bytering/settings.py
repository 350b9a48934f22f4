"""Centralized bytering settings using pydantic-settings.

Each section reads its own environment prefix (``RINGBUF_``, ``LOG_``,
``METRICS_``). Nothing is read at import time; call ``load_settings()``
when the environment is ready.
"""
from typing import Literal, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bytering.buffer.policy import OverflowPolicy
from bytering.errors.fatal import ConfigurationError


class BufferSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RINGBUF_")

    capacity: int = Field(4096, ge=0)
    policy: OverflowPolicy = Field(OverflowPolicy.REJECT_ON_FULL)
    name: str = Field("default")

    @field_validator("policy", mode="before")
    @classmethod
    def _parse_policy(cls, value):
        try:
            return OverflowPolicy.parse(value)
        except ConfigurationError as exc:
            raise ValueError(f"{exc.message}: {value!r}") from exc


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LOG_", populate_by_name=True)

    level: str = Field("INFO")
    # unprefixed DEBUG=true forces DEBUG regardless of level
    debug: bool = Field(False, validation_alias="DEBUG")
    dir: Optional[str] = Field(None)
    format: Literal["text", "json"] = Field("text")


class MetricsSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="METRICS_")

    enabled: bool = Field(True)
    # HTTP exposition is opt-in; collectors are updated either way.
    port: Optional[int] = Field(None)


class Settings(BaseSettings):
    buffer: BufferSettings = Field(default_factory=BufferSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    metrics: MetricsSettings = Field(default_factory=MetricsSettings)

    def as_env(self) -> dict:
        """Return the settings as environment-variable strings."""
        env = {}
        env["RINGBUF_CAPACITY"] = str(self.buffer.capacity)
        env["RINGBUF_POLICY"] = self.buffer.policy.value
        env["RINGBUF_NAME"] = self.buffer.name
        env["LOG_LEVEL"] = self.logging.level
        env["LOG_FORMAT"] = self.logging.format
        if self.logging.dir:
            env["LOG_DIR"] = self.logging.dir
        env["METRICS_ENABLED"] = "1" if self.metrics.enabled else "0"
        if self.metrics.port is not None:
            env["METRICS_PORT"] = str(self.metrics.port)
        return env


def load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError("Invalid bytering settings", context={"errors": exc.errors()}) from exc

