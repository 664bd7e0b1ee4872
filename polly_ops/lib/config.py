"""Configuration management via environment variables and pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings


class PollyConfig(BaseSettings):
    """
    Configuration for rendering and describing Polly operations.

    Priority (highest to lowest):
    1. CLI arguments (handled separately)
    2. Environment variables
    3. .env file
    4. Defaults defined here

    The builder functions never read this; their defaults are fixed.
    """

    region: str = Field(
        default="us-east-1",
        alias="AWS_REGION",
        description="AWS region used to derive the Polly endpoint",
    )

    endpoint_url: str | None = Field(
        default=None,
        alias="POLLY_ENDPOINT_URL",
        description="Explicit endpoint override (e.g. a local stub)",
    )

    output_format: str = Field(
        default="mp3",
        alias="POLLY_OUTPUT_FORMAT",
        description="Default output format for CLI requests: mp3, ogg_vorbis, pcm",
    )

    voice_id: str = Field(
        default="Joanna",
        alias="POLLY_VOICE_ID",
        description="Default voice for CLI requests",
    )

    log_level: str = Field(
        default="WARNING",
        alias="POLLY_LOG_LEVEL",
        description="Logging level for the CLI",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }

    @property
    def endpoint(self) -> str:
        """Get the service endpoint, honoring the override."""
        if self.endpoint_url:
            return self.endpoint_url.rstrip("/")
        return f"https://polly.{self.region}.amazonaws.com"

    def validate_endpoint_config(self) -> None:
        """
        Validate that an endpoint can be resolved.

        Raises:
            ConfigError: If neither an endpoint override nor a region is set
        """
        from polly_ops.lib.exceptions import ConfigError

        if self.endpoint_url:
            return

        if not self.region or not self.region.strip():
            raise ConfigError(
                "Missing AWS region for Polly endpoint. "
                "Set the AWS_REGION or POLLY_ENDPOINT_URL environment variable."
            )


# Polly config instance (lazy loaded)
_polly_config: PollyConfig | None = None


def get_polly_config() -> PollyConfig:
    """Get the Polly configuration instance."""
    global _polly_config
    if _polly_config is None:
        _polly_config = PollyConfig()
    return _polly_config


def reset_all_configs() -> None:
    """Reset all configuration instances (useful for testing)."""
    global _polly_config
    _polly_config = None
