"""Configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    debug: bool = False

    # Request versions accepted without a warning
    supported_versions: list[str] = ["1.0"]
    warn_on_version_mismatch: bool = True

    # JSON indentation used by the CLI when printing payloads
    cli_indent: int = 2

    class Config:
        env_prefix = "ALEXA_ENVELOPE_"
        case_sensitive = False


settings = Settings()
