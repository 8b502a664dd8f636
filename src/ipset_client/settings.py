"""Ipset client configuration settings.

Environment-based configuration for locating and invoking the ipset tool.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class IpsetSettings(BaseSettings):
    """Configuration for the ipset client.

    All settings can be configured via environment variables or .env file.

    Attributes:
        ipset_command: Name or path of the ipset executable
        use_sudo: Run the tool through ``sudo -n``
        phrases_file: Optional YAML file overriding the diagnostic phrases
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    ipset_command: str = Field(
        default="ipset",
        alias="IPSET_COMMAND",
        description="Name or path of the ipset executable",
    )
    use_sudo: bool = Field(
        default=False,
        alias="IPSET_USE_SUDO",
        description="Prefix invocations with 'sudo -n'",
    )
    phrases_file: Path | None = Field(
        default=None,
        alias="IPSET_PHRASES_FILE",
        description="YAML file with diagnostic phrases for another tool version",
    )

    @field_validator("ipset_command")
    @classmethod
    def validate_command(cls, v: str) -> str:
        """Validate the command is not blank."""
        if not v.strip():
            msg = "ipset_command must not be empty"
            raise ValueError(msg)
        return v.strip()


_settings_instance: IpsetSettings | None = None


def get_ipset_settings() -> IpsetSettings:
    """Get default settings (singleton, reads from environment).

    Returns:
        IpsetSettings instance.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = IpsetSettings()
    return _settings_instance


def reset_settings() -> None:
    """Reset singleton (for testing)."""
    global _settings_instance
    _settings_instance = None
