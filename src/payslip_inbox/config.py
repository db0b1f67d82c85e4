"""Configuration management using pydantic-settings."""

from enum import Enum
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from .domain.naming import DEFAULT_COLLISION_SUFFIX, DEFAULT_SUFFIX
from .domain.services import DEFAULT_MESSAGE_PATTERNS, DEFAULT_TEXT_PATTERNS

CONFIG_PATH = Path("~/.config/payslip-inbox/config.toml").expanduser()


class MailBackend(str, Enum):
    """Available attachment sources."""

    FILES = "files"
    OUTLOOK = "outlook"


class ExportBackend(str, Enum):
    """Available PDF exporters."""

    REPORTLAB = "reportlab"
    WORD = "word"


class PageSize(str, Enum):
    A4 = "A4"
    LETTER = "letter"


class NamingConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PAYSLIP_INBOX_NAMING_")

    suffix: str = DEFAULT_SUFFIX
    collision_suffix: str = DEFAULT_COLLISION_SUFFIX


class ScanConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PAYSLIP_INBOX_SCAN_")

    message_patterns: list[str] = DEFAULT_MESSAGE_PATTERNS
    text_patterns: list[str] = DEFAULT_TEXT_PATTERNS
    encoding: str = "utf-8"


class MailConfig(BaseSettings):
    """Attachment source configuration."""

    model_config = SettingsConfigDict(env_prefix="PAYSLIP_INBOX_MAIL_")

    backend: MailBackend = MailBackend.FILES


class ExportConfig(BaseSettings):
    """PDF exporter configuration."""

    model_config = SettingsConfigDict(env_prefix="PAYSLIP_INBOX_EXPORT_")

    backend: ExportBackend = ExportBackend.REPORTLAB
    page_size: PageSize = PageSize.A4
    font_name: str = "Courier"
    font_size: float = 9.0
    margin_mm: float = 15.0
    write_metadata: bool = True

    @field_validator("font_size", "margin_mm")
    @classmethod
    def positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("must be positive")
        return v


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PAYSLIP_INBOX_")

    naming: NamingConfig = NamingConfig()
    scan: ScanConfig = ScanConfig()
    mail: MailConfig = MailConfig()
    export: ExportConfig = ExportConfig()


def load_settings(config_path: Path | None = None) -> Settings:
    """Load settings from TOML file, falling back to defaults."""
    path = config_path or CONFIG_PATH

    if path.exists():
        with open(path, "rb") as f:
            data = tomllib.load(f)

        naming = NamingConfig(**data.get("naming", {}))
        scan = ScanConfig(**data.get("scan", {}))
        mail = MailConfig(**data.get("mail", {}))
        export = ExportConfig(**data.get("export", {}))
        return Settings(naming=naming, scan=scan, mail=mail, export=export)

    return Settings()
