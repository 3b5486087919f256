"""
Pydantic model for application configuration.
Provides validation for every option the update command accepts.
"""

import re
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from mc_lang.exceptions import ConfigurationError

MANIFEST_URL = "https://piston-meta.mojang.com/mc/game/version_manifest_v2.json"
RESOURCE_HOST = "https://resources.download.minecraft.net"
DEFAULT_START_VERSION = "1.13"

# Language codes fetched in allow-list mode
DEFAULT_LANGUAGES = (
    "zh_cn",
    "zh_hk",
    "zh_tw",
    "lzh",
    "ja_jp",
    "ko_kr",
    "vi_vn",
    "de_de",
    "es_es",
    "fr_fr",
    "it_it",
    "nl_nl",
    "pt_br",
    "ru_ru",
    "th_th",
    "uk_ua",
)

_LANG_CODE_REGEX = re.compile(r"^[a-z]{2,4}(_[a-z0-9]{2,4})?$")


class LayoutStrategy(str, Enum):
    """How per-version output directories are named."""

    FLAT = "flat"
    NESTED = "nested"
    MODULE = "module"


class LanguageSelection(str, Enum):
    """Which locale resources of the asset index are downloaded."""

    FULL = "full"
    ALLOWLIST = "allowlist"


class ReleaseErrorPolicy(str, Enum):
    """What happens when one release fails to process."""

    SKIP = "skip"
    ABORT = "abort"


class UpdateConfig(BaseModel):
    """A validated configuration model for an update run."""

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    # Version selection
    start_version: str = DEFAULT_START_VERSION
    only_version: Optional[str] = None

    # Output
    output_root: Path = Field(default_factory=Path.cwd)
    layout: LayoutStrategy = LayoutStrategy.NESTED

    # Resource selection
    language_selection: LanguageSelection = LanguageSelection.FULL
    languages: list[str] = Field(default_factory=lambda: list(DEFAULT_LANGUAGES))

    # Network
    manifest_url: str = MANIFEST_URL
    resource_host: str = RESOURCE_HOST
    connect_timeout: float = 15.0
    read_timeout: float = 60.0

    # Behavior
    error_policy: ReleaseErrorPolicy = ReleaseErrorPolicy.SKIP
    dry_run: bool = False

    @field_validator("start_version")
    @classmethod
    def validate_start_version(cls, v: str) -> str:
        if not v:
            raise ValueError("Start version cannot be empty.")
        return v

    @field_validator("only_version")
    @classmethod
    def validate_only_version(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v:
            raise ValueError("Version cannot be empty.")
        return v

    @field_validator("languages")
    @classmethod
    def validate_languages(cls, v: list[str]) -> list[str]:
        """Normalizes language codes and rejects anything that is not a locale code."""
        codes = [code.strip().lower() for code in v if code.strip()]
        bad = [code for code in codes if not _LANG_CODE_REGEX.match(code)]
        if bad:
            raise ValueError(f"Invalid language code(s): {', '.join(bad)}")
        return list(dict.fromkeys(codes))

    @field_validator("resource_host", "manifest_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"URL must start with http:// or https://, got: {v}")
        return v.rstrip("/")

    @field_validator("connect_timeout", "read_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Timeouts must be positive.")
        return v

    @model_validator(mode="after")
    def validate_allowlist(self) -> "UpdateConfig":
        if self.language_selection is LanguageSelection.ALLOWLIST and not self.languages:
            raise ValueError("Allow-list mode requires at least one language code.")
        return self


def build_config(options: dict[str, Any]) -> UpdateConfig:
    """
    Builds a validated UpdateConfig from command-line options.

    Options whose value is None are left at their defaults.

    Raises:
        ConfigurationError: If validation fails.
    """
    provided = {key: value for key, value in options.items() if value is not None}
    try:
        return UpdateConfig(**provided)
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed:\n{e}") from e
