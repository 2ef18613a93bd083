"""User-configurable settings loaded from config.yaml."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import ClassVar

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

# Load environment variables from .env file(s)
load_dotenv()

WBAN_PATTERN = re.compile(r"\d{5}")


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class UserSettings(BaseModel):
    """Which station-year to analyze and where to get it from.

    The defaults compare Austin (13904) against Houston (12960) for 2022.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("config.yaml"),
        Path("~/.config/sweat/config.yaml").expanduser(),
        Path("/etc/sweat/config.yaml"),
    ]

    # Selection
    year: int = Field(2022, ge=1901, le=2100, description="Year to analyze")
    wbans: list[str] = Field(
        default_factory=lambda: ["13904", "12960"],
        min_length=1,
        description="WBAN station identifiers to compare",
    )

    # Archive access
    archive_url: str = Field(
        "https://www1.ncdc.noaa.gov/pub/data/noaa",
        description="Base URL of the ISD archive (one directory per year)",
    )
    timeout: int = Field(30, gt=0, description="HTTP timeout (seconds)")
    max_download_bytes: int = Field(
        10_000_000, gt=0, description="Largest station file accepted for download"
    )

    # Local cache of decoded station files
    data_dir: Path = Field(Path("data"), description="Directory for decoded station files")
    save_raw: bool = Field(False, description="Write decoded station files to data_dir")

    # ---- validators ----
    @field_validator("wbans")
    @classmethod
    def validate_wbans(cls, v: list[str]) -> list[str]:
        for wban in v:
            if not WBAN_PATTERN.fullmatch(wban):
                raise ValueError(f"WBAN must be 5 digits, got {wban!r}")
        if len(set(v)) != len(v):
            raise ValueError("wbans must not repeat")
        return v

    @field_validator("archive_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # ---- convenience methods ----
    def cache_path(self, wban: str, year: int | None = None) -> Path:
        """Location of the decoded station file for ``wban``.

        Args:
            wban: Station identifier
            year: Year of the file (default: configured year)

        Returns:
            Path under ``data_dir``
        """
        return self.data_dir / f"{wban}-{year or self.year}"

    @classmethod
    def load(cls, path: Path | None = None) -> UserSettings:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated UserSettings object

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        # Try to find config file
        if path is None:
            # Check environment variable first
            env_path = os.environ.get("SWEAT_CONFIG")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(f"Config file from SWEAT_CONFIG not found: {path}")
            else:
                # Try default paths
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    raise FileNotFoundError(
                        "No configuration file found. Create config.yaml or set SWEAT_CONFIG."
                    )

        # Load and parse config
        import yaml  # local import to avoid hard dep for callers

        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw) or {}
        except Exception as exc:  # pragma: no cover
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
