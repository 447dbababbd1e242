"""Conquest Support configuration: Pydantic model, load, and save."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from conquest_support.core.constants import (
    APP_DIR_NAME,
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    DEFAULT_BLOG_URL,
    DEFAULT_EMAIL_BODY_LINES,
    DEFAULT_EMAIL_SUBJECT,
    DEFAULT_PHONE_DISPLAY,
    DEFAULT_SUPPORT_EMAIL,
    EMAIL_COPIED_DISPLAY_SECONDS,
    HEADER_TOP_PADDING,
    LOGO_MAX_HEIGHT,
    MAX_REASONABLE_HEADER_HEIGHT,
    PINNED_HEADER_HEIGHT,
)
from conquest_support.core.exceptions import ConfigError, ConfigNotFoundError


def app_dir() -> Path:
    """Return the Conquest Support config directory (~/.conquest-support)."""
    return Path.home() / APP_DIR_NAME


# ---------------------------------------------------------------------------
# Sub-models
# ---------------------------------------------------------------------------


class ContactConfig(BaseModel):
    phone_display: str = DEFAULT_PHONE_DISPLAY
    email: str = DEFAULT_SUPPORT_EMAIL
    email_subject: str = DEFAULT_EMAIL_SUBJECT
    email_body_lines: list[str] = Field(default_factory=lambda: list(DEFAULT_EMAIL_BODY_LINES))
    # Kept as a plain string: a bad link is shown as "Blog Unavailable", not rejected here.
    blog_url: str = DEFAULT_BLOG_URL

    @field_validator("phone_display")
    @classmethod
    def require_digits(cls, v: str) -> str:
        if not any(ch.isdigit() for ch in v):
            raise ValueError("phone_display must contain at least one digit")
        return v.strip()

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = v.strip()
        if not re.fullmatch(r"[^@\s]+@[^@\s]+", v):
            raise ValueError(f"Invalid support email address: {v!r}")
        return v


class OverlayConfig(BaseModel):
    copied_display_seconds: float = EMAIL_COPIED_DISPLAY_SECONDS

    @field_validator("copied_display_seconds")
    @classmethod
    def validate_duration(cls, v: float) -> float:
        if not (0 < v <= 10):
            raise ValueError("copied_display_seconds must be in (0, 10]")
        return v


class LayoutConfig(BaseModel):
    header_ceiling: float = MAX_REASONABLE_HEADER_HEIGHT
    logo_max_height: float = LOGO_MAX_HEIGHT
    top_padding: float = HEADER_TOP_PADDING
    pinned_header_height: float = PINNED_HEADER_HEIGHT

    @field_validator("header_ceiling", "logo_max_height", "pinned_header_height")
    @classmethod
    def positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("layout heights must be positive")
        return v

    @field_validator("top_padding")
    @classmethod
    def non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError("top_padding must not be negative")
        return v

    @model_validator(mode="after")
    def ceiling_above_minimum(self) -> LayoutConfig:
        if self.header_ceiling < self.minimum_reserved:
            raise ValueError(
                f"header_ceiling ({self.header_ceiling:g}) is below the minimum reserved "
                f"header height ({self.minimum_reserved:g})"
            )
        return self

    @property
    def minimum_reserved(self) -> float:
        """Expected logo footprint; the reserved header space never drops below it."""
        return self.logo_max_height + self.top_padding


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "text"  # "text" | "json"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v.lower() not in ("text", "json"):
            raise ValueError("Log format must be 'text' or 'json'")
        return v.lower()


# ---------------------------------------------------------------------------
# Root config
# ---------------------------------------------------------------------------


class SupportConfig(BaseModel):
    """Root Conquest Support configuration model."""

    contact: ContactConfig = Field(default_factory=ContactConfig)
    overlay: OverlayConfig = Field(default_factory=OverlayConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Computed path (not stored in config file)
    _config_path: Path | None = None

    @property
    def config_path(self) -> Path | None:
        return self._config_path


# ---------------------------------------------------------------------------
# Load / save
# ---------------------------------------------------------------------------


def _config_file_path() -> Path:
    if env_path := os.environ.get(CONFIG_ENV_VAR):
        return Path(env_path)
    return app_dir() / CONFIG_FILENAME


def load_config(path: Path | None = None) -> SupportConfig:
    """
    Load SupportConfig from TOML file, overlaid with environment variables.

    Priority (highest to lowest):
      1. Environment variables (CONQUEST_SUPPORT_*)
      2. Config file (~/.conquest-support/config.toml)
      3. Built-in defaults

    An explicit *path* that does not exist raises ConfigNotFoundError; a
    missing default config file falls back to the built-in defaults.
    """
    import tomllib

    cfg_path = path or _config_file_path()

    data: dict[str, Any] = {}
    if cfg_path.exists():
        try:
            with open(cfg_path, "rb") as f:
                data = tomllib.load(f)
        except Exception as exc:
            raise ConfigError(f"Cannot read config file {cfg_path}: {exc}") from exc
    elif path is not None:
        raise ConfigNotFoundError(
            f"Config file not found: {cfg_path}\n"
            f"Run 'conquest-support config init' to create one."
        )

    # Apply environment variable overrides
    _apply_env_overrides(data)

    try:
        config = SupportConfig.model_validate(data)
    except Exception as exc:
        raise ConfigError(f"Invalid config at {cfg_path}: {exc}") from exc

    if cfg_path.exists():
        config._config_path = cfg_path
    return config


def _apply_env_overrides(data: dict[str, Any]) -> None:
    """Overlay CONQUEST_SUPPORT_* environment variables onto the parsed TOML data."""
    if phone := os.environ.get("CONQUEST_SUPPORT_PHONE"):
        data.setdefault("contact", {})["phone_display"] = phone
    if email := os.environ.get("CONQUEST_SUPPORT_EMAIL"):
        data.setdefault("contact", {})["email"] = email
    if blog := os.environ.get("CONQUEST_SUPPORT_BLOG_URL"):
        data.setdefault("contact", {})["blog_url"] = blog
    if level := os.environ.get("CONQUEST_SUPPORT_LOG_LEVEL"):
        data.setdefault("logging", {})["level"] = level


def save_config(config_data: dict[str, Any], path: Path | None = None) -> Path:
    """Write config dict to TOML file with secure permissions (0600)."""
    import tomli_w

    cfg_path = path or _config_file_path()
    cfg_path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)

    # Write atomically
    tmp_path = cfg_path.with_suffix(".tmp")
    try:
        with open(tmp_path, "wb") as f:
            tomli_w.dump(config_data, f)
        tmp_path.replace(cfg_path)
    except Exception as exc:
        tmp_path.unlink(missing_ok=True)
        raise ConfigError(f"Cannot write config to {cfg_path}: {exc}") from exc

    cfg_path.chmod(0o600)
    return cfg_path
