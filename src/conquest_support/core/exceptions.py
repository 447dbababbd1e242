"""Conquest Support exception hierarchy."""

from __future__ import annotations


class ConquestSupportError(Exception):
    """Base exception for all Conquest Support errors."""


class ConfigError(ConquestSupportError):
    """Raised when the configuration is invalid or cannot be read."""


class ConfigNotFoundError(ConfigError):
    """Raised when the configuration file does not exist."""


class ClipboardError(ConquestSupportError):
    """Raised when the system clipboard cannot be written."""
