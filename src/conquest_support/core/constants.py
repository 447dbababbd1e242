"""Conquest Support constants: contact defaults, layout limits, and timings."""

from __future__ import annotations

from enum import IntEnum

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 1
    CONFIG_ERROR = 2
    HANDOFF_UNAVAILABLE = 3


# ---------------------------------------------------------------------------
# Filesystem layout
# ---------------------------------------------------------------------------

APP_DIR_NAME = ".conquest-support"
CONFIG_FILENAME = "config.toml"
CONFIG_ENV_VAR = "CONQUEST_SUPPORT_CONFIG"

# ---------------------------------------------------------------------------
# Contact defaults
# ---------------------------------------------------------------------------

DEFAULT_PHONE_DISPLAY = "770-953-2500"
DEFAULT_SUPPORT_EMAIL = "support@csatlanta.com"
DEFAULT_BLOG_URL = "https://csatlanta.com/resources/blog/"
DEFAULT_EMAIL_SUBJECT = "Support Request"
DEFAULT_EMAIL_BODY_LINES: tuple[str, ...] = (
    "Name:",
    "Company/Property:",
    "Best callback #:",
    "Issue Summary:",
)
EMAIL_BODY_SEPARATOR = "\n"

# ---------------------------------------------------------------------------
# Overlay timings
# ---------------------------------------------------------------------------

EMAIL_COPIED_DISPLAY_SECONDS = 1.5  # inline "copied" confirmation lifetime

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

MAX_REASONABLE_HEADER_HEIGHT = 500.0  # measurements above this are glitches
LOGO_MAX_HEIGHT = 180.0
HEADER_TOP_PADDING = 4.0
PINNED_HEADER_HEIGHT = 185.0
MINIMUM_RESERVED_HEIGHT = LOGO_MAX_HEIGHT + HEADER_TOP_PADDING
