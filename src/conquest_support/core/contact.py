"""
Contact target and static screen content.

ContactTarget is built once from configuration and shared for the whole
process. The services list and footer tagline are the fixed copy shown
below the primary actions.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from conquest_support.core.config import ContactConfig
from conquest_support.core.constants import (
    DEFAULT_BLOG_URL,
    DEFAULT_EMAIL_BODY_LINES,
    DEFAULT_EMAIL_SUBJECT,
    EMAIL_BODY_SEPARATOR,
)


@dataclass(frozen=True)
class ContactTarget:
    """Support phone, email and mail template. Immutable for the session."""

    phone_display: str
    email: str
    email_subject: str = DEFAULT_EMAIL_SUBJECT
    email_body_lines: tuple[str, ...] = DEFAULT_EMAIL_BODY_LINES
    blog_url: str = DEFAULT_BLOG_URL

    @property
    def phone_digits(self) -> str:
        """Digits of the display number, in order ("770-953-2500" -> "7709532500")."""
        return "".join(ch for ch in self.phone_display if ch.isdigit())

    @property
    def email_body(self) -> str:
        return EMAIL_BODY_SEPARATOR.join(self.email_body_lines)

    @classmethod
    def from_config(cls, config: ContactConfig) -> ContactTarget:
        return cls(
            phone_display=config.phone_display,
            email=config.email,
            email_subject=config.email_subject,
            email_body_lines=tuple(config.email_body_lines),
            blog_url=config.blog_url,
        )


# ---------------------------------------------------------------------------
# Screen content
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ServiceItem:
    title: str
    symbol: str


SERVICES: tuple[ServiceItem, ...] = (
    ServiceItem("Managed IT (On Prem and Cloud)", "server.rack"),
    ServiceItem("Access Control", "lock.shield"),
    ServiceItem("Cameras", "video.fill"),
    ServiceItem("Telecom Solutions", "antenna.radiowaves.left.and.right"),
    ServiceItem("Networking", "network"),
    ServiceItem("Cybersecurity", "shield.fill"),
    ServiceItem("Backup & Disaster Recovery", "arrow.clockwise.icloud.fill"),
)

COLLAPSED_SERVICE_COUNT = 2

FOOTER_TAGLINE: tuple[str, ...] = ("Providing", "IT and Security Solutions", "Since 2004")

SCREEN_PROMPT = "Choose an option below to reach our support team."
BLOG_TITLE = "Conquest Blog"
BLOG_SUBTITLE = "Updates, security tips, and IT insights."


@dataclass
class ServicesList:
    """Our Services section: all items when expanded, the first two otherwise."""

    items: tuple[ServiceItem, ...] = SERVICES
    expanded: bool = False
    _collapsed_count: int = field(default=COLLAPSED_SERVICE_COUNT, repr=False)

    @property
    def visible(self) -> tuple[ServiceItem, ...]:
        if self.expanded:
            return self.items
        return self.items[: self._collapsed_count]

    @property
    def state_label(self) -> str:
        return "Expanded" if self.expanded else "Collapsed"

    def toggle(self) -> bool:
        self.expanded = not self.expanded
        return self.expanded
