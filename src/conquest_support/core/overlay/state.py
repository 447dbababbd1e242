"""
Overlay state — one tagged value for everything that can sit on top of the screen.

Each variant is its own frozen class; the coordinator holds exactly one of
them at a time, so two overlays can never be visible together.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar


class OverlayKind(StrEnum):
    NONE = "none"
    CALL_UNAVAILABLE = "call_unavailable"
    EMAIL_UNAVAILABLE = "email_unavailable"
    EMAIL_CHOICE = "email_choice"
    EMAIL_COPIED = "email_copied"
    BLOG_UNAVAILABLE = "blog_unavailable"
    BLOG_PRESENTED = "blog_presented"


@dataclass(frozen=True)
class NoOverlay:
    kind: ClassVar[OverlayKind] = OverlayKind.NONE


@dataclass(frozen=True)
class CallUnavailable:
    """The OS declined the call. Offers "copy number" and "dismiss"."""

    kind: ClassVar[OverlayKind] = OverlayKind.CALL_UNAVAILABLE


@dataclass(frozen=True)
class EmailUnavailable:
    """The OS declined the mail composer. Offers "copy email" and "dismiss"."""

    kind: ClassVar[OverlayKind] = OverlayKind.EMAIL_UNAVAILABLE


@dataclass(frozen=True)
class EmailChoice:
    """Compose / copy email / cancel dialog."""

    kind: ClassVar[OverlayKind] = OverlayKind.EMAIL_CHOICE


@dataclass(frozen=True)
class EmailCopied:
    """Transient confirmation; clears itself after a short delay."""

    kind: ClassVar[OverlayKind] = OverlayKind.EMAIL_COPIED


@dataclass(frozen=True)
class BlogUnavailable:
    """The configured blog link failed validation."""

    kind: ClassVar[OverlayKind] = OverlayKind.BLOG_UNAVAILABLE


@dataclass(frozen=True)
class BlogPresented:
    """The blog viewer is open on *url*."""

    url: str
    kind: ClassVar[OverlayKind] = OverlayKind.BLOG_PRESENTED


OverlayState = (
    NoOverlay
    | CallUnavailable
    | EmailUnavailable
    | EmailChoice
    | EmailCopied
    | BlogUnavailable
    | BlogPresented
)

NO_OVERLAY = NoOverlay()

# Overlays that stay up until the user dismisses them
DISMISSIBLE_TYPES: tuple[type, ...] = (
    CallUnavailable,
    EmailUnavailable,
    BlogUnavailable,
    BlogPresented,
)

# Overlays that offer a copy-to-clipboard fallback
COPYABLE_TYPES: tuple[type, ...] = (CallUnavailable, EmailUnavailable)


def is_dismissible(state: OverlayState) -> bool:
    return isinstance(state, DISMISSIBLE_TYPES)


def is_copyable(state: OverlayState) -> bool:
    return isinstance(state, COPYABLE_TYPES)
