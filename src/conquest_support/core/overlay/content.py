"""User-facing copy for each overlay: title, message, and buttons."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from conquest_support.core.contact import ContactTarget
from conquest_support.core.overlay.state import (
    BlogPresented,
    BlogUnavailable,
    CallUnavailable,
    EmailChoice,
    EmailCopied,
    EmailUnavailable,
    OverlayState,
)


class OverlayAction(StrEnum):
    COPY = "copy"
    DISMISS = "dismiss"
    COMPOSE = "compose"
    COPY_EMAIL = "copy_email"
    CANCEL = "cancel"


@dataclass(frozen=True)
class OverlayButton:
    label: str
    action: OverlayAction
    is_cancel: bool = False


@dataclass(frozen=True)
class OverlayContent:
    title: str
    message: str
    buttons: tuple[OverlayButton, ...] = ()


EMAIL_COPIED_MESSAGE = "Support email copied to clipboard."


def describe(state: OverlayState, target: ContactTarget) -> OverlayContent | None:
    """Return what the presentation layer should show for *state* (None: nothing)."""
    if isinstance(state, CallUnavailable):
        return OverlayContent(
            title="Call Not Available",
            message=f"This device cannot place calls. Support number: {target.phone_display}",
            buttons=(
                OverlayButton("Copy Number", OverlayAction.COPY),
                OverlayButton("OK", OverlayAction.DISMISS, is_cancel=True),
            ),
        )
    if isinstance(state, EmailUnavailable):
        return OverlayContent(
            title="Email Not Available",
            message=f"Could not open mail. Support email: {target.email}",
            buttons=(
                OverlayButton("Copy Email", OverlayAction.COPY),
                OverlayButton("OK", OverlayAction.DISMISS, is_cancel=True),
            ),
        )
    if isinstance(state, EmailChoice):
        return OverlayContent(
            title="Email Support",
            message="Choose an option",
            buttons=(
                OverlayButton("Compose Email", OverlayAction.COMPOSE),
                OverlayButton("Copy Email", OverlayAction.COPY_EMAIL),
                OverlayButton("Cancel", OverlayAction.CANCEL, is_cancel=True),
            ),
        )
    if isinstance(state, EmailCopied):
        return OverlayContent(title="", message=EMAIL_COPIED_MESSAGE)
    if isinstance(state, BlogUnavailable):
        return OverlayContent(
            title="Blog Unavailable",
            message="The blog link is misconfigured. Please try again later.",
            buttons=(OverlayButton("OK", OverlayAction.DISMISS, is_cancel=True),),
        )
    if isinstance(state, BlogPresented):
        return OverlayContent(
            title="Conquest Blog",
            message=state.url,
            buttons=(OverlayButton("Done", OverlayAction.DISMISS, is_cancel=True),),
        )
    return None
