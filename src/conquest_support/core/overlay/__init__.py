"""
Single-active-overlay state machine.

Public API::

    from conquest_support.core.overlay import OverlayCoordinator, OverlayState
"""

from conquest_support.core.overlay.coordinator import OverlayCoordinator, StateListener
from conquest_support.core.overlay.state import (
    NO_OVERLAY,
    BlogPresented,
    BlogUnavailable,
    CallUnavailable,
    EmailChoice,
    EmailCopied,
    EmailUnavailable,
    NoOverlay,
    OverlayKind,
    OverlayState,
)

__all__ = [
    "NO_OVERLAY",
    "BlogPresented",
    "BlogUnavailable",
    "CallUnavailable",
    "EmailChoice",
    "EmailCopied",
    "EmailUnavailable",
    "NoOverlay",
    "OverlayCoordinator",
    "OverlayKind",
    "OverlayState",
    "StateListener",
]
