"""
Handoff of contact actions to the host operating system.

Public API::

    from conquest_support.core.handoff import HandoffOutcome, HandoffRequest, IntentDispatcher
"""

from conquest_support.core.handoff.dispatcher import IntentDispatcher, URLOpener
from conquest_support.core.handoff.models import (
    HandoffKind,
    HandoffOutcome,
    HandoffRequest,
    RequestValidation,
)

__all__ = [
    "HandoffKind",
    "HandoffOutcome",
    "HandoffRequest",
    "IntentDispatcher",
    "RequestValidation",
    "URLOpener",
]
