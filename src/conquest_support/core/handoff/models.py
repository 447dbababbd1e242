"""Handoff request and outcome types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class HandoffKind(StrEnum):
    CALL = "call"
    EMAIL = "email"
    WEB_LINK = "web_link"


class RequestValidation(StrEnum):
    VALID = "valid"
    MALFORMED = "malformed"


class HandoffOutcome(StrEnum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"


@dataclass(frozen=True)
class HandoffRequest:
    """
    One handoff attempt: what kind, the URI handed to the OS, and whether
    the URI passed validation. A malformed request is never opened.
    """

    kind: HandoffKind
    uri: str
    validation: RequestValidation = RequestValidation.VALID
    reason: str = ""

    @property
    def is_valid(self) -> bool:
        return self.validation == RequestValidation.VALID

    @classmethod
    def malformed(cls, kind: HandoffKind, uri: str, reason: str) -> HandoffRequest:
        return cls(kind=kind, uri=uri, validation=RequestValidation.MALFORMED, reason=reason)
