"""
Intent dispatcher — builds handoff requests and hands them to the OS.

The OS capability is injected as a URLOpener. Whether the OS accepted the
handoff is only known asynchronously, so ``dispatch()`` schedules the
attempt on the running event loop and delivers the outcome to a
continuation exactly once::

    dispatcher = IntentDispatcher(opener=SystemURLOpener())
    request = dispatcher.build_call_request(target)
    task = dispatcher.dispatch(request, lambda outcome: print(outcome))

A rejected handoff (no dialer, no mail client) is an expected outcome, not
an error: ``dispatch()`` never raises for it.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from typing import Protocol
from urllib.parse import quote, urlencode, urlsplit

from conquest_support.core.constants import EMAIL_BODY_SEPARATOR
from conquest_support.core.contact import ContactTarget
from conquest_support.core.handoff.models import HandoffKind, HandoffOutcome, HandoffRequest

logger = logging.getLogger(__name__)

# Outcome callback type alias
Continuation = Callable[[HandoffOutcome], None]


class URLOpener(Protocol):
    """Host capability that opens a URI; returns True if the OS accepted it."""

    async def open(self, uri: str) -> bool: ...


class IntentDispatcher:
    """Builds validated handoff requests and attempts them through a URLOpener."""

    def __init__(self, opener: URLOpener) -> None:
        self._opener = opener
        self._pending: set[asyncio.Task[HandoffOutcome]] = set()

    # ------------------------------------------------------------------
    # Request construction
    # ------------------------------------------------------------------

    def build_call_request(self, target: ContactTarget) -> HandoffRequest:
        digits = target.phone_digits
        uri = f"tel://{digits}"
        if not digits:
            return HandoffRequest.malformed(
                HandoffKind.CALL, uri, f"no digits in phone number {target.phone_display!r}"
            )
        return HandoffRequest(kind=HandoffKind.CALL, uri=uri)

    def build_email_request(
        self,
        target: ContactTarget,
        subject: str | None = None,
        body_lines: Sequence[str] | None = None,
    ) -> HandoffRequest:
        subject = target.email_subject if subject is None else subject
        lines = target.email_body_lines if body_lines is None else body_lines
        body = EMAIL_BODY_SEPARATOR.join(lines)

        address = target.email.strip()
        if not address:
            return HandoffRequest.malformed(HandoffKind.EMAIL, "mailto:", "empty email address")

        try:
            path = quote(address, safe="@")
            query = urlencode({"subject": subject, "body": body}, quote_via=quote)
        except UnicodeEncodeError as exc:
            return HandoffRequest.malformed(
                HandoffKind.EMAIL, f"mailto:{address}", f"cannot encode email fields: {exc}"
            )
        return HandoffRequest(kind=HandoffKind.EMAIL, uri=f"mailto:{path}?{query}")

    def build_web_request(self, raw: str) -> HandoffRequest:
        candidate = raw.strip()
        if not candidate or any(ch.isspace() for ch in candidate):
            return HandoffRequest.malformed(HandoffKind.WEB_LINK, raw, "not a URL")
        try:
            parts = urlsplit(candidate)
        except ValueError as exc:
            return HandoffRequest.malformed(HandoffKind.WEB_LINK, raw, f"cannot parse URL: {exc}")
        if not parts.scheme:
            return HandoffRequest.malformed(HandoffKind.WEB_LINK, raw, "URL has no scheme")
        return HandoffRequest(kind=HandoffKind.WEB_LINK, uri=candidate)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    async def attempt(self, request: HandoffRequest) -> HandoffOutcome:
        """Open *request* through the OS and return the outcome. Never raises."""
        if not request.is_valid:
            logger.warning(
                "Refusing malformed %s handoff %r: %s", request.kind, request.uri, request.reason
            )
            return HandoffOutcome.REJECTED

        try:
            accepted = await self._opener.open(request.uri)
        except asyncio.CancelledError:
            raise
        except Exception as exc:  # noqa: BLE001
            logger.warning("Handoff %s raised in opener: %s", request.kind, exc)
            return HandoffOutcome.REJECTED

        outcome = HandoffOutcome.ACCEPTED if accepted else HandoffOutcome.REJECTED
        logger.info("Handoff %s %s: %s", request.kind, outcome, request.uri)
        return outcome

    def dispatch(
        self, request: HandoffRequest, continuation: Continuation
    ) -> asyncio.Task[HandoffOutcome]:
        """
        Schedule *request* on the running loop; call *continuation* once with
        the outcome when the attempt completes.
        """

        async def _run() -> HandoffOutcome:
            outcome = await self.attempt(request)
            try:
                continuation(outcome)
            except Exception as exc:  # noqa: BLE001
                logger.error("Handoff continuation for %s failed: %s", request.kind, exc)
            return outcome

        task = asyncio.get_running_loop().create_task(_run(), name=f"handoff_{request.kind}")
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    @property
    def pending(self) -> int:
        """Number of handoffs still waiting for the OS."""
        return len(self._pending)

    async def drain(self) -> None:
        """Wait until every scheduled handoff has reported its outcome."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
