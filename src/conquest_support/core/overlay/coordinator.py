"""
Overlay coordinator — the single-active-overlay state machine.

The coordinator owns the one OverlayState shown on top of the support
screen. User actions and handoff outcomes move it between states:

    request_call()        None -> (dispatch) -> None | CallUnavailable
    request_email_menu()  *    -> EmailChoice
    choose_compose()      EmailChoice -> None -> (dispatch) -> None | EmailUnavailable
    choose_copy()         EmailChoice -> EmailCopied -> (timer) -> None
    choose_cancel()       EmailChoice -> None
    request_blog(url)     *    -> BlogPresented(url) | BlogUnavailable
    copy()                CallUnavailable | EmailUnavailable -> None  (clipboard write)
    dismiss()             any dismissible overlay -> None

Every request_*/choose_* call preempts whatever is showing. Each of them
also starts a new generation; a handoff outcome from an older generation
is dropped so it can never replace a newer overlay. Any transition cancels
the EmailCopied auto-clear timer.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from functools import partial

from conquest_support.core.constants import EMAIL_COPIED_DISPLAY_SECONDS
from conquest_support.core.contact import ContactTarget
from conquest_support.core.exceptions import ClipboardError
from conquest_support.core.handoff import HandoffOutcome, IntentDispatcher
from conquest_support.core.overlay.state import (
    NO_OVERLAY,
    BlogPresented,
    BlogUnavailable,
    CallUnavailable,
    EmailChoice,
    EmailCopied,
    EmailUnavailable,
    NoOverlay,
    OverlayState,
    is_copyable,
    is_dismissible,
)
from conquest_support.os.clipboard import Clipboard

logger = logging.getLogger(__name__)

# (previous, current) -> None
StateListener = Callable[[OverlayState, OverlayState], None]


class OverlayCoordinator:
    """
    Holds the active overlay and applies transitions.

    Must be driven from a single asyncio event loop: handoffs run as tasks
    on the running loop and the auto-clear is a loop timer.

    Usage::

        coordinator = OverlayCoordinator(target, dispatcher, clipboard)
        coordinator.subscribe(lambda prev, cur: render(cur))
        task = coordinator.request_call()
        await task
    """

    def __init__(
        self,
        target: ContactTarget,
        dispatcher: IntentDispatcher,
        clipboard: Clipboard,
        *,
        copied_display_seconds: float = EMAIL_COPIED_DISPLAY_SECONDS,
    ) -> None:
        self._target = target
        self._dispatcher = dispatcher
        self._clipboard = clipboard
        self._copied_display_seconds = copied_display_seconds
        self._state: OverlayState = NO_OVERLAY
        self._generation = 0
        self._clear_handle: asyncio.TimerHandle | None = None
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> OverlayState:
        return self._state

    @property
    def target(self) -> ContactTarget:
        return self._target

    @property
    def auto_clear_pending(self) -> bool:
        return self._clear_handle is not None

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register *listener* for state changes; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # ------------------------------------------------------------------
    # Call
    # ------------------------------------------------------------------

    def request_call(self) -> asyncio.Task[HandoffOutcome] | None:
        generation = self._begin(NO_OVERLAY)
        request = self._dispatcher.build_call_request(self._target)
        if not request.is_valid:
            logger.error("Call request is malformed, not dialing: %s", request.reason)
            return None
        return self._dispatcher.dispatch(request, partial(self._on_call_outcome, generation))

    def _on_call_outcome(self, generation: int, outcome: HandoffOutcome) -> None:
        if self._is_stale(generation, "call"):
            return
        if outcome == HandoffOutcome.REJECTED:
            self._set_state(CallUnavailable())

    # ------------------------------------------------------------------
    # Email
    # ------------------------------------------------------------------

    def request_email_menu(self) -> None:
        self._begin(EmailChoice())

    def choose_compose(self) -> asyncio.Task[HandoffOutcome] | None:
        if not self._expect(EmailChoice, "compose"):
            return None
        generation = self._begin(NO_OVERLAY)
        request = self._dispatcher.build_email_request(self._target)
        if not request.is_valid:
            logger.error("Email request is malformed, not composing: %s", request.reason)
            self._set_state(EmailUnavailable())
            return None
        return self._dispatcher.dispatch(request, partial(self._on_email_outcome, generation))

    def _on_email_outcome(self, generation: int, outcome: HandoffOutcome) -> None:
        if self._is_stale(generation, "email"):
            return
        if outcome == HandoffOutcome.REJECTED:
            self._set_state(EmailUnavailable())
        else:
            self._set_state(NO_OVERLAY)

    def choose_copy(self) -> None:
        if not self._expect(EmailChoice, "copy"):
            return
        loop = asyncio.get_running_loop()
        self._begin(NO_OVERLAY)
        if not self._write_clipboard(self._target.email):
            return
        self._set_state(EmailCopied())
        self._clear_handle = loop.call_later(self._copied_display_seconds, self._auto_clear)

    def choose_cancel(self) -> None:
        if not self._expect(EmailChoice, "cancel"):
            return
        self._begin(NO_OVERLAY)

    def _auto_clear(self) -> None:
        self._clear_handle = None
        if isinstance(self._state, EmailCopied):
            self._set_state(NO_OVERLAY)

    # ------------------------------------------------------------------
    # Blog
    # ------------------------------------------------------------------

    def request_blog(self, raw_url: str | None = None) -> None:
        raw = self._target.blog_url if raw_url is None else raw_url
        request = self._dispatcher.build_web_request(raw)
        if not request.is_valid:
            logger.warning("Blog link %r is misconfigured: %s", raw, request.reason)
            self._begin(BlogUnavailable())
            return
        self._begin(BlogPresented(url=request.uri))

    # ------------------------------------------------------------------
    # Dismiss / copy fallback
    # ------------------------------------------------------------------

    def dismiss(self) -> None:
        if isinstance(self._state, NoOverlay):
            return
        if not is_dismissible(self._state):
            logger.debug("dismiss() ignored while %s is showing", self._state.kind)
            return
        self._set_state(NO_OVERLAY)

    def copy(self) -> bool:
        """Copy the number or address behind an "unavailable" overlay; True if it was copied."""
        if not is_copyable(self._state):
            logger.debug("copy() ignored while %s is showing", self._state.kind)
            return False
        if isinstance(self._state, CallUnavailable):
            text = self._target.phone_digits
        else:
            text = self._target.email
        copied = self._write_clipboard(text)
        self._set_state(NO_OVERLAY)
        return copied

    def close(self) -> None:
        """Cancel the pending auto-clear timer, if any."""
        self._cancel_auto_clear()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _begin(self, state: OverlayState) -> int:
        """Start a new user action: bump the generation and preempt the current overlay."""
        self._generation += 1
        self._set_state(state)
        return self._generation

    def _is_stale(self, generation: int, what: str) -> bool:
        if generation != self._generation:
            logger.info(
                "Dropping %s handoff outcome: superseded (generation %d, now %d)",
                what,
                generation,
                self._generation,
            )
            return True
        return False

    def _expect(self, state_type: type, action: str) -> bool:
        if isinstance(self._state, state_type):
            return True
        logger.debug("%s ignored: overlay is %s", action, self._state.kind)
        return False

    def _write_clipboard(self, text: str) -> bool:
        try:
            self._clipboard.write(text)
        except ClipboardError as exc:
            logger.error("Clipboard write failed: %s", exc)
            return False
        return True

    def _cancel_auto_clear(self) -> None:
        if self._clear_handle is not None:
            self._clear_handle.cancel()
            self._clear_handle = None

    def _set_state(self, state: OverlayState) -> None:
        self._cancel_auto_clear()
        previous = self._state
        self._state = state
        if previous == state:
            return
        logger.debug("Overlay %s -> %s", previous.kind, state.kind)
        for listener in list(self._listeners):
            try:
                listener(previous, state)
            except Exception as exc:  # noqa: BLE001
                logger.error("Overlay listener failed: %s", exc)
