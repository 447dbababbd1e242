"""
Header reservation tracker.

The pinned logo header has no fixed rendered height, so the rendering layer
reports a measurement every time layout settles. The tracker turns that
stream into the vertical offset the scrolling content uses:

  - measurements <= 0 are ignored (first frames before layout settles)
  - measurements above the sanity ceiling are ignored (full-screen glitches)
  - otherwise reserved = max(measurement, minimum fallback)

Rejected values leave the held value untouched.
"""

from __future__ import annotations

import logging

from conquest_support.core.config import LayoutConfig
from conquest_support.core.constants import MAX_REASONABLE_HEADER_HEIGHT, MINIMUM_RESERVED_HEIGHT

logger = logging.getLogger(__name__)


class HeaderReservationTracker:
    def __init__(
        self,
        minimum_fallback: float = MINIMUM_RESERVED_HEIGHT,
        ceiling: float = MAX_REASONABLE_HEADER_HEIGHT,
    ) -> None:
        if minimum_fallback < 0:
            raise ValueError("minimum_fallback must not be negative")
        if ceiling <= 0:
            raise ValueError("ceiling must be positive")
        self.minimum_fallback = minimum_fallback
        self.ceiling = ceiling
        self._measured: float | None = None
        self._reserved = minimum_fallback

    @classmethod
    def from_config(cls, config: LayoutConfig) -> HeaderReservationTracker:
        return cls(minimum_fallback=config.minimum_reserved, ceiling=config.header_ceiling)

    @property
    def reserved_height(self) -> float:
        return self._reserved

    @property
    def last_measurement(self) -> float | None:
        """Latest accepted raw measurement, or None before the first one."""
        return self._measured

    def accept(self, measurement: float) -> float | None:
        """
        Feed one raw header measurement.

        Returns the new reserved height when the measurement is accepted,
        None when it is rejected and the previous value stands.
        """
        if not measurement > 0:
            logger.debug("Ignoring header measurement %r: not positive", measurement)
            return None
        if measurement > self.ceiling:
            logger.debug(
                "Ignoring header measurement %r: above ceiling %r", measurement, self.ceiling
            )
            return None
        self._measured = measurement
        self._reserved = max(measurement, self.minimum_fallback)
        return self._reserved
