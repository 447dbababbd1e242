"""Header space reservation for the pinned logo header."""

from conquest_support.core.layout.header import HeaderReservationTracker

__all__ = ["HeaderReservationTracker"]
