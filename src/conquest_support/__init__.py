"""
Conquest Support — contact surface for the Conquest Solutions help desk.

One screen, two primary actions (call, email), a blog link and a services
list. The package holds the logic behind that screen: handing actions off
to the operating system, keeping exactly one overlay on screen at a time,
and reserving room for the pinned logo header.

Package layout (src/conquest_support/):
  core/handoff/  — handoff requests and the intent dispatcher
  core/overlay/  — single-active-overlay state machine and overlay copy
  core/layout/   — header reservation tracker
  os/            — clipboard and platform URL opener
  cli/           — Click CLI entry point (terminal rendering of the screen)
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
