"""Keyboard input scripting, event dispatch and on-screen display data for Ballance tool-assisted runs."""

__version__ = "1.6.0"
__all__ = ["events", "history", "input", "overlay"]