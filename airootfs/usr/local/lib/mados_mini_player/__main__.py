#!/usr/bin/env python3
"""madOS Mini Player - Entry point.

Initializes GTK3, creates the player window and starts the GTK main loop.

Usage:
    python3 -m mados_mini_player
"""

import gi

gi.require_version("Gtk", "3.0")
from gi.repository import Gtk

from .app import MiniPlayerApp


def main():
    """Initialize and run the madOS Mini Player application."""
    MiniPlayerApp()
    Gtk.main()


if __name__ == "__main__":
    main()
