"""
madOS Mini Player - Theme
==========================

Pink window background with a large underlined title. Applied to the
default screen so the file chooser inherits it as well.
"""

import gi

gi.require_version("Gtk", "3.0")
from gi.repository import Gtk, Gdk

COLORS = {
    "background": "#FFC0CB",
    "text": "#2E3440",
    "accent": "#BF616A",
}

THEME_CSS = """
/* ===== madOS Mini Player ===== */

window {{
    background-color: {background};
    color: {text};
}}

/* Title label */
.title-label {{
    font-size: 44px;
    font-weight: bold;
    text-decoration: underline;
}}

/* Currently loaded file */
.file-label {{
    font-style: italic;
}}

/* Transport buttons */
.transport-btn {{
    min-width: 32px;
    min-height: 32px;
}}

.transport-btn:hover {{
    color: {accent};
}}
""".format(**COLORS)


def apply_theme():
    """Apply the theme CSS to the current GTK screen.

    Creates a CssProvider, loads the theme CSS, and applies it to
    the default Gdk.Screen with APPLICATION priority.
    """
    css_provider = Gtk.CssProvider()
    css_provider.load_from_data(THEME_CSS.encode('utf-8'))

    screen = Gdk.Screen.get_default()
    if screen:
        Gtk.StyleContext.add_provider_for_screen(
            screen,
            css_provider,
            Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION
        )
