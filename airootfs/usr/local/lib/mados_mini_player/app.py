"""
madOS Mini Player - Main Application Window
============================================

Small fixed-size GTK3 window: a File menu, the loaded file name,
transport buttons (play/pause, seek backward, seek forward, restart)
and a volume slider.

The window implements the UI sink for the playback controller. Widget
handlers only translate GTK events into controller calls; all playback
state lives in the controller's session.
"""

import os

import gi
gi.require_version('Gtk', '3.0')
gi.require_version('Gdk', '3.0')
from gi.repository import Gtk, Gdk, GLib

from . import __app_id__, __app_name__
from .config import (
    AUDIO_EXTENSIONS,
    ICON_RESTART,
    ICON_SEEK_BACKWARD,
    ICON_SEEK_FORWARD,
    NO_FILE_TEXT,
    TITLE_TEXT,
    VOLUME_KEY_STEP,
    VOLUME_MAX,
    VOLUME_MIN,
    VOLUME_STEP,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)
from .controller import PlaybackController
from .interfaces import PlaybackIcon, UISink
from .pipeline import create_pipeline
from .theme import apply_theme


class MiniPlayerApp(UISink):
    """Main application class for the madOS Mini Player.

    Args:
        pipeline_factory: Optional callable returning a new MediaPipeline.
            Defaults to a GStreamer playbin pipeline whose errors are
            printed to stdout.
    """

    def __init__(self, pipeline_factory=None):
        if pipeline_factory is None:
            pipeline_factory = self._create_pipeline
        self.controller = PlaybackController(self, pipeline_factory)

        apply_theme()

        self._build_window()
        self._build_ui()

        # Label already set by initial_volume_display
        initial = self.controller.initial_volume_display()
        self.volume_scale.handler_block(self._volume_handler)
        self.volume_scale.set_value(initial)
        self.volume_scale.handler_unblock(self._volume_handler)

        self.window.show_all()

    def _create_pipeline(self):
        return create_pipeline(on_error=self._on_pipeline_error)

    # ─── Window Setup ───────────────────────────────────────────

    def _build_window(self):
        """Create and configure the main window."""
        self.window = Gtk.Window(type=Gtk.WindowType.TOPLEVEL)
        self.window.set_title(WINDOW_TITLE)
        self.window.set_resizable(False)
        self.window.set_default_size(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.window.set_wmclass(__app_id__, __app_name__)
        self.window.set_icon_name("audio-x-generic")

        self.window.connect("destroy", self._on_destroy)
        self.window.connect("key-press-event", self._on_key_press)

        # Accept files dropped from a file manager
        self.window.drag_dest_set(
            Gtk.DestDefaults.ALL,
            [Gtk.TargetEntry.new("text/uri-list", 0, 0)],
            Gdk.DragAction.COPY
        )
        self.window.connect("drag-data-received", self._on_drag_data)

    def _build_ui(self):
        """Build the complete user interface."""
        vbox = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=5)
        self.window.add(vbox)

        vbox.pack_start(self._build_menu_bar(), False, False, 0)

        title_label = Gtk.Label(label=TITLE_TEXT)
        title_label.set_xalign(0.5)
        title_label.get_style_context().add_class("title-label")
        vbox.pack_start(title_label, False, False, 0)

        self.file_label = Gtk.Label(label=NO_FILE_TEXT)
        self.file_label.get_style_context().add_class("file-label")
        vbox.pack_start(self.file_label, False, False, 0)

        vbox.pack_start(self._build_controls(), False, False, 0)

        self.volume_label = Gtk.Label(label="")
        vbox.pack_start(self.volume_label, False, False, 0)

        self.volume_scale = Gtk.Scale.new_with_range(
            Gtk.Orientation.HORIZONTAL, VOLUME_MIN, VOLUME_MAX, VOLUME_STEP
        )
        self.volume_scale.set_value_pos(Gtk.PositionType.TOP)
        self._volume_handler = self.volume_scale.connect(
            "value-changed", self._on_volume_changed
        )
        vbox.pack_start(self.volume_scale, False, False, 0)

    def _build_menu_bar(self):
        """Build the File menu with its Open File item."""
        menu_bar = Gtk.MenuBar()
        file_menu = Gtk.Menu()

        file_item = Gtk.MenuItem(label="File")
        file_item.set_submenu(file_menu)

        open_item = Gtk.MenuItem(label="Open File")
        open_item.connect("activate", self._on_open_file_activate)
        file_menu.append(open_item)

        menu_bar.append(file_item)
        return menu_bar

    def _build_controls(self):
        """Build the centered row of transport buttons."""
        box = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=5)
        box.set_halign(Gtk.Align.CENTER)

        self.play_pause_button = self._make_transport_button(
            PlaybackIcon.PLAY.value, "Play/Pause"
        )
        self.play_pause_button.connect("clicked", self._on_play_pause_clicked)
        box.pack_start(self.play_pause_button, False, False, 0)

        seek_backward_button = self._make_transport_button(
            ICON_SEEK_BACKWARD, "Back 10 seconds"
        )
        seek_backward_button.connect("clicked", self._on_seek_backward_clicked)
        box.pack_start(seek_backward_button, False, False, 0)

        seek_forward_button = self._make_transport_button(
            ICON_SEEK_FORWARD, "Forward 10 seconds"
        )
        seek_forward_button.connect("clicked", self._on_seek_forward_clicked)
        box.pack_start(seek_forward_button, False, False, 0)

        restart_button = self._make_transport_button(ICON_RESTART, "Restart")
        restart_button.connect("clicked", self._on_restart_clicked)
        box.pack_start(restart_button, False, False, 0)

        return box

    def _make_transport_button(self, icon_name, tooltip):
        """Create an icon button with the transport style class."""
        button = Gtk.Button()
        button.set_image(
            Gtk.Image.new_from_icon_name(icon_name, Gtk.IconSize.BUTTON)
        )
        button.set_tooltip_text(tooltip)
        button.get_style_context().add_class("transport-btn")
        return button

    # ─── UI Sink ────────────────────────────────────────────────

    def set_file_label(self, text):
        self.file_label.set_text(text)

    def set_play_pause_icon(self, icon):
        self.play_pause_button.set_image(
            Gtk.Image.new_from_icon_name(icon.value, Gtk.IconSize.BUTTON)
        )

    def set_volume_label(self, text):
        self.volume_label.set_text(text)

    # ─── File Handlers ──────────────────────────────────────────

    def _on_open_file_activate(self, menu_item):
        """Ask for a file and start playing it."""
        filename = self._choose_file()
        if filename:
            self.controller.open_file(filename)

    def _choose_file(self):
        """Run the open dialog.

        Returns:
            The chosen absolute path, or None if cancelled.
        """
        dialog = Gtk.FileChooserDialog(
            title="Open File",
            parent=self.window,
            action=Gtk.FileChooserAction.OPEN,
        )
        dialog.add_buttons(
            "Cancel", Gtk.ResponseType.CANCEL,
            "Open", Gtk.ResponseType.ACCEPT,
        )

        audio_filter = Gtk.FileFilter()
        audio_filter.set_name("Audio files")
        for ext in sorted(AUDIO_EXTENSIONS):
            audio_filter.add_pattern(f"*{ext}")
        dialog.add_filter(audio_filter)

        all_filter = Gtk.FileFilter()
        all_filter.set_name("All files")
        all_filter.add_pattern("*")
        dialog.add_filter(all_filter)

        filename = None
        if dialog.run() == Gtk.ResponseType.ACCEPT:
            filename = dialog.get_filename()
        dialog.destroy()
        return filename

    def _on_drag_data(self, widget, context, x, y, data, info, time):
        """Open the first local file dropped onto the window."""
        for uri in data.get_uris():
            try:
                filepath = GLib.filename_from_uri(uri)[0]
            except GLib.Error:
                continue
            if os.path.isfile(filepath):
                self.controller.open_file(filepath)
                return

    # ─── Transport Handlers ─────────────────────────────────────

    def _on_play_pause_clicked(self, button):
        self.controller.toggle_play_pause()

    def _on_seek_forward_clicked(self, button):
        self.controller.seek_forward()

    def _on_seek_backward_clicked(self, button):
        self.controller.seek_backward()

    def _on_restart_clicked(self, button):
        self.controller.restart()

    # ─── Volume Handlers ────────────────────────────────────────

    def _on_volume_changed(self, scale):
        """Handle volume slider change."""
        self.controller.set_volume(scale.get_value())

    def _nudge_volume(self, step):
        """Move the slider by *step*; the slider signal does the rest."""
        value = self.volume_scale.get_value() + step
        self.volume_scale.set_value(max(VOLUME_MIN, min(VOLUME_MAX, value)))

    # ─── Keyboard ───────────────────────────────────────────────

    def _on_key_press(self, widget, event):
        """Handle keyboard shortcuts."""
        key = event.keyval
        ctrl = event.state & Gdk.ModifierType.CONTROL_MASK

        # Ctrl+O - open file
        if ctrl and key in (Gdk.KEY_o, Gdk.KEY_O):
            self._on_open_file_activate(None)
            return True

        if key == Gdk.KEY_space:
            self.controller.toggle_play_pause()
            return True

        if key == Gdk.KEY_Right:
            self.controller.seek_forward()
            return True

        if key == Gdk.KEY_Left:
            self.controller.seek_backward()
            return True

        if key == Gdk.KEY_Home:
            self.controller.restart()
            return True

        if key == Gdk.KEY_Up:
            self._nudge_volume(VOLUME_KEY_STEP)
            return True

        if key == Gdk.KEY_Down:
            self._nudge_volume(-VOLUME_KEY_STEP)
            return True

        return False

    # ─── Errors & Cleanup ───────────────────────────────────────

    def _on_pipeline_error(self, message):
        """Report errors posted by the pipeline."""
        print(f"Playback error: {message}")

    def _on_destroy(self, widget):
        """Release the pipeline and leave the main loop."""
        self.controller.shutdown()
        Gtk.main_quit()
