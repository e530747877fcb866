"""
madOS Mini Player - GStreamer Pipeline
=======================================

MediaPipeline implementation backed by a GStreamer ``playbin`` element.
Audio output goes to playbin's default (auto) sinks; the element handles
decoding of every format GStreamer has plugins for.
"""

import gi

GST_AVAILABLE = False
try:
    gi.require_version("Gst", "1.0")
    from gi.repository import Gst

    Gst.init(None)
    GST_AVAILABLE = True
except (ValueError, ImportError):
    pass

from .interfaces import MediaPipeline, PipelineError, PipelineState


class GstPipeline(MediaPipeline):
    """A playbin pipeline bound to one media URI.

    Errors posted on the bus are passed to ``on_error(message)`` if set.
    The bus signal watch needs a running GLib main loop (Gtk.main).
    """

    def __init__(self, on_error=None):
        if not GST_AVAILABLE:
            raise PipelineError("GStreamer is not available")

        self._element = Gst.ElementFactory.make("playbin", None)
        if self._element is None:
            raise PipelineError("GStreamer playbin element is not available")

        self.on_error = on_error

        self._bus = self._element.get_bus()
        self._bus.add_signal_watch()
        self._bus_handler = self._bus.connect("message::error", self._on_bus_error)

    @property
    def element(self):
        """The underlying playbin element, or None once released."""
        return self._element

    def open(self, uri):
        self._element.set_property("uri", uri)

    def set_state(self, state):
        self._element.set_state(_gst_state(state))

    def set_volume(self, fraction):
        self._element.set_property("volume", fraction)

    def seek_absolute(self, position_ns, flush=True):
        flags = Gst.SeekFlags.FLUSH if flush else Gst.SeekFlags.NONE
        self._element.seek(
            1.0,
            Gst.Format.TIME,
            flags,
            Gst.SeekType.SET,
            int(position_ns),
            Gst.SeekType.NONE,
            -1,
        )

    def query_position(self):
        success, position = self._element.query_position(Gst.Format.TIME)
        return position if success else None

    def query_duration(self):
        success, duration = self._element.query_duration(Gst.Format.TIME)
        return duration if success else None

    def release(self):
        """Disconnect from the bus and drop the element reference."""
        if self._element is None:
            return
        self._bus.disconnect(self._bus_handler)
        self._bus.remove_signal_watch()
        self._bus = None
        self._element = None

    # ------------------------------------------------------------------
    # Bus signal handlers
    # ------------------------------------------------------------------

    def _on_bus_error(self, bus, message):
        """Forward pipeline errors. Playback state is left as commanded."""
        err, _debug = message.parse_error()
        if self.on_error:
            self.on_error(err.message)


def _gst_state(state):
    """Map a PipelineState to the matching Gst.State."""
    if state == PipelineState.PLAYING:
        return Gst.State.PLAYING
    if state == PipelineState.PAUSED:
        return Gst.State.PAUSED
    return Gst.State.NULL


def create_pipeline(on_error=None):
    """Pipeline factory used by the window."""
    return GstPipeline(on_error=on_error)
