#!/usr/bin/env python3
"""
Tests for the madOS Mini Player GStreamer pipeline.

The Gst module is replaced with a MagicMock so playbin calls can be
inspected without GStreamer plugins or an audio device.
"""

import os
import sys
import unittest
from unittest.mock import patch, MagicMock

# ---------------------------------------------------------------------------
# Mock gi / gi.repository so player modules can be imported headlessly.
# ---------------------------------------------------------------------------
sys.path.insert(0, os.path.dirname(__file__))
from test_helpers import install_gtk_mocks
install_gtk_mocks()

from mados_mini_player import pipeline as pipeline_mod
from mados_mini_player.pipeline import GstPipeline, create_pipeline
from mados_mini_player.interfaces import PipelineError, PipelineState


class _GstTestCase(unittest.TestCase):
    """Patches Gst with a MagicMock and builds a GstPipeline."""

    def setUp(self):
        self.gst = MagicMock(name="Gst")
        self.element = self.gst.ElementFactory.make.return_value
        self.bus = self.element.get_bus.return_value
        patchers = [
            patch.object(pipeline_mod, "Gst", self.gst, create=True),
            patch.object(pipeline_mod, "GST_AVAILABLE", True),
        ]
        for p in patchers:
            p.start()
            self.addCleanup(p.stop)


# ═══════════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════════
class TestConstruction(_GstTestCase):
    """Verify playbin creation and bus wiring."""

    def test_makes_playbin(self):
        GstPipeline()
        self.gst.ElementFactory.make.assert_called_once_with("playbin", None)

    def test_bus_watch_installed(self):
        GstPipeline()
        self.bus.add_signal_watch.assert_called_once()
        self.bus.connect.assert_called_once()
        self.assertEqual(self.bus.connect.call_args[0][0], "message::error")

    def test_missing_playbin_raises(self):
        self.gst.ElementFactory.make.return_value = None
        with self.assertRaises(PipelineError):
            GstPipeline()

    def test_gstreamer_unavailable_raises(self):
        with patch.object(pipeline_mod, "GST_AVAILABLE", False):
            with self.assertRaises(PipelineError):
                GstPipeline()

    def test_factory_passes_error_callback(self):
        callback = MagicMock()
        p = create_pipeline(on_error=callback)
        self.assertIsInstance(p, GstPipeline)
        self.assertIs(p.on_error, callback)


# ═══════════════════════════════════════════════════════════════════════════
# Commands
# ═══════════════════════════════════════════════════════════════════════════
class TestCommands(_GstTestCase):
    """Verify commands map onto playbin properties and calls."""

    def setUp(self):
        super().setUp()
        self.pipeline = GstPipeline()

    def test_open_sets_uri(self):
        self.pipeline.open("file:///music/song.mp3")
        self.element.set_property.assert_called_with("uri", "file:///music/song.mp3")

    def test_set_state_playing(self):
        self.pipeline.set_state(PipelineState.PLAYING)
        self.element.set_state.assert_called_with(self.gst.State.PLAYING)

    def test_set_state_paused(self):
        self.pipeline.set_state(PipelineState.PAUSED)
        self.element.set_state.assert_called_with(self.gst.State.PAUSED)

    def test_set_state_null(self):
        self.pipeline.set_state(PipelineState.NULL)
        self.element.set_state.assert_called_with(self.gst.State.NULL)

    def test_set_volume(self):
        self.pipeline.set_volume(0.7)
        self.element.set_property.assert_called_with("volume", 0.7)

    def test_flush_seek(self):
        self.pipeline.seek_absolute(5_000_000_000)
        self.element.seek.assert_called_once_with(
            1.0,
            self.gst.Format.TIME,
            self.gst.SeekFlags.FLUSH,
            self.gst.SeekType.SET,
            5_000_000_000,
            self.gst.SeekType.NONE,
            -1,
        )

    def test_seek_without_flush(self):
        self.pipeline.seek_absolute(0, flush=False)
        args = self.element.seek.call_args[0]
        self.assertIs(args[2], self.gst.SeekFlags.NONE)

    def test_seek_position_is_int(self):
        self.pipeline.seek_absolute(1.5e9)
        args = self.element.seek.call_args[0]
        self.assertEqual(args[4], 1_500_000_000)
        self.assertIsInstance(args[4], int)


# ═══════════════════════════════════════════════════════════════════════════
# Queries
# ═══════════════════════════════════════════════════════════════════════════
class TestQueries(_GstTestCase):
    """Verify position/duration queries."""

    def setUp(self):
        super().setUp()
        self.pipeline = GstPipeline()

    def test_position(self):
        self.element.query_position.return_value = (True, 42)
        self.assertEqual(self.pipeline.query_position(), 42)
        self.element.query_position.assert_called_with(self.gst.Format.TIME)

    def test_position_failure(self):
        self.element.query_position.return_value = (False, 0)
        self.assertIsNone(self.pipeline.query_position())

    def test_duration(self):
        self.element.query_duration.return_value = (True, 100)
        self.assertEqual(self.pipeline.query_duration(), 100)

    def test_duration_failure(self):
        self.element.query_duration.return_value = (False, -1)
        self.assertIsNone(self.pipeline.query_duration())


# ═══════════════════════════════════════════════════════════════════════════
# Release and bus errors
# ═══════════════════════════════════════════════════════════════════════════
class TestRelease(_GstTestCase):
    """Verify resources are dropped on release."""

    def setUp(self):
        super().setUp()
        self.pipeline = GstPipeline()

    def test_release_removes_bus_watch(self):
        self.pipeline.release()
        self.bus.remove_signal_watch.assert_called_once()
        self.bus.disconnect.assert_called_once_with(self.bus.connect.return_value)

    def test_release_drops_element(self):
        self.pipeline.release()
        self.assertIsNone(self.pipeline.element)

    def test_release_twice(self):
        self.pipeline.release()
        self.pipeline.release()
        self.bus.remove_signal_watch.assert_called_once()


class TestBusErrors(_GstTestCase):
    """Verify bus errors reach the callback."""

    def _error_message(self, text):
        err = MagicMock()
        err.message = text
        message = MagicMock()
        message.parse_error.return_value = (err, "debug info")
        return message

    def test_error_forwarded(self):
        callback = MagicMock()
        p = GstPipeline(on_error=callback)
        p._on_bus_error(self.bus, self._error_message("Resource not found."))
        callback.assert_called_once_with("Resource not found.")

    def test_error_without_callback(self):
        p = GstPipeline()
        p._on_bus_error(self.bus, self._error_message("boom"))


if __name__ == "__main__":
    unittest.main()
