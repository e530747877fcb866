"""
madOS Mini Player
=================

A minimal audio player for madOS, built with PyGTK3 and a GStreamer
playbin pipeline. One file at a time: open, play/pause, seek, restart
and volume.

Package modules:
    - app: Main GTK3 window, implements the UI sink
    - controller: Playback session and controller (UI intent -> pipeline)
    - interfaces: Abstract media pipeline and UI sink contracts
    - pipeline: GStreamer playbin pipeline
    - mock_pipeline: In-memory pipeline for tests
    - config: Constants (window, volume, seek step)
    - theme: CSS styling for GTK3
"""

__version__ = "1.0.0"
__app_id__ = "mados-mini-player"
__app_name__ = "madOS Mini Player"
