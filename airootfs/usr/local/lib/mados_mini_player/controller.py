"""
madOS Mini Player - Playback Controller
========================================

Coordinates UI intent (open, play/pause, seek, restart, volume) with a
media pipeline and pushes the resulting display state to a UI sink.

All methods run on the GTK main thread in response to a single user
action. Pipeline commands are fire-and-forget: PLAYING is commanded,
not confirmed.

Ownership:
    The session owns at most one pipeline. Opening a new file stops
    (NULL state) and releases the current pipeline before the
    replacement is constructed, so two output pipelines never coexist.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from .config import (
    DEFAULT_VOLUME_PERCENT,
    NO_FILE_TEXT,
    SEEK_STEP_SECONDS,
    VOLUME_LABEL_FORMAT,
)
from .interfaces import (
    MediaPipeline,
    PipelineError,
    PipelineState,
    PlaybackIcon,
    UISink,
)

# Nanoseconds per second (same unit as Gst.SECOND)
SECOND = 1_000_000_000


def path_to_uri(path):
    """Build a file:// URI from a local filesystem path.

    Args:
        path: Local path; relative paths are made absolute.

    Returns:
        Percent-escaped URI string, e.g. "file:///music/My%20Song.mp3".
    """
    return Path(os.path.abspath(path)).as_uri()


def format_volume(percent):
    """Format the volume label text, e.g. "Volume: 70%"."""
    return VOLUME_LABEL_FORMAT.format(percent=percent)


@dataclass
class PlaybackSession:
    """The single mutable unit of playback state.

    Attributes:
        pipeline: The active pipeline, exclusively owned, or None.
        is_playing: Last commanded state (PLAYING vs PAUSED). Not read
            back from the pipeline.
        volume_percent: Last volume set from the slider (0-100).
    """

    pipeline: Optional[MediaPipeline] = None
    is_playing: bool = False
    volume_percent: float = DEFAULT_VOLUME_PERCENT

    @property
    def has_pipeline(self) -> bool:
        return self.pipeline is not None

    def release_pipeline(self) -> None:
        """Stop and release the active pipeline, if any."""
        pipeline, self.pipeline = self.pipeline, None
        if pipeline is None:
            return
        pipeline.set_state(PipelineState.NULL)
        pipeline.release()
        self.is_playing = False


class PlaybackController:
    """Forwards user actions to the session's pipeline.

    Every pipeline-dependent operation is a silent no-op while no
    pipeline is loaded.
    """

    def __init__(self, sink: UISink,
                 pipeline_factory: Callable[[], MediaPipeline],
                 session: Optional[PlaybackSession] = None):
        self.sink = sink
        self._pipeline_factory = pipeline_factory
        self.session = session if session is not None else PlaybackSession()

    # ─── Open ───────────────────────────────────────────────────

    def open_file(self, path) -> bool:
        """Replace the current pipeline with one playing *path*.

        The file is not checked for existence; the pipeline reports
        problems on its own.

        Returns:
            True if a new pipeline was built and started, False if the
            pipeline could not be constructed.
        """
        uri = path_to_uri(path)
        had_pipeline = self.session.has_pipeline

        # Destroy-then-construct: the old pipeline is gone before the new
        # one exists, even if construction fails.
        self.session.release_pipeline()

        pipeline = None
        try:
            pipeline = self._pipeline_factory()
            pipeline.open(uri)
        except PipelineError as e:
            if pipeline is not None:
                pipeline.release()
            print(f"Could not open {path}: {e}")
            if had_pipeline:
                self.sink.set_file_label(NO_FILE_TEXT)
                self.sink.set_play_pause_icon(PlaybackIcon.PLAY)
            return False

        self.session.pipeline = pipeline
        self.sink.set_file_label(os.path.basename(path))
        self.apply_playback_state(True)
        return True

    # ─── Transport ──────────────────────────────────────────────

    def apply_playback_state(self, playing: bool) -> None:
        """Command PLAYING or PAUSED and keep flag and icon in step."""
        pipeline = self.session.pipeline
        if pipeline is None:
            return
        if playing:
            pipeline.set_state(PipelineState.PLAYING)
            icon = PlaybackIcon.PAUSE
        else:
            pipeline.set_state(PipelineState.PAUSED)
            icon = PlaybackIcon.PLAY
        self.session.is_playing = playing
        self.sink.set_play_pause_icon(icon)

    def toggle_play_pause(self) -> None:
        """Pause if playing, play if paused."""
        if not self.session.has_pipeline:
            return
        self.apply_playback_state(not self.session.is_playing)

    def restart(self) -> None:
        """Flush-seek back to the start. Play/pause state is unchanged."""
        pipeline = self.session.pipeline
        if pipeline is None:
            return
        pipeline.seek_absolute(0, flush=True)

    def seek_relative(self, delta_seconds) -> bool:
        """Seek by *delta_seconds* from the current position.

        The seek is dropped (not clamped) unless the target lies strictly
        between 0 and the duration.

        Returns:
            True if a seek was issued.
        """
        pipeline = self.session.pipeline
        if pipeline is None:
            return False

        position = pipeline.query_position()
        duration = pipeline.query_duration()
        if position is None or duration is None:
            return False

        new_pos = position + int(delta_seconds * SECOND)
        if not 0 < new_pos < duration:
            return False

        pipeline.seek_absolute(new_pos, flush=True)
        return True

    def seek_forward(self) -> bool:
        return self.seek_relative(SEEK_STEP_SECONDS)

    def seek_backward(self) -> bool:
        return self.seek_relative(-SEEK_STEP_SECONDS)

    # ─── Volume ─────────────────────────────────────────────────

    def set_volume(self, percent) -> None:
        """Forward the slider value to the pipeline and update the label.

        The slider guarantees the 0-100 range, nothing is clamped here.
        The label is updated even when no pipeline is loaded.
        """
        self.session.volume_percent = percent
        pipeline = self.session.pipeline
        if pipeline is not None:
            pipeline.set_volume(percent / 100.0)
        self.sink.set_volume_label(format_volume(percent))

    def initial_volume_display(self):
        """Show the default volume at startup.

        Returns:
            The default volume percent, for positioning the slider.
        """
        self.session.volume_percent = DEFAULT_VOLUME_PERCENT
        self.sink.set_volume_label(format_volume(DEFAULT_VOLUME_PERCENT))
        return DEFAULT_VOLUME_PERCENT

    # ─── Cleanup ────────────────────────────────────────────────

    def shutdown(self) -> None:
        """Release the active pipeline before exit."""
        self.session.release_pipeline()
