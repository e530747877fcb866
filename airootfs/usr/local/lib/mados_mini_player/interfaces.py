"""madOS Mini Player - Abstract interfaces.

Defines the contracts between the playback controller and its two
collaborators: the media pipeline (GStreamer in production) and the UI
sink (the GTK window). Both can be replaced with in-memory doubles for
testing without GTK or audio hardware.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional


class PipelineError(Exception):
    """Raised when a media pipeline cannot be built or bound to a source."""


class PipelineState(Enum):
    """States a pipeline can be commanded into."""

    NULL = "null"
    PAUSED = "paused"
    PLAYING = "playing"


class PlaybackIcon(Enum):
    """Icon shown on the play/pause button (value is the icon name)."""

    PLAY = "media-playback-start"
    PAUSE = "media-playback-pause"


class MediaPipeline(ABC):
    """A playback engine bound to one media source."""

    @abstractmethod
    def open(self, uri: str) -> None:
        """Bind the pipeline to a media URI."""

    @abstractmethod
    def set_state(self, state: PipelineState) -> None:
        """Command a state transition. Completion is not awaited."""

    @abstractmethod
    def set_volume(self, fraction: float) -> None:
        """Set the output volume (0.0 to 1.0)."""

    @abstractmethod
    def seek_absolute(self, position_ns: int, flush: bool = True) -> None:
        """Seek to an absolute position in nanoseconds at normal rate."""

    @abstractmethod
    def query_position(self) -> Optional[int]:
        """Current position in nanoseconds, or None if the query fails."""

    @abstractmethod
    def query_duration(self) -> Optional[int]:
        """Stream duration in nanoseconds, or None if the query fails."""

    @abstractmethod
    def release(self) -> None:
        """Drop all resources held by the pipeline."""


class UISink(ABC):
    """Display updates pushed by the controller."""

    @abstractmethod
    def set_file_label(self, text: str) -> None:
        """Show the name of the loaded file."""

    @abstractmethod
    def set_play_pause_icon(self, icon: PlaybackIcon) -> None:
        """Show the given icon on the play/pause button."""

    @abstractmethod
    def set_volume_label(self, text: str) -> None:
        """Show the volume label text."""
