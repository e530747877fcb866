"""madOS Mini Player - Mock pipeline for testing.

Provides an in-memory MediaPipeline that records every command instead of
playing audio, so the controller can be exercised without GStreamer.
"""

from typing import List, Optional

from .interfaces import MediaPipeline, PipelineError, PipelineState


class MockMediaPipeline(MediaPipeline):
    """Mock implementation for unit testing.

    Attributes:
        calls: Ordered list of (method, args) tuples.
        position: Value returned by query_position (None = query fails).
        duration: Value returned by query_duration (None = query fails).
        live: Class-level list of instances not yet released.
    """

    live: List["MockMediaPipeline"] = []

    def __init__(self, position: Optional[int] = 0,
                 duration: Optional[int] = None, fail_open: bool = False):
        self.calls = []
        self.uri = None
        self.state = PipelineState.NULL
        self.volume = 1.0
        self.position = position
        self.duration = duration
        self.fail_open = fail_open
        self.released = False
        MockMediaPipeline.live.append(self)

    @classmethod
    def reset(cls) -> None:
        """Forget all tracked instances."""
        cls.live = []

    def open(self, uri):
        self.calls.append(("open", (uri,)))
        if self.fail_open:
            raise PipelineError(f"cannot open {uri}")
        self.uri = uri

    def set_state(self, state):
        self.calls.append(("set_state", (state,)))
        self.state = state

    def set_volume(self, fraction):
        self.calls.append(("set_volume", (fraction,)))
        self.volume = fraction

    def seek_absolute(self, position_ns, flush=True):
        self.calls.append(("seek_absolute", (position_ns, flush)))
        self.position = position_ns

    def query_position(self):
        self.calls.append(("query_position", ()))
        return self.position

    def query_duration(self):
        self.calls.append(("query_duration", ()))
        return self.duration

    def release(self):
        self.calls.append(("release", ()))
        self.released = True
        if self in MockMediaPipeline.live:
            MockMediaPipeline.live.remove(self)

    def method_names(self):
        """Names of the recorded calls, in order."""
        return [name for name, _args in self.calls]

    def seeks(self):
        """Arguments of every seek_absolute call."""
        return [args for name, args in self.calls if name == "seek_absolute"]
