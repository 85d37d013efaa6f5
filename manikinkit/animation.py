"""Animations: named tracks played back at a frame rate."""

from __future__ import annotations

from .animation_track import AnimationTrack


class Animation:
    """A set of named tracks sharing a frame count, frame rate and looping flag."""

    def __init__(self, frame_count: int, frame_rate: float, looping: bool = False):
        self.playing = False
        self.looping = looping
        self.elapsed_time = 0.0
        self._frame_count = frame_count
        self._frame_rate = max(float(frame_rate), 0.0)
        self._tracks: dict[str, AnimationTrack] = {}

    @property
    def tracks(self) -> dict[str, AnimationTrack]:
        """A copy of the tracks by name."""
        return dict(self._tracks)

    @property
    def frame_count(self) -> int:
        return self._frame_count

    @frame_count.setter
    def frame_count(self, frames: int) -> None:
        self._frame_count = frames
        for track in self._tracks.values():
            track.set_frame_count(frames)

    @property
    def frame_rate(self) -> float:
        return self._frame_rate

    @frame_rate.setter
    def frame_rate(self, frames_per_second: float) -> None:
        """Change the rate while keeping the current frame position."""
        frame_time = self.elapsed_time * self._frame_rate
        self._frame_rate = max(float(frames_per_second), 0.0)
        self.elapsed_time = frame_time / self._frame_rate if self._frame_rate else 0.0

    def update(self, delta_time: float) -> None:
        """Advance playback by `delta_time` seconds and pose every track."""
        if not self.playing:
            return
        self.elapsed_time += delta_time
        frame_time = self.elapsed_time * self._frame_rate
        if frame_time > self._frame_count:
            if not self.looping:
                self.playing = False
                self.elapsed_time = 0.0
                return
            self.elapsed_time = delta_time - (frame_time - self._frame_count) / self._frame_rate
            frame_time = self.elapsed_time * self._frame_rate
        for track in self._tracks.values():
            track.update(frame_time, self.looping)

    def play(self) -> None:
        self.playing = True

    def pause(self) -> None:
        self.playing = False

    def stop(self) -> None:
        """Stop playback and rewind to the start."""
        self.playing = False
        self.elapsed_time = 0.0
        for track in self._tracks.values():
            track.rewind()

    def add_track(self, name: str, track: AnimationTrack) -> None:
        """Add or replace a track; it is resized to the animation's frame count."""
        self._tracks[name] = track
        track.set_frame_count(self._frame_count)

    def remove_track(self, name: str) -> None:
        """Remove a track by name; unknown names are ignored."""
        self._tracks.pop(name, None)