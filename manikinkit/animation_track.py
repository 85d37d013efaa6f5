"""A track of keyframes driving one object's pose over frames."""

from __future__ import annotations

import bisect
from typing import Any

from .keyframe import Keyframe, Vec3


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def _lerp3(a: Vec3, b: Vec3, t: float) -> Vec3:
    return (_lerp(a[0], b[0], t), _lerp(a[1], b[1], t), _lerp(a[2], b[2], t))


class AnimationTrack:
    """Keyframes of one target object, one slot per frame.

    The target, if any, receives `position`, `rotation` and `scale`
    attributes on every update.
    """

    def __init__(self, target: Any = None, frame_count: int = 0):
        self.target = target
        self.frames: list[Keyframe | None] = [Keyframe()]
        if frame_count:
            self.frames.extend([None] * (frame_count - 1))
        self._indices: list[int] = [0]
        self.last_keyframe_index = 0

    @property
    def keyframe_indices(self) -> tuple[int, ...]:
        """Frame numbers holding keyframes, in ascending order."""
        return tuple(self._indices)

    def update(self, frame_time: float, looping: bool) -> Keyframe | None:
        """Pose the target for `frame_time` and return that pose."""
        indices = self._indices
        if not self.frames or not indices:
            return None
        count = len(indices)
        try:
            last = indices.index(self.last_keyframe_index)
        except ValueError:
            last = 0
        nxt = (last + 1) % count

        if frame_time > indices[nxt]:
            if indices[nxt] < indices[last] and frame_time < indices[last]:
                last = 0
                nxt = 1 % count
            elif indices[nxt] > indices[last]:
                last = (last + 1) % count
                nxt = (nxt + 1) % count
            self.last_keyframe_index = indices[last]

        lo, hi = indices[last], indices[nxt]
        if hi > lo:
            t: float | None = (frame_time - lo) / (hi - lo)
        elif looping:
            t = (frame_time - lo) / (hi + len(self.frames) - lo)
        else:
            t = None

        start = self.frames[lo]
        end = self.frames[hi]
        if start is None or end is None:
            return None
        if t is None:
            pose = Keyframe(start.position, start.scale, start.rotation)
        else:
            pose = Keyframe(
                _lerp3(start.position, end.position, t),
                _lerp3(start.scale, end.scale, t),
                _lerp3(start.rotation, end.rotation, t),
            )
        if self.target is not None:
            self.target.position = pose.position
            self.target.rotation = pose.rotation
            self.target.scale = pose.scale
        return pose

    def set_frame_count(self, frame_count: int) -> None:
        """Grow with empty frames or drop frames (and their keyframes) from the end."""
        if frame_count < 0:
            raise ValueError("frame count must not be negative")
        if len(self.frames) < frame_count:
            self.frames.extend([None] * (frame_count - len(self.frames)))
        else:
            del self.frames[frame_count:]
            self._indices = [i for i in self._indices if i < frame_count]

    def rewind(self) -> None:
        self.last_keyframe_index = 0

    def add_keyframe(self, index: int, keyframe: Keyframe) -> None:
        """Put a keyframe at frame `index`; indices past the last frame are ignored."""
        if not 0 <= index < len(self.frames):
            return
        position = bisect.bisect_left(self._indices, index)
        if position == len(self._indices) or self._indices[position] != index:
            self._indices.insert(position, index)
        self.frames[index] = keyframe

    def remove_keyframe(self, index: int) -> None:
        """Remove the keyframe at `index`; the first frame's keyframe stays."""
        if index != 0 and 0 <= index < len(self.frames):
            self._indices = [i for i in self._indices if i != index]
            self.frames[index] = None