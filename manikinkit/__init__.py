"""Keyframe animation, in-memory image effects, input state and small geometry helpers."""

__version__ = "0.1.0"