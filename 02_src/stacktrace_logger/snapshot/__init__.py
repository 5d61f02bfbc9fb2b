"""Stack snapshot module."""

from .frame_source import IFrameSource, InspectFrameSource
from .snapshotter import StackSnapshotter, to_call_frame

__all__ = ["IFrameSource", "InspectFrameSource", "StackSnapshotter", "to_call_frame"]
