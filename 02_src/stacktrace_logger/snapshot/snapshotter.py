"""StackSnapshotter: bounded, trimmed call stack captures."""

import inspect

from ..config import DEFAULT_MAX_DEPTH
from ..models import CallFrame, RawFrame
from .frame_source import IFrameSource, InspectFrameSource


class StackSnapshotter:
    """Produces CallFrame sequences, innermost first, from a frame source."""

    def __init__(self, frame_source: IFrameSource | None = None):
        self._frame_source = frame_source or InspectFrameSource()

    def capture(
        self,
        max_depth: int = DEFAULT_MAX_DEPTH,
        skip_count: int = 0,
        preserve_arguments: bool = True,
    ) -> list[CallFrame]:
        """Capture the stack of the function that called capture().

        Frame 0 of an unskipped capture is the caller itself. `skip_count`
        innermost frames are dropped and at most `max_depth` frames remain.
        """
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        if skip_count < 0:
            raise ValueError(f"skip_count must be >= 0, got {skip_count}")

        caller = inspect.currentframe().f_back
        try:
            raw_frames = self._frame_source.capture_raw_frames(
                max_depth + skip_count,
                start=caller,
                include_arguments=preserve_arguments,
            )
        finally:
            del caller

        return [
            to_call_frame(raw, preserve_arguments)
            for raw in raw_frames[skip_count : skip_count + max_depth]
        ]


def to_call_frame(raw: RawFrame, preserve_arguments: bool = True) -> CallFrame:
    """Normalize a RawFrame; owner and operator are kept only as a pair."""
    owner_type = raw.class_name or None
    call_operator = raw.call_type if owner_type else None
    if owner_type and not call_operator:
        owner_type = None

    arguments = None
    if preserve_arguments and raw.args is not None:
        arguments = list(raw.args)

    return CallFrame(
        function_name=raw.function or None,
        source_file=raw.file or None,
        source_line=raw.line,
        owner_type=owner_type,
        call_operator=call_operator,
        arguments=arguments,
    )
