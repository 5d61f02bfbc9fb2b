"""Frame sources: where raw call stack data comes from."""

import inspect
from types import FrameType
from typing import Any, Protocol

from ..models import INSTANCE_CALL, STATIC_CALL, RawFrame

_MISSING = object()


class IFrameSource(Protocol):
    """Runtime introspection: up to `limit` frames, innermost first."""

    def capture_raw_frames(
        self,
        limit: int,
        start: FrameType | None = None,
        include_arguments: bool = False,
    ) -> list[RawFrame]:
        """Return at most `limit` frames beginning at `start`."""
        ...


class InspectFrameSource:
    """Reads the live interpreter stack through frame objects.

    Each reported frame names the function that is executing and the place
    it was called from: the file and line come from the calling frame, so
    the outermost frame has no location.
    """

    def capture_raw_frames(
        self,
        limit: int,
        start: FrameType | None = None,
        include_arguments: bool = False,
    ) -> list[RawFrame]:
        frames: list[RawFrame] = []
        if limit <= 0:
            return frames

        frame = start if start is not None else inspect.currentframe().f_back
        try:
            while frame is not None and len(frames) < limit:
                frames.append(self._to_raw_frame(frame, include_arguments))
                frame = frame.f_back
        finally:
            # Frame references form cycles with their locals
            del frame
            del start
        return frames

    def _to_raw_frame(self, frame: FrameType, include_arguments: bool) -> RawFrame:
        code = frame.f_code
        caller = frame.f_back

        file = line = None
        if caller is not None:
            file = caller.f_code.co_filename or None
            line = caller.f_lineno

        class_name = call_type = None
        owner_slot = code.co_varnames[0] if code.co_argcount else None
        owner = frame.f_locals.get(owner_slot, _MISSING) if owner_slot else _MISSING
        if owner_slot == "self" and owner is not _MISSING:
            class_name, call_type = type(owner).__name__, INSTANCE_CALL
        elif owner_slot == "cls" and isinstance(owner, type):
            class_name, call_type = owner.__name__, STATIC_CALL

        args = None
        if include_arguments:
            args = _argument_values(frame)
            if class_name is not None:
                args = args[1:]

        return RawFrame(
            function=code.co_name,
            file=file,
            line=line,
            class_name=class_name,
            call_type=call_type,
            args=tuple(args) if args is not None else None,
        )


def _argument_values(frame: FrameType) -> list[Any]:
    """Positional parameters, then *args, then keyword-only parameters."""
    code = frame.f_code
    local_vars = frame.f_locals
    names = code.co_varnames
    positional = code.co_argcount
    kwonly = code.co_kwonlyargcount

    values = [local_vars.get(name, _MISSING) for name in names[:positional]]
    if code.co_flags & inspect.CO_VARARGS:
        values.extend(local_vars.get(names[positional + kwonly], ()))
    values.extend(
        local_vars.get(name, _MISSING)
        for name in names[positional : positional + kwonly]
    )
    return [value for value in values if value is not _MISSING]
