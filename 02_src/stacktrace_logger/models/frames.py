"""Call stack data models."""

from dataclasses import dataclass
from typing import Any

INSTANCE_CALL = "->"
STATIC_CALL = "::"


@dataclass(frozen=True)
class RawFrame:
    """One frame as reported by a frame source, before normalization."""

    function: str | None
    file: str | None = None  # call site, not definition site
    line: int | None = None
    class_name: str | None = None
    call_type: str | None = None  # INSTANCE_CALL or STATIC_CALL
    args: tuple[Any, ...] | None = None  # None unless arguments were requested


@dataclass(frozen=True)
class CallFrame:
    """One entry of a captured stack snapshot, innermost first."""

    function_name: str | None = None
    source_file: str | None = None
    source_line: int | None = None
    owner_type: str | None = None
    call_operator: str | None = None
    arguments: list[Any] | None = None

    def __post_init__(self):
        if (self.owner_type is None) != (self.call_operator is None):
            raise ValueError(
                "owner_type and call_operator must be set together"
            )
