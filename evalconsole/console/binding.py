"""Binding: a captured execution context code can be evaluated against."""

import sys
from dataclasses import dataclass, field
from types import FrameType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BindingInfo(BaseModel):
    """Display summary of a binding, one row per frame on an error page."""

    model_config = ConfigDict(frozen=True)

    filename: str = Field(..., description="Source file of the frame")
    lineno: int = Field(..., description="Line being executed")
    function: str = Field(..., description="Function name of the frame")


@dataclass(frozen=True, eq=False)
class Binding:
    """Snapshot of a frame's namespaces.

    The locals are copied when the binding is taken; globals keep pointing
    at the module dict of the frame.
    """

    globals: dict[str, Any]
    locals: dict[str, Any] = field(default_factory=dict)
    filename: str = "<unknown>"
    lineno: int = 0
    function: str = "<module>"

    @classmethod
    def from_frame(cls, frame: FrameType, lineno: int | None = None) -> "Binding":
        """Capture a binding from a live frame.

        Args:
            frame: Frame to snapshot
            lineno: Line to report, defaults to the frame's current line
        """
        code = frame.f_code
        return cls(
            globals=frame.f_globals,
            locals=dict(frame.f_locals),
            filename=code.co_filename,
            lineno=lineno if lineno is not None else frame.f_lineno,
            function=code.co_name,
        )

    @classmethod
    def of_caller(cls, depth: int = 1) -> "Binding":
        """Capture the binding of the calling frame.

        Args:
            depth: How many frames above the caller to go (1 = direct caller)
        """
        return cls.from_frame(sys._getframe(depth))

    def describe(self) -> BindingInfo:
        return BindingInfo(
            filename=self.filename,
            lineno=self.lineno,
            function=self.function,
        )
