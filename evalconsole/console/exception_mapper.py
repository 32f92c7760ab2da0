"""Map a caught exception onto the bindings of its traceback frames."""

import traceback
from collections.abc import Callable, Sequence

from evalconsole.console.binding import Binding

ExceptionMapper = Callable[[BaseException], Sequence[Binding]]


def map_exception_to_bindings(exc: BaseException) -> list[Binding]:
    """Return one binding per traceback frame, innermost (raising) frame first.

    An exception that was never raised has no traceback and maps to [].
    """
    frames = list(traceback.walk_tb(exc.__traceback__))
    return [Binding.from_frame(frame, lineno) for frame, lineno in reversed(frames)]
