"""Evaluators: run code fragments against a binding.

Sessions only rely on the Evaluator protocol. PythonEvaluator is the default
implementation, evaluating Python source against a private merge of the
binding's namespaces.
"""

import traceback
from typing import Any, Protocol

from evalconsole.console.binding import Binding
from evalconsole.console.errors import EvaluationError, EvaluatorClosedError

EVAL_FILENAME = "<console>"


class Evaluator(Protocol):
    """Executes code fragments against a bound execution context."""

    def evaluate(self, input: str) -> str:
        """Evaluate input and return its textual output."""
        ...

    def close(self) -> None:
        """Release the evaluator's state. Further use is an error."""
        ...


class EvaluatorFactory(Protocol):
    def __call__(self, binding: Binding) -> Evaluator: ...


class _PrintCollector:
    """Replacement print() writing into the evaluator's output buffer."""

    def __init__(self, buffer: list[str]) -> None:
        self._buffer = buffer

    def __call__(self, *args: Any, sep: str = " ", end: str = "\n", **_kwargs: Any) -> None:
        self._buffer.append(sep.join(str(arg) for arg in args) + end)


class PythonEvaluator:
    """Evaluate Python source against a binding.

    Uses an eval-first approach: the input is compiled as an expression so
    its value can be echoed back (``1+1`` gives ``=> 2``), falling back to
    exec mode for statements (``x = 1``).

    The binding's globals and locals are merged into one namespace, so
    lambdas, comprehensions and functions defined at the console can see
    the frame's locals. Names defined by statements live in this namespace
    and are gone once the evaluator is closed.
    """

    def __init__(self, binding: Binding) -> None:
        self.binding = binding
        self._output: list[str] = []
        self._namespace: dict[str, Any] | None = {
            **binding.globals,
            **binding.locals,
            "print": _PrintCollector(self._output),
        }

    @property
    def closed(self) -> bool:
        return self._namespace is None

    def evaluate(self, input: str) -> str:
        """Evaluate input and return printed output plus the echoed value.

        ``SystemExit`` raised by the input (``exit()``) is reported like any
        other failure instead of ending the host process.

        Raises:
            EvaluationError: If compiling or running the input fails
            EvaluatorClosedError: If the evaluator was closed
        """
        namespace = self._namespace
        if namespace is None:
            raise EvaluatorClosedError()

        self._output.clear()
        try:
            try:
                code = compile(input, EVAL_FILENAME, "eval")
            except SyntaxError:
                code = compile(input, EVAL_FILENAME, "exec")
                exec(code, namespace)
                return "".join(self._output)

            value = eval(code, namespace)
        except (Exception, SystemExit) as exc:
            raise EvaluationError(
                type(exc).__name__,
                str(exc),
                "".join(traceback.format_exception(exc)),
            ) from exc
        finally:
            printed = "".join(self._output)
            self._output.clear()

        if value is None:
            return printed
        namespace["_"] = value
        return f"{printed}=> {value!r}\n"

    def close(self) -> None:
        if self._namespace is not None:
            self._namespace.clear()
        self._namespace = None
