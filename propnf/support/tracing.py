# Inspired by code suggested by Vincent Fenet,
# https://stackoverflow.com/q/8315389/

from functools import wraps
import pprint
import sys
from typing import Any, Callable, ClassVar, TextIO


class trace:
    """A decorator @trace(...) for functions whose calls and returns should
    be printed, indented by recursion depth. Parentheses must be used also
    when there are no arguments. This is meant for debugging rules and
    traversals, e.g. ``Simplify.try_simplify``.

    >>> @trace(stream=sys.stdout)
    ... def depth(n):
    ...     return 0 if n == 0 else depth(n - 1) + 1
    >>> depth(1)
    --> depth(1)
      --> depth(0)
      <-- depth == 0
    <-- depth == 1
    1
    """

    # Shared between all traced functions, which may call each other.
    cur_indent: ClassVar[int] = 0

    def __init__(self, stream: TextIO = sys.stdout, indent_step: int = 2,
                 show_ret: bool = True, pretty: bool = False) -> None:
        self.indent_step = indent_step
        self.pretty = pretty
        self.show_ret = show_ret
        self.stream = stream

    def __call__(self, fn: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(fn)
        def wrapper(*args, **kwargs):
            indent = ' ' * trace.cur_indent
            L = [self._format(a) for a in args]
            L.extend(f'{k}={self._format(v)}' for k, v in kwargs.items())
            self.stream.write(f'{indent}--> {fn.__qualname__}({", ".join(L)})\n')
            trace.cur_indent += self.indent_step
            try:
                ret = fn(*args, **kwargs)
            finally:
                trace.cur_indent -= self.indent_step
            if self.show_ret:
                self.stream.write(f'{indent}<-- {fn.__qualname__} == {self._format(ret)}\n')
            return ret
        return wrapper

    def _format(self, obj: Any) -> str:
        return pprint.pformat(obj) if self.pretty else repr(obj)
