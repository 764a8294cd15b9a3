import IPython
import sys
from types import TracebackType
from typing import Any, Optional


class NoTraceException(Exception):
    """An exception that prints its error message and exits without a
    traceback. It is meant for situations that do not require inspection of
    the code, such as exceeding a limit on the number of rewrite passes set by
    the user, or a keyboard interrupt of a long rewriting.
    """
    pass


def handler(exc: NoTraceException, tb: Optional[TracebackType]) -> None:
    print(f'{exc.__class__.__name__}: {exc}', file=sys.stderr, flush=True)


# Python shell

def excepthook(exc_type: type[BaseException], exc: BaseException,
               tb: Optional[TracebackType]) -> None:
    if isinstance(exc, NoTraceException):
        handler(exc, tb)
    else:
        sys_excepthook(exc_type, exc, tb)


# To be executed at import:

sys_excepthook = sys.excepthook
sys.excepthook = excepthook


# IPython:

def ipy_custom_exc(ipy: Any, exc_type: type[NoTraceException],
                   exc: NoTraceException, tb: TracebackType, tb_offset=None) -> None:
    handler(exc, tb)


# To be executed at import:

ipy = IPython.get_ipython()

if ipy is not None:
    ipy.set_custom_exc((NoTraceException,), ipy_custom_exc)
