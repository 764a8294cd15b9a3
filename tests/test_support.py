import io
import logging

from propnf import Negation, Variable
from propnf.support import excepthook
from propnf.support.excepthook import NoTraceException
from propnf.support.logging import DeltaTimeFormatter, Timer
from propnf.support.tracing import trace


def test_trace_indents_and_restores():
    stream = io.StringIO()

    @trace(stream=stream)
    def strip(f):
        match f:
            case Negation(arg=arg):
                return strip(arg)
        return f

    assert strip(Negation(Variable('a'))) == Variable('a')
    assert stream.getvalue().splitlines() == [
        "--> test_trace_indents_and_restores.<locals>.strip(Negation(Variable('a')))",
        "  --> test_trace_indents_and_restores.<locals>.strip(Variable('a'))",
        "  <-- test_trace_indents_and_restores.<locals>.strip == Variable('a')",
        "<-- test_trace_indents_and_restores.<locals>.strip == Variable('a')"]
    assert trace.cur_indent == 0


def test_trace_exception():
    @trace(stream=io.StringIO(), show_ret=False)
    def fail():
        raise ValueError

    try:
        fail()
    except ValueError:
        pass
    assert trace.cur_indent == 0


def test_delta_time_formatter():
    formatter = DeltaTimeFormatter('%(delta)s|%(message)s')
    record = logging.LogRecord('propnf', logging.INFO, __file__, 1, 'msg', None, None)
    record.created = 1000.0
    formatter.set_reference_time(938.5)
    assert formatter.get_reference_time() == 938.5
    assert formatter.format(record) == '0:01:01.500|msg'


def test_timer():
    timer = Timer()
    first = timer.get()
    assert first >= 0.0
    assert timer.get() >= first
    timer.reset()
    assert timer.get() >= 0.0


def test_excepthook(capsys):
    try:
        raise NoTraceException('no fixpoint after 3 passes')
    except NoTraceException as exc:
        excepthook.excepthook(type(exc), exc, exc.__traceback__)
    assert capsys.readouterr().err == 'NoTraceException: no fixpoint after 3 passes\n'


def test_version():
    import propnf
    assert propnf.__version__ == '0.1.0'
