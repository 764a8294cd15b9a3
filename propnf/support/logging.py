import datetime
import logging
import time


class DeltaTimeFormatter(logging.Formatter):
    """A formatter providing an attribute `delta` of the
    :class:`.logging.LogRecord`, which holds the time elapsed since a
    reference time. The reference time is initially the creation of the
    formatter.

    >>> import logging, sys
    >>> logger = logging.getLogger('propnf.demo')
    >>> handler = logging.StreamHandler(stream=sys.stdout)
    >>> formatter = DeltaTimeFormatter('%(delta)s: %(message)s')
    >>> handler.setFormatter(formatter)
    >>> logger.addHandler(handler)
    >>> logger.warning('pass 1')  # doctest: +SKIP
    0:00:00.004: pass 1
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.set_reference_time(time.time())

    def format(self, record: logging.LogRecord) -> str:
        delta = datetime.timedelta(seconds=record.created - self._reference_time)
        record.delta = str(delta)[:-3]
        return super().format(record)

    def get_reference_time(self) -> float:
        """Get the reference time in seconds since the :ref:`epoch <epoch>`.
        """
        return self._reference_time

    def set_reference_time(self, reference_time: float) -> None:
        """Set the reference time to `reference_time` seconds since the
        :ref:`epoch <epoch>`, which is compatible with :func:`.time.time`.
        """
        self._reference_time = reference_time


class Timer:
    """Wall time in seconds since the creation or the last :meth:`.reset`.

    >>> timer = Timer()
    >>> timer.get() >= 0.0
    True
    """

    def __init__(self) -> None:
        self.reset()

    def get(self) -> float:
        return time.time() - self._reference_time

    def reset(self) -> None:
        self._reference_time = time.time()
