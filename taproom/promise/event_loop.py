# -*- coding: utf-8 -*-

from collections import deque
import logging
import threading
import time

_logger = logging.getLogger(__name__)


class EventLoop(object):
    """Single delivery context for the continuations of Deferreds.

    Any thread can post a call with ``call_soon()``. All posted calls are
    executed, in the order they were posted, by the thread running
    ``run()``. Continuations delivered through the loop never run at the
    same time, so they can share state without additional lock.

    If a posted call raises an exception, the error is logged and the loop
    continues with the next call.
    """

    def __init__(self):
        self._condition = threading.Condition()
        self._calls = deque()
        self._stop_order = False
        self._thread = None

    def call_soon(self, fn, *args, **kwargs):
        """Schedule a call to be executed by the loop thread.

        Args:
            fn (callable): function to call.
            *args: arguments passed to fn.
            **kwargs: keywords arguments passed to fn.
        """
        with self._condition:
            self._calls.append((fn, args, kwargs))
            self._condition.notify()

    def stop(self):
        """Ask the loop to return from ``run()``.

        Calls already posted before the stop are executed first.
        """
        with self._condition:
            self._stop_order = True
            self._condition.notify()

    def is_running(self):
        with self._condition:
            return self._thread is not None

    def in_loop(self):
        """Returns True if the caller runs in the loop thread."""
        with self._condition:
            return self._thread is threading.current_thread()

    def run(self, timeout=None):
        """Execute the posted calls until ``stop()`` is called.

        Args:
            timeout (float, optional): if set, maximum time to run the loop.
                By default, it runs until the stop order.
        Returns:
            boolean: True if the loop has been stopped by ``stop()``; False
                if the timeout has expired first.
        """
        deadline = None if timeout is None else time.time() + timeout

        with self._condition:
            if self._thread is not None:
                raise RuntimeError('The event loop is already running.')
            self._thread = threading.current_thread()

        _logger.log(5, 'Event loop started')
        try:
            while True:
                with self._condition:
                    while not self._calls and not self._stop_order:
                        if deadline is None:
                            self._condition.wait()
                        else:
                            remaining = deadline - time.time()
                            if remaining <= 0:
                                return False
                            self._condition.wait(remaining)

                    if not self._calls:
                        self._stop_order = False
                        return True
                    (fn, args, kwargs) = self._calls.popleft()

                self._execute(fn, args, kwargs)
        finally:
            with self._condition:
                self._thread = None
            _logger.log(5, 'Event loop stopped')

    @staticmethod
    def _execute(fn, args, kwargs):
        try:
            fn(*args, **kwargs)
        except Exception:
            _logger.exception('Call to %s in the event loop has raised an '
                              'exception!', getattr(fn, '__name__', fn))
