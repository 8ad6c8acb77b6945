# -*- coding: utf-8 -*-

from concurrent.futures import ThreadPoolExecutor as Executor
import logging

from .deferred import Deferred

_logger = logging.getLogger(__name__)


class ThreadPoolExecutor(object):
    """Execute callables asynchronously on demand, in another threads."""

    def __init__(self, max_workers, loop=None):
        """Initialize the thread pool

        Args:
            max_workers: The maximum number of threads that can be used to
                execute the given calls.
            loop (EventLoop, optional): if set, the continuations of the
                Deferreds are called from this loop. Otherwise, they are
                called from the worker thread.
        """
        self._executor = Executor(max_workers)
        self._loop = loop

    def submit(self, callback, *args, **kwargs):
        """Prepare the callable to be executed and return a Deferred.

        The callable is not scheduled until the Deferred is subscribed.

        Args:
            callback (callable): callback who will run in another thread.
            *args: argument passed to callback.
            **kwargs: keywords arguments passed to callback.
        Returns:
            Deferred: Deferred who succeeds after the callback has been
                executed, with the value returned by the callback.
                If the callback raise an exception, the Deferred fails with
                this exception.
        """

        def producer(on_success, on_failure):

            def on_future_done(f):
                error = f.exception()
                if error is None:
                    self._deliver(on_success, f.result())
                else:
                    self._deliver(on_failure, error)

            f = self._executor.submit(callback, *args, **kwargs)
            f.add_done_callback(on_future_done)

        return Deferred(producer,
                        _name=getattr(callback, '__name__', '???'))

    def shutdown(self, wait=True):
        """Free the worker threads.

        Args:
            wait (boolean): if True, returns only when all pending calls are
                done.
        """
        self._executor.shutdown(wait)

    def _deliver(self, continuation, value):
        if self._loop is None:
            continuation(value)
        else:
            self._loop.call_soon(continuation, value)
