# -*- coding: utf-8 -*-
"""Network module

This module performs HTTP requests. All requests are asynchronous, executed
in separate threads.

The main function, ``fetch()``, returns a Deferred. When subscribed, it sends
the request, then calls one of the continuations:
- on success, with a ``SuccessResult`` holding the raw content of the
  response (bytes) and its metadata.
- on failure, with a ``FailureResult`` holding the error (one of
  ``taproom.network.errors``) and the metadata known about the response.

In case of error, the Exception has a message ready to be displayed to the
user.

When an event loop is given to the Context, all continuations are called from
the thread running the loop.

Examples:

    >>> from taproom.promise import EventLoop
    >>> loop = EventLoop()
    >>> with Context(loop):
    ...     def on_success(result):
    ...         print(result.payload)
    ...         loop.stop()
    ...     def on_failure(failure):
    ...         print(failure.error)
    ...         loop.stop()
    ...     fetch('https://api.punkapi.com/v2/beers/1').subscribe(
    ...         on_success, on_failure)
    ...     loop.run()
"""

from . import errors  # noqa
from .result import FailureResult, ResponseMetadata, SuccessResult  # noqa
from .service import Service


class Context(object):
    def __init__(self, loop=None, max_workers=None):
        self._loop = loop
        self._max_workers = max_workers
        self._service = None

    def start(self):
        global fetch

        self._service = Service(self._loop, self._max_workers)
        self._service.start()

        # Copy methods from the service instance.
        fetch = self._service.fetch

    def stop(self):
        global fetch

        if self._service:
            self._service.stop()
            self._service = None

        fetch = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()


# The context must be used to set theses methods.
fetch = None
