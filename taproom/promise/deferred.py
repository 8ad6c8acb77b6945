# -*- coding: utf-8 -*-

import logging
from threading import Lock

from .errors import AlreadySubscribedError

_logger = logging.getLogger(__name__)


class Deferred(object):
    """It represents the single result of an operation not yet done.

    A Deferred wraps a "producer": a callable who will, at some point in the
    future, call exactly one of the two continuations it receives. The
    consumer doesn't need to know how the result is produced; it gives its
    continuations to ``subscribe()``, and one of them will be called with the
    result (or the failure).

    Building a Deferred has no side effect: the producer only runs when the
    Deferred is subscribed. The Deferred neither transforms, buffers nor
    replays the results: whatever the producer passes to a continuation is
    received as is by the consumer.

    The Deferred doesn't check that its producer calls back only once. This
    is the responsibility of the producer.

    A Deferred can be subscribed only once. A second subscription raises an
    ``AlreadySubscribedError``, and the producer is not called again.
    """

    def __init__(self, producer, _name=None):
        """Constructor of the Deferred.

        Args:
            producer (callable): Takes 2 callable arguments:
                The first one, `on_success()`, must be called when the
                operation succeeds, with the result's value as its only
                argument.
                The second, `on_failure()`, must be called when the
                operation fails, with the failure value as its only argument.
            _name (str): if set, name used when converted to text.
        """
        self._producer = producer
        self._name = _name or getattr(producer, '__name__', '???')
        self._lock = Lock()
        self._subscribed = False

    def subscribe(self, on_success, on_failure):
        """Start the operation, and set the continuations receiving its result.

        The producer is called synchronously, before this method returns. The
        continuations themselves can be called later, from the context chosen
        by the producer.

        If the producer raises an exception, it's not caught: the exception
        propagates to the caller.

        Args:
            on_success (callable): will receive the result of the operation.
            on_failure (callable): will receive the failure value, if the
                operation fails.
        Raises:
            AlreadySubscribedError: if the Deferred has already been
                subscribed.
        """
        with self._lock:
            already_subscribed = self._subscribed
            self._subscribed = True

        if already_subscribed:
            raise AlreadySubscribedError(self)

        _logger.log(5, 'Subscribe to %r', self)
        self._producer(on_success, on_failure)

    def __repr__(self):
        with self._lock:
            state = 'S' if self._subscribed else 'P'
        return 'Deferred(%s %s)' % (self._name, state)

    @classmethod
    def resolved(cls, value):
        """Create a Deferred who succeeds with the value, when subscribed.

        Args:
            value: result passed to the success continuation.
        Returns:
            Deferred: new Deferred calling `on_success(value)` as soon as it's
                subscribed.
        """
        return cls(lambda on_success, _on_failure: on_success(value),
                   _name='RESOLVED')

    @classmethod
    def rejected(cls, reason):
        """Create a Deferred who fails with the reason, when subscribed.

        Args:
            reason: failure value passed to the failure continuation.
        Returns:
            Deferred: new Deferred calling `on_failure(reason)` as soon as
                it's subscribed.
        """
        return cls(lambda _on_success, on_failure: on_failure(reason),
                   _name='REJECTED')
