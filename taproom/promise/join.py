# -*- coding: utf-8 -*-

from functools import partial
import logging
from threading import Lock

from .deferred import Deferred
from .errors import MisuseError
from .util import is_deferred

_logger = logging.getLogger(__name__)


class _Aggregator(object):
    """Working state of one join_all() subscription.

    All calls can come from different threads: the state is only modified
    while holding the lock. The aggregate continuations are called outside of
    the lock.

    Attributes:
        expected_count (int): number of branches to wait.
        results_by_index (dict): result of each successful branch, by index
            of the branch in the input list.
        arrived_count (int): number of successful branches.
        state (str): one of PENDING, SUCCEEDED, FAILED.
    """

    PENDING = 'pending'
    SUCCEEDED = 'succeeded'
    FAILED = 'failed'

    def __init__(self, expected_count, on_success, on_failure):
        self.expected_count = expected_count
        self.results_by_index = {}
        self.arrived_count = 0
        self.state = self.PENDING
        self._on_success = on_success
        self._on_failure = on_failure
        self._lock = Lock()

    def branch_succeeded(self, index, value):
        with self._lock:
            if index in self.results_by_index:
                _logger.warning('Branch %s of JOIN_ALL has reported twice. '
                                'New result will be ignored: %r',
                                index, value)
                return
            self.results_by_index[index] = value
            self.arrived_count += 1

            if self.state != self.PENDING:
                return
            if self.arrived_count < self.expected_count:
                return

            self.state = self.SUCCEEDED
            results = [self.results_by_index[i]
                       for i in range(self.expected_count)]

        self._on_success(results)

    def branch_failed(self, reason):
        with self._lock:
            if self.state != self.PENDING:
                _logger.log(5, 'JOIN_ALL already %s. Failure ignored: %r',
                            self.state, reason)
                return
            self.state = self.FAILED

        self._on_failure(reason)


def join_all(deferreds):
    """Create a Deferred who waits a list of Deferreds to all succeed.

    The resulting Deferred succeeds when all of the Deferreds in the list have
    succeeded, and returns a list of all the resulting values, keeping the
    order of the Deferred list (not the order of completion).
    If a Deferred fails, then the resulting Deferred fails with the same
    reason, as soon as the failure is known. Results and failures of other
    Deferreds are ignored afterwards.

    Nothing is started before the resulting Deferred is subscribed. Then all
    Deferreds of the list are subscribed at once, without waiting for any of
    them.

    Args:
        deferreds (iterable of Deferred)
    Returns:
        Deferred<list>: resulting Deferred. An empty list gives a Deferred
            who succeeds with an empty list.
    Raises:
        TypeError: if an element of the list is not a Deferred.
        MisuseError: if the same Deferred appears twice in the list.
    """
    deferreds = list(deferreds)

    for index, deferred in enumerate(deferreds):
        if not is_deferred(deferred):
            raise TypeError('join_all() item %s is not a Deferred: %r'
                            % (index, deferred))

    if len(set(id(d) for d in deferreds)) != len(deferreds):
        raise MisuseError('join_all() received the same Deferred twice: '
                          'it can be subscribed only once.')

    if not deferreds:
        return Deferred.resolved([])

    def producer(on_success, on_failure):
        aggregator = _Aggregator(len(deferreds), on_success, on_failure)
        for index, deferred in enumerate(deferreds):
            deferred.subscribe(partial(aggregator.branch_succeeded, index),
                               aggregator.branch_failed)

    return Deferred(producer, _name='JOIN_ALL')
