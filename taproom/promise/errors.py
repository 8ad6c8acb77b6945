# -*- coding: utf-8 -*-


class MisuseError(Exception):
    """The promise API has been used in a way it doesn't support."""
    pass


class AlreadySubscribedError(MisuseError):
    """A Deferred has been subscribed twice.

    The producer of a Deferred runs at most once. A second call to
    ``subscribe()`` is refused rather than running the underlying operation
    again.

    Attributes:
        deferred (Deferred): the Deferred subscribed twice.
    """

    def __init__(self, deferred):
        self.deferred = deferred
        MisuseError.__init__(self, '%r has already been subscribed'
                             % (deferred,))
