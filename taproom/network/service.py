# -*- coding: utf-8 -*-

import logging

import requests
from requests import __version__ as requests_version

from .. import __version__ as taproom_version
from ..common import config
from ..promise import Deferred, ThreadPoolExecutor
from .request import Request
from .result import FailureResult, ResponseMetadata
from . import send_request

_logger = logging.getLogger(__name__)

# Maximum number of automatic retry in case of connexion error
# HTTP errors (4XX and 5XX) are not retried.
MAX_RETRY = 3


def _prepare_session():
    """Prepare a session to send an HTTP(S) request, with auto retry.

    Returns:
        requests.Session: new HTTP(s) session
    """
    session = requests.Session()
    adapter = requests.adapters.HTTPAdapter(max_retries=MAX_RETRY)
    session.mount('http://', adapter)
    session.mount('https://', adapter)
    session.headers.update({
        'Accept': 'application/json',
        'User-Agent': 'taproom/%s python-requests/%s' % (
            taproom_version, requests_version)
    })
    return session


class Service(object):
    """HTTP network service.

    It's a "facade" pattern, providing a public interface to the network
    operations. Requests are executed in a pool of worker threads; their
    results are delivered in the event loop, if one is given.
    """

    def __init__(self, loop=None, max_workers=None):
        """
        Args:
            loop (EventLoop, optional): loop in which the continuations are
                called. By default, they're called from the worker threads.
            max_workers (int, optional): number of worker threads. Default to
                the 'max_workers' config entry.
        """
        self._loop = loop
        self._max_workers = max_workers
        self._executor = None
        self._session = None

    def start(self):
        max_workers = self._max_workers or config.get('max_workers')
        _logger.debug('Start network service (%s workers)', max_workers)
        self._session = _prepare_session()
        self._executor = ThreadPoolExecutor(max_workers, self._loop)

    def stop(self):
        _logger.debug('Stop network service')
        if self._executor:
            self._executor.shutdown()
            self._executor = None
        if self._session:
            self._session.close()
            self._session = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()

    def fetch(self, url, verb='GET', **params):
        """Send a request and get the raw content of its response.

        Nothing is sent until the returned Deferred is subscribed.

        Args:
            url (str)
            verb (str, optional): HTTP verb. Default to 'GET'.
            params: additional parameters passed to requests, like 'params'
                (the query string) or 'headers'.
        Returns:
            Deferred<SuccessResult, FailureResult>: on success, contains the
                response content (bytes). On failure, contains the
                NetworkError and what is known of the response.
        """
        request = Request(verb, url, dict(params))
        worker_task = self._executor.submit(send_request.fetch, request,
                                            self._session)

        def producer(on_success, on_failure):

            def on_error(error):
                metadata = getattr(error, 'metadata', None)
                if metadata is None:
                    metadata = ResponseMetadata(request.url, str(request))
                _logger.log(5, 'request %s failed: %r', request, error)
                on_failure(FailureResult(error, metadata))

            _logger.log(5, 'Start request %s', request)
            worker_task.subscribe(on_success, on_error)

        return Deferred(producer, _name=str(request))
