# -*- coding: utf-8 -*-

import logging

from .. import network
from ..common import config
from ..promise import join_all
from .beer import DecodeError, decode_beers

_logger = logging.getLogger(__name__)

DECODE_ERROR_MESSAGE = 'Could not decode JSON'
API_ERROR_MESSAGE = 'Call to remote API failed'


class Catalog(object):
    """List of beers, loaded from the catalogue API.

    The catalogue is empty at creation. It's filled by ``ready()`` (one
    request) or ``ready_pages()`` (several pages requested at the same time).
    In both cases, the callback receives the catalogue and an error message,
    or None if the beers have been loaded.

    Attributes:
        beers (list of Beer): beers loaded, in the API order.
        url (str): URL of the beer list.
        per_page (int): number of beers by page, used by ``ready_pages()``.
    """

    def __init__(self, fetch=None, url=None, per_page=None):
        """
        Args:
            fetch (callable, optional): ``fetch(url, **params)`` returning a
                Deferred<SuccessResult, FailureResult>. Default to
                ``taproom.network.fetch``.
            url (str, optional): Default to the 'api_url' config entry.
            per_page (int, optional): Default to the 'per_page' config entry.
        """
        self.beers = []
        self.url = url or config.get('api_url')
        self.per_page = per_page or config.get('per_page')
        self._fetch_fn = fetch

    def _fetch(self, url, **params):
        fetch = self._fetch_fn or network.fetch
        return fetch(url, **params)

    def ready(self, callback):
        """Load the beers, then call the callback.

        Args:
            callback (callable): called with two arguments: the catalogue
                itself, and an error message (None on success).
        """
        def on_success(result):
            try:
                beers = decode_beers(result.payload)
            except DecodeError:
                _logger.warning('Unable to decode beers from %s',
                                result.metadata.url, exc_info=True)
                callback(self, DECODE_ERROR_MESSAGE)
                return

            _logger.debug('%s beers loaded from %s', len(beers),
                          result.metadata.url)
            self.beers = beers
            callback(self, None)

        self._fetch(self.url).subscribe(on_success,
                                        self._on_failure(callback))

    def ready_pages(self, pages, callback):
        """Load several pages of beers at once, then call the callback.

        All pages are requested at the same time. Beers are kept in page
        order, regardless of the order the responses are received. If one of
        the pages fails, the callback receives an error and the catalogue is
        not modified.

        Args:
            pages (int): number of pages to load, starting at page 1.
            callback (callable): called with two arguments: the catalogue
                itself, and an error message (None on success).
        Raises:
            ValueError: if pages is lower than 1.
        """
        if pages < 1:
            raise ValueError('At least one page must be loaded (got %s).'
                             % pages)

        page_requests = [
            self._fetch(self.url, params={'page': page,
                                          'per_page': self.per_page})
            for page in range(1, pages + 1)]

        def on_success(results):
            beers = []
            try:
                for result in results:
                    beers.extend(decode_beers(result.payload))
            except DecodeError:
                _logger.warning('Unable to decode beers from %s',
                                result.metadata.url, exc_info=True)
                callback(self, DECODE_ERROR_MESSAGE)
                return

            _logger.debug('%s beers loaded from %s pages', len(beers),
                          pages)
            self.beers = beers
            callback(self, None)

        join_all(page_requests).subscribe(on_success,
                                          self._on_failure(callback))

    def _on_failure(self, callback):
        def on_failure(failure):
            _logger.warning('Unable to fetch beers from %s: %r',
                            failure.metadata.request, failure.error)
            callback(self, API_ERROR_MESSAGE)

        return on_failure
