# -*- coding: utf-8 -*-

import pytest

from taproom.models import Beer, Catalog
from taproom.models.catalog import API_ERROR_MESSAGE, DECODE_ERROR_MESSAGE
from taproom.network import FailureResult, ResponseMetadata, SuccessResult
from taproom.network.errors import NetworkError
from taproom.promise import Deferred


def _beers_payload(*ids):
    return ('[%s]' % ','.join(
        '{"id": %s, "name": "Beer %s", "description": "Desc %s"}'
        % (i, i, i) for i in ids)).encode('utf-8')


class FakeFetch(object):
    """Replacement of network.fetch, resolved manually by the tests."""

    def __init__(self):
        self.requests = []
        self._continuations = []

    def __call__(self, url, **params):
        index = len(self.requests)
        self.requests.append((url, params))

        def producer(on_success, on_failure):
            self._continuations.append((index, on_success, on_failure))

        return Deferred(producer)

    def _find(self, index):
        for (i, on_success, on_failure) in self._continuations:
            if i == index:
                return on_success, on_failure
        raise AssertionError('request %s not subscribed' % index)

    def succeed(self, index, payload):
        url = self.requests[index][0]
        self._find(index)[0](SuccessResult(payload, ResponseMetadata(url)))

    def fail(self, index):
        url = self.requests[index][0]
        self._find(index)[1](FailureResult(NetworkError(),
                                           ResponseMetadata(url)))


class TestCatalog(object):

    def setup_method(self, method):
        self.fetch = FakeFetch()
        self.catalog = Catalog(self.fetch, 'http://example.com/beers', 2)
        self.calls = []

    def callback(self, catalog, error):
        self.calls.append((catalog, error))

    def test_defaults_from_config(self):
        catalog = Catalog(self.fetch)
        assert catalog.url == 'https://api.punkapi.com/v2/beers'
        assert catalog.per_page == 25
        assert catalog.beers == []

    def test_ready(self):
        self.catalog.ready(self.callback)
        assert self.fetch.requests == [('http://example.com/beers', {})]
        assert self.calls == []

        self.fetch.succeed(0, _beers_payload(1, 2))

        assert self.calls == [(self.catalog, None)]
        assert self.catalog.beers == [Beer(1, 'Beer 1', 'Desc 1'),
                                      Beer(2, 'Beer 2', 'Desc 2')]

    def test_ready_decode_error(self):
        self.catalog.ready(self.callback)
        self.fetch.succeed(0, b'<html>Not JSON</html>')

        assert self.calls == [(self.catalog, DECODE_ERROR_MESSAGE)]
        assert self.catalog.beers == []

    def test_ready_deeply_nested_payload(self):
        self.catalog.ready(self.callback)
        self.fetch.succeed(0, b'[' * 200000 + b']' * 200000)

        assert self.calls == [(self.catalog, DECODE_ERROR_MESSAGE)]
        assert self.catalog.beers == []

    def test_ready_fetch_failure(self):
        self.catalog.ready(self.callback)
        self.fetch.fail(0)

        assert self.calls == [(self.catalog, API_ERROR_MESSAGE)]
        assert self.catalog.beers == []

    def test_ready_pages(self):
        self.catalog.ready_pages(3, self.callback)

        assert self.fetch.requests == [
            ('http://example.com/beers',
             {'params': {'page': page, 'per_page': 2}})
            for page in (1, 2, 3)]

        # Pages are received in the reverse order.
        self.fetch.succeed(2, _beers_payload(5))
        self.fetch.succeed(1, _beers_payload(3, 4))
        assert self.calls == []
        self.fetch.succeed(0, _beers_payload(1, 2))

        assert self.calls == [(self.catalog, None)]
        assert [b.id for b in self.catalog.beers] == [1, 2, 3, 4, 5]

    def test_ready_pages_failure(self):
        self.catalog.beers = [Beer(9, 'Old', 'Old beer')]
        self.catalog.ready_pages(3, self.callback)

        self.fetch.succeed(0, _beers_payload(1, 2))
        self.fetch.fail(1)
        self.fetch.succeed(2, _beers_payload(5))

        assert self.calls == [(self.catalog, API_ERROR_MESSAGE)]
        assert self.catalog.beers == [Beer(9, 'Old', 'Old beer')]

    def test_ready_pages_decode_error(self):
        self.catalog.ready_pages(2, self.callback)

        self.fetch.succeed(0, _beers_payload(1))
        self.fetch.succeed(1, b'{"error": "oops"}')

        assert self.calls == [(self.catalog, DECODE_ERROR_MESSAGE)]
        assert self.catalog.beers == []

    def test_ready_pages_invalid_count(self):
        with pytest.raises(ValueError):
            self.catalog.ready_pages(0, self.callback)
        assert self.fetch.requests == []
