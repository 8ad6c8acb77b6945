# -*- coding: utf-8 -*-

import pytest
import requests

from taproom.network import errors
from taproom.network.request import Request


def _http_error(code, reason='Reason', content=b'{}'):
    response = requests.Response()
    response.status_code = code
    response.reason = reason
    response.url = 'http://example.com/beers'
    response._content = content
    response.request = requests.Request(
        'GET', 'http://example.com/beers').prepare()
    return requests.exceptions.HTTPError(response=response,
                                         request=response.request)


class TestHandler(object):

    request = Request('GET', 'http://example.com/beers')

    def _raise(self, error):
        @errors.handler
        def failing_fetch(request):
            raise error

        failing_fetch(self.request)

    @pytest.mark.parametrize('code, err_class', [
        (400, errors.HTTPBadRequestError),
        (401, errors.HTTPUnauthorizedError),
        (403, errors.HTTPForbiddenError),
        (404, errors.HTTPNotFoundError),
        (429, errors.HTTPTooManyRequestsError),
        (500, errors.HTTPInternalServerError),
        (503, errors.HTTPServiceUnavailableError),
        (502, errors.HTTPError),
    ])
    def test_http_errors(self, code, err_class):
        with pytest.raises(err_class) as exc_info:
            self._raise(_http_error(code))

        error = exc_info.value
        assert type(error) is err_class
        assert error.code == code
        assert error.metadata.status_code == code
        assert error.metadata.request == 'GET http://example.com/beers'

    def test_http_error_with_text_response(self):
        with pytest.raises(errors.HTTPError) as exc_info:
            self._raise(_http_error(502, 'Bad Gateway', b'upstream down'))

        error = exc_info.value
        assert error.response == 'upstream down'
        assert error.message == ('The server has returned an HTTP error: '
                                 '502 Bad Gateway')
        assert 'upstream down' in repr(error)

    def test_connection_error(self):
        with pytest.raises(errors.ConnectionError) as exc_info:
            self._raise(requests.exceptions.ConnectionError())

        assert exc_info.value.metadata.status_code is None
        assert exc_info.value.metadata.url == 'http://example.com/beers'

    def test_timeout_error(self):
        with pytest.raises(errors.TimeoutError):
            self._raise(requests.exceptions.ReadTimeout())

    def test_connect_timeout_is_a_timeout(self):
        with pytest.raises(errors.TimeoutError):
            self._raise(requests.exceptions.ConnectTimeout())

    def test_other_requests_error(self):
        with pytest.raises(errors.NetworkError) as exc_info:
            self._raise(requests.exceptions.InvalidURL())

        assert type(exc_info.value) is errors.NetworkError
        assert str(exc_info.value) == 'A network error has occurred.'

    def test_non_requests_errors_are_not_converted(self):
        with pytest.raises(KeyError):
            self._raise(KeyError())
