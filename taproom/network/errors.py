# -*- coding: utf-8 -*-
"""This module defines all errors which can occur in the network module.

requests exceptions can be converted to taproom.network errors using the
``handler`` decorator.

taproom errors have a human-readable message, ready to be displayed.
They are also more verbose when displayed using 'repr()`.
"""

import functools

import requests.exceptions

from .result import ResponseMetadata


class NetworkError(Exception):
    """Base class for taproom.network errors.

    Attributes:
        message (str): Human readable message, describing the error.
        reason (Exception): internal exception which've produced this error. It
            exposes the inner mechanisms of the network module, and should not
            be used outside of the network module. Can be None.
        metadata (ResponseMetadata): information about the failed exchange.
            Set by the ``handler`` decorator; can be None.
    """

    def __init__(self, reason=None, message=None, msg_args=None):
        """
        Args:
            reason (Exception, optional): base error
            message (str, optional): User-friendly message.
            msg_args (any, optional): Optional arguments used when formatting
                the message with the '%' operator.
        """
        self.reason = reason
        self.metadata = None
        self._message = message or "A network error has occurred."
        self._msg_args = msg_args
        Exception.__init__(self)

    @property
    def message(self):
        if self._msg_args is not None:
            return self._message % self._msg_args
        return self._message

    def __repr__(self):
        return '%s("%s")' % (self.__class__.__name__, self.message)

    def __str__(self):
        return self.message


class ConnectionError(NetworkError):
    def __init__(self, error):
        NetworkError.__init__(self, error, "Unable to connect to the server.")


class TimeoutError(NetworkError):
    def __init__(self, error):
        NetworkError.__init__(self, error,
                              "The server did not respond on time.")


class HTTPError(NetworkError):
    """Base class for HTTP errors.

    The class can be displayed for debug, using ``repr(error)``.

    Attributes:
        code (int): HTTP status code
        status_text (str): HTTP status text
        request (str): representation of the request.
        response (dict or text): If the response content was in json, the
            corresponding dict, else the content as text.
    """

    def __init__(self, error, message=None, msg_args=None):
        """
        Args:
            error (requests.exceptions.HTTPError): base error.
        """
        if not message:
            message = ("The server has returned an HTTP error: "
                       "%(code)s %(reason)s")
            msg_args = {"code": error.response.status_code,
                        "reason": error.response.reason}

        NetworkError.__init__(self, error, message, msg_args)

        self.code = error.response.status_code
        self.status_text = error.response.reason
        self.request = '%s %s' % (error.request.method, error.request.url)

        try:
            self.response = error.response.json()
        except ValueError:
            self.response = error.response.text

    def __repr__(self):
        return '\n'.join(("HTTP Error: %s %s" % (self.code, self.status_text),
                          "\tRequest: %s" % self.request,
                          "\tResponse: %s" % (self.response,)))


class HTTPBadRequestError(HTTPError):
    def __init__(self, error):
        message = ("The HTTP request is invalid. This is a bug, "
                   "either in the client or in the server.")
        HTTPError.__init__(self, error, message)


class HTTPUnauthorizedError(HTTPError):
    def __init__(self, error):
        HTTPError.__init__(self, error, "The server requires an "
                                        "authentication.")


class HTTPForbiddenError(HTTPError):
    def __init__(self, error):
        message = "You don't have the permission to do this operation."
        HTTPError.__init__(self, error, message)


class HTTPNotFoundError(HTTPError):
    def __init__(self, error):
        message = "The element you're looking for has not been found."
        HTTPError.__init__(self, error, message)


class HTTPTooManyRequestsError(HTTPError):
    def __init__(self, error):
        message = "Too many requests have been sent. Please try again later."
        HTTPError.__init__(self, error, message)


class HTTPInternalServerError(HTTPError):
    def __init__(self, error):
        message = "The server has encountered an unexpected error :("
        HTTPError.__init__(self, error, message)


class HTTPServiceUnavailableError(HTTPError):
    def __init__(self, error):
        message = ("The server is temporarily unavailable. "
                   "Please try again later.")
        HTTPError.__init__(self, error, message)


_code2error = {
    400: HTTPBadRequestError,
    401: HTTPUnauthorizedError,
    403: HTTPForbiddenError,
    404: HTTPNotFoundError,
    429: HTTPTooManyRequestsError,
    500: HTTPInternalServerError,
    503: HTTPServiceUnavailableError
}


def _convert(error):
    """Converts a requests exception into a taproom.network error."""
    if isinstance(error, requests.exceptions.Timeout):
        # ConnectTimeout is both a Timeout and a ConnectionError.
        return TimeoutError(error)
    elif isinstance(error, requests.exceptions.ConnectionError):
        return ConnectionError(error)
    elif isinstance(error, requests.exceptions.HTTPError):
        err_class = _code2error.get(error.response.status_code, HTTPError)
        return err_class(error)
    return NetworkError(error)


def handler(func):
    """Decorator who handles errors of the requests.

    Converts requests.exceptions.* into taproom.network.errors. The decorated
    function must take the ``Request`` as first argument: it's used to fill
    the ``metadata`` attribute of the error.
    """

    @functools.wraps(func)
    def wrapper(request, *args, **kwargs):
        try:
            return func(request, *args, **kwargs)
        except requests.exceptions.RequestException as error:
            new_error = _convert(error)
            if error.response is not None:
                new_error.metadata = ResponseMetadata.from_response(
                    request, error.response)
            else:
                new_error.metadata = ResponseMetadata(request.url,
                                                      str(request))
            raise new_error

    return wrapper
