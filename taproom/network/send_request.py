# -*- coding: utf-8 -*-

import logging

from . import errors
from .result import ResponseMetadata, SuccessResult

_logger = logging.getLogger(__name__)


@errors.handler
def fetch(request, session):
    """Performs an HTTP request, then returns the raw result.

    Args:
        request (Request):
        session (requests.Session)
    Returns:
        SuccessResult: the content of the response, as bytes, and its
            metadata.
    Raises:
        NetworkError: if the request fails, or if the server responds with an
            HTTP error code (4XX or 5XX).
    """
    params = request.params
    response = session.request(method=request.verb, url=request.url,
                               **params)

    _logger.log(5, 'request %s -> %s', request, response.status_code)

    response.raise_for_status()

    return SuccessResult(response.content,
                         ResponseMetadata.from_response(request, response))
