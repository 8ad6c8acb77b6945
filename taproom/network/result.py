# -*- coding: utf-8 -*-


class ResponseMetadata(object):
    """Information about an HTTP exchange, apart from the payload.

    Attributes:
        url (str): URL of the request.
        request (str): representation of the request, ex: "GET http://...".
        status_code (int): HTTP status code, or None if no response has been
            received.
        reason (str): HTTP status text, or None.
        headers (dict): response headers. Empty if no response has been
            received.
    """

    def __init__(self, url, request=None, status_code=None, reason=None,
                 headers=None):
        self.url = url
        self.request = request or url
        self.status_code = status_code
        self.reason = reason
        self.headers = dict(headers or {})

    @classmethod
    def from_response(cls, request, response):
        """Build the metadata of a requests' Response.

        Args:
            request (Request): the request sent.
            response (requests.Response)
        """
        return cls(response.url or request.url, str(request),
                   response.status_code, response.reason, response.headers)

    def __repr__(self):
        return 'ResponseMetadata(%s -> %s)' % (self.request, self.status_code)


class SuccessResult(object):
    """Payload delivered when a fetch succeeds.

    Attributes:
        payload (bytes): raw content of the response.
        metadata (ResponseMetadata)
    """

    def __init__(self, payload, metadata):
        self.payload = payload
        self.metadata = metadata

    def __repr__(self):
        return 'SuccessResult(%s bytes, %r)' % (len(self.payload),
                                                self.metadata)


class FailureResult(object):
    """Payload delivered when a fetch fails.

    Attributes:
        error (NetworkError): the cause of the failure.
        metadata (ResponseMetadata)
    """

    def __init__(self, error, metadata):
        self.error = error
        self.metadata = metadata

    def __repr__(self):
        return 'FailureResult(%r, %r)' % (self.error, self.metadata)
