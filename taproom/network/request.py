# -*- coding: utf-8 -*-


class Request(object):
    """Represents a request waiting to be executed.

    Attributes:
        verb (str): HTTP verb
        url (str): HTTP URL
        params (dict, optional): additional parameters passed as is to
            ``requests.Session.request()``, like 'params' or 'headers'.
    """

    def __init__(self, verb, url, params=None):
        self.verb = verb
        self.url = url
        self.params = params or {}

    def __str__(self):
        return '%s %s' % (self.verb, self.url)
