from urllib.parse import parse_qs
from wsgiref.util import request_uri

import scrapy
from scrapy.utils.httpobj import urlparse_cached
from scrapy.utils.python import to_unicode


class IncomingRequest(scrapy.Request):
    """
    Read-only view of a request received by the web application.
    It exposes only what PrerenderMiddleware needs to decide whether
    a request should be prerendered and to build the Prerender request.
    """

    @classmethod
    def from_environ(cls, environ):
        """ Build an IncomingRequest from a WSGI environ """
        headers = {}
        for key, value in environ.items():
            if key.startswith('HTTP_'):
                headers[key[5:].replace('_', '-').title()] = value
        for key in ('CONTENT_TYPE', 'CONTENT_LENGTH'):
            if environ.get(key):
                headers[key.replace('_', '-').title()] = environ[key]
        return cls(
            request_uri(environ, include_query=True),
            method=environ.get('REQUEST_METHOD', 'GET'),
            headers=headers,
        )

    @property
    def path(self):
        return urlparse_cached(self).path or '/'

    @property
    def request_uri(self):
        """ Path with the query string, e.g. ``/blog/post?page=2`` """
        query = urlparse_cached(self).query
        if query:
            return '%s?%s' % (self.path, query)
        return self.path

    @property
    def query(self):
        return parse_qs(urlparse_cached(self).query, keep_blank_values=True)

    @property
    def host(self):
        """ Host name without the port; IPv6 literals keep their brackets """
        netloc = urlparse_cached(self).netloc.rpartition('@')[2]
        if netloc.startswith('['):
            return netloc[:netloc.find(']') + 1].lower()
        return netloc.partition(':')[0].lower()

    @property
    def is_secure(self):
        return urlparse_cached(self).scheme == 'https'

    @property
    def user_agent(self):
        return self._header('User-Agent')

    @property
    def referer(self):
        return self._header('Referer')

    @property
    def bufferbot(self):
        return self._header('X-Bufferbot')

    def _header(self, name):
        value = self.headers.get(name)
        if value is None:
            return None
        return to_unicode(value)
