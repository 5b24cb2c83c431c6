"""
WSGI binding for PrerenderMiddleware::

    from wsgi_prerender import PrerenderWSGIMiddleware

    application = PrerenderWSGIMiddleware.from_settings(application, {
        'PRERENDER_TOKEN': 'my-token',
    })
"""
import logging
from wsgiref.util import is_hop_by_hop

import httpx
from scrapy.utils.python import to_unicode

from wsgi_prerender.middleware import PrerenderMiddleware
from wsgi_prerender.request import IncomingRequest


logger = logging.getLogger(__name__)


def status_line(status):
    return '%d %s' % (status, httpx.codes.get_reason_phrase(status) or 'Unknown')


class WSGIResponder(object):
    """ Builds WSGI responses for PrerenderMiddleware outcomes """

    # httpx returns decoded bodies, so these don't describe them anymore
    skip_headers = {'content-encoding', 'content-length'}

    def __init__(self, start_response):
        self.start_response = start_response

    def redirect(self, location, status):
        self.start_response(status_line(status), [
            ('Location', location),
            ('Content-Length', '0'),
        ])
        return [b'']

    def respond(self, response):
        headers = []
        for name, values in response.headers.items():
            name = to_unicode(name)
            if is_hop_by_hop(name) or name.lower() in self.skip_headers:
                continue
            headers.extend((name, to_unicode(value)) for value in values)
        headers.append(('Content-Length', str(len(response.body))))
        self.start_response(status_line(response.status), headers)
        return [response.body]

    def abort(self, status):
        body = status_line(status).split(' ', 1)[1].encode('ascii')
        self.start_response(status_line(status), [
            ('Content-Type', 'text/plain; charset=utf-8'),
            ('Content-Length', str(len(body))),
        ])
        return [body]


class PrerenderWSGIMiddleware(object):
    """
    WSGI middleware which serves prerendered pages to crawlers and
    calls the wrapped ``app`` for all other requests.
    """
    def __init__(self, app, middleware):
        self.app = app
        self.middleware = middleware

    @classmethod
    def from_settings(cls, app, settings=None, client=None):
        return cls(app, PrerenderMiddleware.from_settings(settings, client=client))

    def __call__(self, environ, start_response):
        try:
            request = IncomingRequest.from_environ(environ)
        except ValueError as e:
            logger.debug("Can't prerender a request with a malformed URL: %(error)s",
                         {'error': e})
            return self.app(environ, start_response)
        return self.middleware.handle(
            request,
            lambda _: self.app(environ, start_response),
            WSGIResponder(start_response),
        )

    def close(self):
        self.middleware.close()
