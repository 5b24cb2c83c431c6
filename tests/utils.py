from wsgiref.util import setup_testing_defaults

import httpx

from wsgi_prerender import IncomingRequest


GOOGLEBOT = 'Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)'
BROWSER = 'Mozilla/5.0 (X11; Linux x86_64; rv:120.0) Gecko/20100101 Firefox/120.0'


def make_environ(uri='/', method='GET', user_agent=GOOGLEBOT, host='example.com',
                 secure=False, headers=None):
    path, _, query = uri.partition('?')
    environ = {
        'REQUEST_METHOD': method,
        'PATH_INFO': path,
        'QUERY_STRING': query,
        'HTTP_HOST': host,
        'wsgi.url_scheme': 'https' if secure else 'http',
    }
    if user_agent is not None:
        environ['HTTP_USER_AGENT'] = user_agent
    for name, value in (headers or {}).items():
        environ['HTTP_' + name.upper().replace('-', '_')] = value
    setup_testing_defaults(environ)
    return environ


def make_request(uri='/', **kwargs):
    return IncomingRequest.from_environ(make_environ(uri, **kwargs))


def mock_client(handler):
    """ httpx.Client which sends requests to ``handler`` """
    return httpx.Client(transport=httpx.MockTransport(handler))


def html_handler(html=b'<html><body>prerendered</body></html>', status=200,
                 headers=None):
    """ Handler which answers every request with the same page
    and keeps received requests in ``handler.requests`` """
    def handler(request):
        handler.requests.append(request)
        response_headers = {'Content-Type': 'text/html; charset=utf-8'}
        response_headers.update(headers or {})
        return httpx.Response(status, headers=response_headers, content=html)
    handler.requests = []
    return handler


def failing_handler(exc_class=httpx.ReadTimeout):
    def handler(request):
        raise exc_class("Prerender is down", request=request)
    return handler


class CollectingResponder(object):
    """ Responder which returns what it was asked to build """
    def redirect(self, location, status):
        return ('redirect', location, status)

    def respond(self, response):
        return ('respond', response)

    def abort(self, status):
        return ('abort', status)


def application(environ, start_response):
    start_response('200 OK', [('Content-Type', 'text/plain')])
    return [b'dynamic page']
