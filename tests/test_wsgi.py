import gzip
from urllib.parse import unquote_plus

import httpx
import pytest

from wsgi_prerender import PrerenderWSGIMiddleware, TransportError

from .utils import (
    make_environ,
    mock_client,
    html_handler,
    failing_handler,
    application,
    BROWSER,
)


class StartResponse(object):
    def __call__(self, status, headers, exc_info=None):
        self.status = status
        self.headers = headers

    def header(self, name):
        values = [v for k, v in self.headers if k.lower() == name.lower()]
        return values[-1] if values else None


def _call(app, environ):
    start_response = StartResponse()
    body = b''.join(app(environ, start_response))
    return start_response, body


def _app(settings, handler, **overrides):
    return PrerenderWSGIMiddleware.from_settings(
        application, dict(settings, **overrides), client=mock_client(handler))


def test_passthrough(settings):
    app = _app(settings, html_handler())
    start_response, body = _call(app, make_environ('/', user_agent=BROWSER))
    assert start_response.status == '200 OK'
    assert body == b'dynamic page'


def test_prerendered_page(settings):
    handler = html_handler(headers={'X-Custom': 'yes', 'Connection': 'keep-alive'})
    app = _app(settings, handler)
    start_response, body = _call(app, make_environ('/about', host='example.com',
                                                   secure=True))
    assert start_response.status == '200 OK'
    assert body == b'<html><body>prerendered</body></html>'
    assert start_response.header('X-Custom') == 'yes'
    assert start_response.header('Content-Type') == 'text/html; charset=utf-8'
    assert start_response.header('Content-Length') == str(len(body))
    assert start_response.header('Connection') is None

    sent, = handler.requests
    assert sent.url.host == 'prerender.test'
    assert unquote_plus(sent.url.raw_path.decode('ascii')[1:]) == 'https://example.com/about'


def test_compressed_prerendered_page(settings):
    html = b'<html><body>' + b'x' * 1000 + b'</body></html>'

    def handler(request):
        return httpx.Response(200, content=gzip.compress(html), headers={
            'Content-Type': 'text/html',
            'Content-Encoding': 'gzip',
        })

    start_response, body = _call(_app(settings, handler), make_environ('/'))
    assert body == html
    assert start_response.header('Content-Encoding') is None
    assert start_response.header('Content-Length') == str(len(html))


def test_redirect(settings):
    def handler(request):
        return httpx.Response(302, headers={'Location': 'https://example.com/new'})

    app = _app(settings, handler, PRERENDER_SOFT_HTTP_CODES=False)
    start_response, body = _call(app, make_environ('/old'))
    assert start_response.status == '302 Found'
    assert start_response.header('Location') == 'https://example.com/new'
    assert body == b''


def test_soft_404(settings):
    app = _app(settings, html_handler(status=404), PRERENDER_SOFT_HTTP_CODES=True)
    start_response, body = _call(app, make_environ('/missing'))
    assert start_response.status == '404 Not Found'
    assert b'prerendered' in body


def test_hard_404(settings):
    app = _app(settings, html_handler(status=404), PRERENDER_SOFT_HTTP_CODES=False)
    start_response, body = _call(app, make_environ('/missing'))
    assert start_response.status == '404 Not Found'
    assert start_response.header('Content-Type') == 'text/plain; charset=utf-8'
    assert body == b'Not Found'


def test_failure_falls_through(settings):
    app = _app(settings, failing_handler(httpx.ConnectError))
    start_response, body = _call(app, make_environ('/'))
    assert body == b'dynamic page'


def test_failure_in_debug_mode(settings):
    app = _app(settings, failing_handler(httpx.ConnectError), PRERENDER_DEBUG=True)
    with pytest.raises(TransportError):
        _call(app, make_environ('/'))


def test_malformed_host_is_passed_through(settings):
    handler = html_handler()
    app = _app(settings, handler)
    start_response, body = _call(app, make_environ('/', user_agent=BROWSER,
                                                   host='[::1'))
    assert start_response.status == '200 OK'
    assert body == b'dynamic page'
    assert handler.requests == []


def test_ipv6_host(settings):
    handler = html_handler()
    app = _app(settings, handler)
    _call(app, make_environ('/x', host='[::1]:8080'))
    sent, = handler.requests
    assert unquote_plus(sent.url.raw_path.decode('ascii')[1:]) == 'http://[::1]/x'
