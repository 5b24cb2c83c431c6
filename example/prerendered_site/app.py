"""
A single page application served through PrerenderMiddleware.

Start a Prerender server on port 3000, run this module and compare::

    curl http://127.0.0.1:8000/
    curl -A Googlebot http://127.0.0.1:8000/
"""
import logging
from wsgiref.simple_server import make_server

from scrapy.settings import BaseSettings

from wsgi_prerender import PrerenderWSGIMiddleware, get_settings

import settings


PAGE = b"""<html><body>
<div id="app"></div>
<script>document.getElementById('app').innerHTML = 'hello world!';</script>
</body></html>"""


def spa(environ, start_response):
    start_response('200 OK', [('Content-Type', 'text/html; charset=utf-8')])
    return [PAGE]


def main():
    logging.basicConfig(level=logging.DEBUG)
    project_settings = BaseSettings()
    project_settings.setmodule(settings)
    app = PrerenderWSGIMiddleware.from_settings(spa, get_settings(project_settings))
    with make_server('127.0.0.1', 8000, app) as server:
        server.serve_forever()


if __name__ == '__main__':
    main()
