import logging
from urllib.parse import quote_plus

import httpx

from wsgi_prerender.exceptions import TransportError, UpstreamError
from wsgi_prerender.outcome import Outcome
from wsgi_prerender.response import PrerenderResponse, is_redirect


logger = logging.getLogger(__name__)


class PrerenderFetcher(object):
    """
    Fetches prerendered pages from Prerender.

    Redirects returned by Prerender are followed only when soft HTTP codes
    are enabled; otherwise 3xx responses are returned as they are, so that
    their Location header can be used to redirect the client.
    """
    token_header = 'X-Prerender-Token'

    def __init__(self, config, client=None):
        self.config = config
        self.follow_redirects = config.soft_http_codes
        self._owns_client = client is None
        if client is None:
            client = httpx.Client(timeout=config.timeout,
                                  follow_redirects=self.follow_redirects)
        self.client = client

    def render_url(self, request):
        """ Prerender URL for the page requested by ``request`` """
        protocol = 'https' if request.is_secure else 'http'
        # "/" would otherwise end up as "//" in the page URL; unlike the
        # leading slash, a trailing one is kept ("/blog/" -> "blog/")
        path = request.path[1:] if request.path.startswith('/') else request.path
        page_url = '%s://%s/%s' % (protocol, request.host, path)
        return '%s/%s' % (self.config.url, quote_plus(page_url, safe=''))

    def render_headers(self, request):
        headers = {'User-Agent': request.user_agent}
        if self.config.token:
            headers[self.token_header] = self.config.token
        return headers

    def fetch(self, request):
        """
        Request a prerendered page for ``request`` and return an Outcome:
        RESPOND with a PrerenderResponse, TERMINATE for a Prerender 404 when
        soft HTTP codes are disabled, PROPAGATE for failures in debug mode
        and PASS_THROUGH for failures otherwise.
        """
        url = self.render_url(request)
        try:
            response = self.client.get(url, headers=self.render_headers(request),
                                       follow_redirects=self.follow_redirects,
                                       timeout=self.config.timeout)
        except httpx.HTTPError as e:
            error = TransportError("Prerender request %s failed: %s" % (url, e))
            error.__cause__ = e
            return self._failure(request, error)

        prerendered = PrerenderResponse.from_httpx(response, request.url,
                                                   request=request)
        soft = self.config.soft_http_codes

        if response.status_code == 404 and not soft:
            logger.debug("Prerender returned 404 for %(request)s",
                         {'request': request})
            return Outcome.terminate(404)

        if response.is_server_error or (response.is_client_error and not soft):
            return self._failure(request, UpstreamError(
                "Prerender returned HTTP %d for %s" % (response.status_code, url),
                response=prerendered,
            ))

        if not soft and is_redirect(prerendered) and not prerendered.location:
            return self._failure(request, UpstreamError(
                "Prerender returned HTTP %d without Location for %s" % (
                    response.status_code, url),
                response=prerendered,
            ))

        return Outcome.respond(prerendered)

    def _failure(self, request, error):
        # In debug mode the error is raised to the caller; otherwise the
        # request is passed to the application and no prerendered page is shown.
        if self.config.debug:
            return Outcome.propagate(error)
        logger.warning("%(error)s; %(request)s will be handled without Prerender",
                       {'error': error, 'request': request})
        return Outcome.pass_through()

    def close(self):
        if self._owns_client:
            self.client.close()
