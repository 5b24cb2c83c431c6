import logging

from scrapy.http import Headers, Response
from scrapy.utils.python import to_unicode

from wsgi_prerender.outcome import Outcome


logger = logging.getLogger(__name__)


class PrerenderResponse(Response):
    """
    A page rendered by Prerender. ``response.url`` is the URL of the
    original page; the URL of the Prerender request which produced it is
    available as ``response.real_url``.
    """
    def __init__(self, url, *args, **kwargs):
        self.real_url = kwargs.pop('real_url', None)
        super(PrerenderResponse, self).__init__(url, *args, **kwargs)

    @classmethod
    def from_httpx(cls, response, url, request=None):
        """ Create a PrerenderResponse from an ``httpx.Response`` """
        headers = Headers()
        for name, value in response.headers.multi_items():
            headers.appendlist(name, value)
        return cls(
            url,
            status=response.status_code,
            headers=headers,
            body=response.content,
            request=request,
            real_url=str(response.url),
        )

    @property
    def location(self):
        location = self.headers.get('Location')
        if location is None:
            return None
        return to_unicode(location)

    def replace(self, *args, **kwargs):
        """Create a new Response with the same attributes except for those
        given new values.
        """
        for x in ['url', 'status', 'headers', 'body', 'request', 'flags',
                  'real_url']:
            kwargs.setdefault(x, getattr(self, x))
        cls = kwargs.pop('cls', self.__class__)
        return cls(*args, **kwargs)


def is_redirect(response):
    return 300 <= response.status < 400


def translate_response(response, config):
    """
    Turn a Prerender response into an Outcome. Unless soft HTTP codes are
    enabled, 3xx responses become redirects to their Location header;
    everything else is returned as-is.
    """
    if not config.soft_http_codes and is_redirect(response):
        logger.debug("Prerender redirects %(url)s to %(location)s (%(status)d)",
                     {'url': response.url, 'location': response.location,
                      'status': response.status})
        return Outcome.redirect(response.location, response.status)
    return Outcome.respond(response.replace())
