import logging

from wsgi_prerender.classifier import should_prerender
from wsgi_prerender.config import PrerenderConfig
from wsgi_prerender.fetcher import PrerenderFetcher
from wsgi_prerender.outcome import Outcome
from wsgi_prerender.response import translate_response


logger = logging.getLogger(__name__)


class PrerenderMiddleware(object):
    """
    Serves pages rendered by Prerender to crawlers and passes all other
    requests to the application.

    It is framework-agnostic: :meth:`handle` needs an IncomingRequest,
    a ``continuation`` callable which hands the request to the rest of
    the application and a ``responder`` which knows how to build
    redirects, prerendered responses and error responses for the host
    framework. See ``wsgi_prerender.wsgi.WSGIResponder``.
    """

    def __init__(self, config, fetcher=None):
        self.config = config
        if fetcher is None:
            fetcher = PrerenderFetcher(config)
        self.fetcher = fetcher

    @classmethod
    def from_settings(cls, settings=None, client=None):
        config = PrerenderConfig.from_settings(settings)
        return cls(config, PrerenderFetcher(config, client=client))

    def process_request(self, request):
        """ Decide what to do with ``request``; return an Outcome """
        if not should_prerender(request, self.config):
            return Outcome.pass_through()

        outcome = self.fetcher.fetch(request)
        if outcome.kind == Outcome.RESPOND:
            outcome = translate_response(outcome.response, self.config)
        logger.debug("%(request)s: %(outcome)r",
                     {'request': request, 'outcome': outcome})
        return outcome

    def handle(self, request, continuation, responder):
        outcome = self.process_request(request)

        if outcome.kind == Outcome.PASS_THROUGH:
            return continuation(request)
        if outcome.kind == Outcome.REDIRECT:
            return responder.redirect(outcome.location, outcome.status)
        if outcome.kind == Outcome.RESPOND:
            return responder.respond(outcome.response)
        if outcome.kind == Outcome.TERMINATE:
            return responder.abort(outcome.status)
        raise outcome.error

    def close(self):
        self.fetcher.close()
