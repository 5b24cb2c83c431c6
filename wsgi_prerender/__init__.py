from .config import PrerenderConfig, get_settings
from .exceptions import (
    PrerenderError,
    TransportError,
    UpstreamError,
    ConfigurationError,
)
from .matching import matches, is_listed
from .classifier import should_prerender, is_crawler
from .outcome import Outcome
from .request import IncomingRequest
from .response import PrerenderResponse, translate_response
from .fetcher import PrerenderFetcher
from .middleware import PrerenderMiddleware
from .wsgi import PrerenderWSGIMiddleware, WSGIResponder
