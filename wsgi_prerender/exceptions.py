from scrapy.exceptions import NotConfigured


class PrerenderError(Exception):
    """ Base class for errors raised while talking to Prerender """


class TransportError(PrerenderError):
    """ Prerender could not be reached (timeout, connection error, etc.) """


class UpstreamError(PrerenderError):
    """
    Prerender answered with a status code which can't be passed to the
    client. The response is available as ``error.response``.
    """
    def __init__(self, message, response=None):
        super(UpstreamError, self).__init__(message)
        self.response = response


class ConfigurationError(NotConfigured):
    """ Prerender settings are missing or invalid """
